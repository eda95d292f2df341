"""API for listing and submitting transactions."""

import logging
from typing import Any, Awaitable, Callable, List, Optional

from ..core.callbacks import Callback, with_callback
from ..core.types import Transaction
from ..paging.page import Page
from ..paging.query import (
    Consumer,
    IterationOutcome,
    ParamsLike,
    Query,
    query_all,
    query_each,
    query_page,
)
from .builder import TransactionBuilder

logger = logging.getLogger(__name__)

LIST_PATH = '/list-transactions'
TRANSACT_PATH = '/transact'


class TransactionsAPI:
    """
    API for interacting with transactions.

    A transaction is an ordered list of actions applied atomically by the
    ledger. Supported query parameters are ``filter``, ``filter_params``,
    ``start_time``/``end_time`` (Unix milliseconds), ``timeout`` (server
    deadline in milliseconds) and ``page_size``.
    """

    resource = 'transactions'

    def __init__(self, client: Any):
        self.client = client

    def list(self, params: ParamsLike = None) -> Query[Transaction]:
        """Query transactions matching the given filter."""
        return Query(self.client, self.resource, 'list', LIST_PATH, params, item_model=Transaction)

    def query_page(self, params: ParamsLike = None, callback: Optional[Callback] = None) -> Awaitable[Page[Transaction]]:
        """Get one page of transactions. Deprecated, use ``list().page()``."""
        return query_page(
            self.client, self.resource, 'query_page', LIST_PATH, params,
            callback=callback, item_model=Transaction
        )

    def query_each(
        self,
        params: ParamsLike,
        consumer: Consumer,
        callback: Optional[Callback] = None
    ) -> Awaitable[IterationOutcome]:
        """Call ``consumer`` for every matching transaction. Deprecated, use ``list().each()``."""
        return query_each(
            self.client, self.resource, params, consumer, callback=callback,
            path=LIST_PATH, item_model=Transaction
        )

    def query_all(self, params: ParamsLike = None, callback: Optional[Callback] = None) -> Awaitable[List[Transaction]]:
        """Fetch every matching transaction. Deprecated, use ``list().all()``."""
        return query_all(
            self.client, self.resource, params, callback=callback,
            path=LIST_PATH, item_model=Transaction
        )

    async def _transact(self, builder_fn: Callable[[TransactionBuilder], Any]) -> Transaction:
        builder = TransactionBuilder()
        builder_fn(builder)
        request = builder.freeze()

        logger.info(f"Submitting transaction with {len(request.actions)} actions")
        data = await self.client.request(TRANSACT_PATH, request.to_body())
        transaction = Transaction.model_validate(data)
        logger.info(f"Transaction {transaction.id} committed")
        return transaction

    def transact(
        self,
        builder_fn: Callable[[TransactionBuilder], Any],
        callback: Optional[Callback] = None
    ) -> Awaitable[Transaction]:
        """
        Build and submit a transaction.

        ``builder_fn`` receives a fresh TransactionBuilder and adds actions to
        it. If it raises, the exception is propagated unchanged and nothing
        is sent; otherwise every action is submitted in one request.

        Args:
            builder_fn: Function that adds the desired actions to the builder
            callback: Optional ``callback(error, transaction)``

        Returns:
            Awaitable resolving to the committed Transaction
        """
        return with_callback(self._transact(builder_fn), callback)
