"""Lazy queries over paginated ledger results."""

import inspect
import logging
from enum import Enum
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel

from ..core.callbacks import Callback, with_callback
from ..core.types import QueryParams
from .page import Page, PageOrigin

logger = logging.getLogger(__name__)

T = TypeVar('T')

ParamsLike = Union[QueryParams, Mapping[str, Any], None]
Consumer = Callable[[Any], Any]

# Returned by a consumer to stop iteration. Plain ``False`` works too.
STOP = False


class IterationOutcome(str, Enum):
    """How an ``each`` traversal ended."""
    EXHAUSTED = 'exhausted'
    STOPPED = 'stopped'


def build_request_body(base: ParamsLike, overrides: ParamsLike = None) -> Dict[str, Any]:
    """Merge query parameters into one request body.

    Models are dumped to their camelCase wire form. Mappings are taken as
    already being in wire form and are sent verbatim, which is what lets a
    legacy ``next`` object be replayed unchanged.
    """
    body: Dict[str, Any] = {}
    for params in (base, overrides):
        if params is None:
            continue
        if isinstance(params, QueryParams):
            body.update(params.to_body())
        else:
            body.update(params)
    return body


async def _fetch_page(
    client: Any,
    resource: str,
    method: str,
    path: str,
    body: Dict[str, Any],
    item_model: Optional[Type[BaseModel]]
) -> Page:
    logger.debug(f"Fetching page from {path} ({resource}.{method})")
    data = await client.request(path, body)
    page = Page(data, client, PageOrigin(resource, method), item_model)
    logger.debug(f"Received {len(page.items)} items from {path}, last_page={page.last_page}")
    return page


def query_page(
    client: Any,
    resource: str,
    method: str,
    path: str,
    params: ParamsLike = None,
    callback: Optional[Callback] = None,
    item_model: Optional[Type[BaseModel]] = None
) -> Awaitable[Page]:
    """Fetch exactly one page from ``path``.

    Args:
        client: Client used for the request
        resource: Name the resource is registered under on the client
        method: Resource method that produced the page, recorded on the page
        path: API path for the request
        params: Filter and pagination parameters
        callback: Optional ``callback(error, page)``
        item_model: Optional pydantic model for each item

    Returns:
        Awaitable resolving to the Page
    """
    body = build_request_body(params)
    return with_callback(_fetch_page(client, resource, method, path, body, item_model), callback)


async def _consume(first_page: Awaitable[Page], consumer: Consumer) -> IterationOutcome:
    page = await first_page
    delivered = 0
    while True:
        for item in page.items:
            result = consumer(item)
            if inspect.isawaitable(result):
                result = await result
            delivered += 1
            if result is STOP:
                logger.info(f"Iteration stopped by consumer after {delivered} items")
                return IterationOutcome.STOPPED
        if not page.has_next_page:
            logger.info(f"Iteration exhausted after {delivered} items")
            return IterationOutcome.EXHAUSTED
        page = await page.next_page()


async def _collect(first_page: Awaitable[Page]) -> List[Any]:
    items: List[Any] = []
    await _consume(first_page, items.append)
    return items


def query_each(
    client: Any,
    resource: str,
    params: ParamsLike,
    consumer: Consumer,
    callback: Optional[Callback] = None,
    method: str = 'query_page',
    path: Optional[str] = None,
    item_model: Optional[Type[BaseModel]] = None
) -> Awaitable[IterationOutcome]:
    """Call ``consumer`` once per item across every page of a query.

    Pages are fetched one at a time, only after the consumer has handled
    the previous page. A consumer returning ``False`` stops the traversal
    without fetching anything further; any other return value, ``0`` and
    ``None`` included, continues it.

    Returns:
        Awaitable resolving to an IterationOutcome
    """
    path = path or f"/list-{resource}"
    first = _fetch_page(client, resource, method, path, build_request_body(params), item_model)
    return with_callback(_consume(first, consumer), callback)


def query_all(
    client: Any,
    resource: str,
    params: ParamsLike,
    callback: Optional[Callback] = None,
    method: str = 'query_page',
    path: Optional[str] = None,
    item_model: Optional[Type[BaseModel]] = None
) -> Awaitable[List[Any]]:
    """Fetch every item of a query into one list.

    Memory use is unbounded; prefer ``query_each`` for large result sets.
    """
    path = path or f"/list-{resource}"
    first = _fetch_page(client, resource, method, path, build_request_body(params), item_model)
    return with_callback(_collect(first), callback)


class Query(Generic[T]):
    """
    A lazy description of a filtered query against one resource.

    Nothing is fetched when a Query is built. Each call to ``page``, ``each``,
    ``all`` or ``pages`` (and each ``async for``) starts a fresh traversal
    from the first page; continuation state lives only on the returned pages.

    Example:
        ```python
        query = client.transactions.list(QueryParams(filter="actions(type=$1)", filter_params=["issue"]))

        page = await query.page({"pageSize": 10})
        while page.has_next_page:
            page = await page.next_page()

        async for tx in query:
            print(tx.id)
        ```
    """

    def __init__(
        self,
        client: Any,
        resource: str,
        method: str,
        path: str,
        params: ParamsLike = None,
        item_model: Optional[Type[BaseModel]] = None
    ):
        self.client = client
        self.resource = resource
        self.method = method
        self.path = path
        self.params: Dict[str, Any] = build_request_body(params)
        self.item_model = item_model

    def __repr__(self) -> str:
        return f"Query({self.resource}.{self.method}, path={self.path!r}, params={self.params!r})"

    def _first_page(self, params: ParamsLike) -> Awaitable[Page[T]]:
        body = build_request_body(self.params, params)
        return _fetch_page(self.client, self.resource, self.method, self.path, body, self.item_model)

    def page(self, params: ParamsLike = None, callback: Optional[Callback] = None) -> Awaitable[Page[T]]:
        """Fetch one page.

        Args:
            params: Pagination parameters merged over the query's own, e.g.
                ``{"pageSize": 50}`` or a continuation ``{"cursor": ...}``
            callback: Optional ``callback(error, page)``
        """
        return with_callback(self._first_page(params), callback)

    def each(
        self,
        consumer: Consumer,
        params: ParamsLike = None,
        callback: Optional[Callback] = None
    ) -> Awaitable[IterationOutcome]:
        """Call ``consumer(item)`` for every result, in order, across pages.

        The consumer may be a plain function or a coroutine function. Only
        ``False`` itself (``STOP``) stops iteration; ``None`` and every other
        value, including falsy ones such as ``0`` or ``""``, continue. Items
        already delivered before an error are not rolled back.

        Returns:
            Awaitable resolving to ``IterationOutcome.EXHAUSTED`` or
            ``IterationOutcome.STOPPED``
        """
        logger.info(f"Iterating {self.resource}.{self.method}")
        return with_callback(_consume(self._first_page(params), consumer), callback)

    def all(self, params: ParamsLike = None, callback: Optional[Callback] = None) -> Awaitable[List[T]]:
        """Fetch every result into one list. Memory use grows with the result set."""
        logger.info(f"Fetching all results of {self.resource}.{self.method}")
        return with_callback(_collect(self._first_page(params)), callback)

    async def pages(self, params: ParamsLike = None) -> AsyncIterator[Page[T]]:
        """Yield each page in turn, fetching the next only when asked for it."""
        page = await self._first_page(params)
        yield page
        while page.has_next_page:
            page = await page.next_page()
            yield page

    async def __aiter__(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.items:
                yield item
