"""Transaction building functionality for the Sequence SDK."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..core.exceptions import BuilderError
from ..core.types import (
    Action,
    IssueAction,
    RetireAction,
    TransactionRequest,
    TransferAction,
)

logger = logging.getLogger(__name__)


class TransactionBuilder:
    """
    Accumulates actions for a single transaction.

    A builder is handed to the function passed to
    ``TransactionsAPI.transact`` and is frozen as soon as that function
    returns. Actions are submitted in the order they were added; nothing
    is reordered or deduplicated. Field values are not checked here, the
    ledger validates them when the transaction is submitted.

    Example:
        ```python
        def build(builder):
            builder.issue(flavor_id="usd", amount=100, destination_account_id="alice")
            builder.transfer(
                flavor_id="usd",
                amount=25,
                source_account_id="alice",
                destination_account_id="bob",
                action_tags={"invoice": "42"},
            )

        tx = await client.transactions.transact(build)
        ```
    """

    def __init__(self):
        self._actions: List[Action] = []
        self._reference_data: Optional[Dict[str, Any]] = None
        self._frozen = False

    def _ensure_open(self) -> None:
        if self._frozen:
            raise BuilderError("Transaction builder has already been submitted")

    def _add(self, action: Action) -> None:
        self._ensure_open()
        self._actions.append(action)
        logger.debug(f"Added {action.type} action ({len(self._actions)} total)")

    def issue(self, **fields: Any) -> None:
        """Add an action that issues tokens.

        Args:
            flavor_id: ID of flavor to be issued
            amount: Amount of the flavor to be issued
            destination_account_id: Account receiving the tokens
            destination_account_alias: Deprecated, use destination_account_id
            token_tags: Tags to add to the receiving tokens
            action_tags: Tags to add to the action
            reference_data: Deprecated, use action_tags or token_tags
        """
        self._add(IssueAction(**dict(fields, type='issue')))

    def transfer(self, **fields: Any) -> None:
        """Add an action that moves tokens from one account to another.

        Args:
            flavor_id: ID of flavor to be transferred
            amount: Amount of the flavor to be transferred
            source_account_id: Account the tokens come from
            destination_account_id: Account receiving the tokens
            filter: Token filter string
            filter_params: Parameter values for the filter string
            token_tags: Tags to add to the receiving tokens
            action_tags: Tags to add to the action
            reference_data: Deprecated, use action_tags or token_tags
            change_reference_data: Deprecated, handled by token tags
        """
        self._add(TransferAction(**dict(fields, type='transfer')))

    def retire(self, **fields: Any) -> None:
        """Add an action that retires tokens.

        Args:
            flavor_id: ID of flavor to be retired
            amount: Amount of the flavor to be retired
            source_account_id: Account the tokens come from
            filter: Token filter string
            filter_params: Parameter values for the filter string
            action_tags: Tags to add to the action
            reference_data: Deprecated, use action_tags
            change_reference_data: Deprecated, handled by token tags
        """
        self._add(RetireAction(**dict(fields, type='retire')))

    @property
    def reference_data(self) -> Optional[Dict[str, Any]]:
        """Transaction-level reference data. Deprecated in favor of action tags."""
        return self._reference_data

    @reference_data.setter
    def reference_data(self, value: Optional[Dict[str, Any]]) -> None:
        self._ensure_open()
        self._reference_data = value

    @property
    def actions(self) -> Tuple[Action, ...]:
        """Actions added so far, in order."""
        return tuple(self._actions)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def action_count(self) -> int:
        return len(self._actions)

    def freeze(self) -> TransactionRequest:
        """Stop accepting actions and return the request to submit."""
        self._frozen = True
        return TransactionRequest(
            actions=list(self._actions),
            reference_data=self._reference_data
        )
