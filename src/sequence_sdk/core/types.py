"""Core type definitions for the Sequence SDK."""

from typing import List, Optional, Dict, Any, Union, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models exchanged with the ledger API in camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow',
    )

    def to_body(self) -> Dict[str, Any]:
        """Wire representation with unset optional fields dropped.

        Extra fields are passed through too; snake_case names among them are
        converted to camelCase like the declared fields.
        """
        body = self.model_dump(by_alias=True, exclude_none=True)
        for key in list(self.model_extra or {}):
            if '_' in key.strip('_') and key in body:
                body[to_camel(key)] = body.pop(key)
        return body


class QueryParams(WireModel):
    """Filter and pagination parameters for list and sum queries.

    ``timeout`` is a server-side deadline in milliseconds; it does not
    abort the request on the client.
    """
    filter: Optional[str] = None
    filter_params: Optional[List[Union[str, int, float]]] = None
    page_size: Optional[int] = None
    group_by: Optional[List[str]] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    timeout: Optional[int] = None
    cursor: Optional[str] = None

    model_config = ConfigDict(frozen=True)


# Actions appended by TransactionBuilder. Values are sent exactly as given;
# the ledger validates them, these only carry the fields and the discriminator.

class IssueAction(WireModel):
    """Issue new tokens of a flavor into an account."""
    type: Literal['issue'] = 'issue'
    amount: Optional[Any] = None
    flavor_id: Optional[Any] = None
    destination_account_id: Optional[Any] = None
    destination_account_alias: Optional[Any] = None  # deprecated
    token_tags: Optional[Any] = None
    action_tags: Optional[Any] = None
    reference_data: Optional[Any] = None  # deprecated


class TransferAction(WireModel):
    """Move tokens from a source account to a destination account."""
    type: Literal['transfer'] = 'transfer'
    amount: Optional[Any] = None
    flavor_id: Optional[Any] = None
    source_account_id: Optional[Any] = None
    source_account_alias: Optional[Any] = None  # deprecated
    destination_account_id: Optional[Any] = None
    destination_account_alias: Optional[Any] = None  # deprecated
    filter: Optional[Any] = None
    filter_params: Optional[Any] = None
    token_tags: Optional[Any] = None
    action_tags: Optional[Any] = None
    reference_data: Optional[Any] = None  # deprecated
    change_reference_data: Optional[Any] = None  # deprecated


class RetireAction(WireModel):
    """Remove tokens from circulation."""
    type: Literal['retire'] = 'retire'
    amount: Optional[Any] = None
    flavor_id: Optional[Any] = None
    source_account_id: Optional[Any] = None
    source_account_alias: Optional[Any] = None  # deprecated
    filter: Optional[Any] = None
    filter_params: Optional[Any] = None
    action_tags: Optional[Any] = None
    reference_data: Optional[Any] = None  # deprecated
    change_reference_data: Optional[Any] = None  # deprecated


Action = Union[IssueAction, TransferAction, RetireAction]


class TransactionRequest(WireModel):
    """Body of a ``/transact`` request."""
    actions: List[Action] = Field(default_factory=list)
    reference_data: Optional[Any] = None

    model_config = ConfigDict(frozen=True)

    def to_body(self) -> Dict[str, Any]:
        body = super().to_body()
        body['actions'] = [action.to_body() for action in self.actions]
        return body


class Transaction(WireModel):
    """A committed ledger transaction."""
    id: Optional[str] = None
    timestamp: Optional[str] = None
    sequence_number: Optional[int] = None
    reference_data: Optional[Dict[str, Any]] = None
    actions: List[Dict[str, Any]] = Field(default_factory=list)


class TokenGroup(WireModel):
    """Tokens sharing a flavor, account and tags."""
    amount: Optional[int] = None
    flavor_id: Optional[str] = None
    flavor_tags: Optional[Dict[str, Any]] = None
    account_id: Optional[str] = None
    account_tags: Optional[Dict[str, Any]] = None
    tags: Optional[Dict[str, Any]] = None


class TokenSum(TokenGroup):
    """Token amounts summed over the requested ``group_by`` fields."""
    pass


class ActionRecord(WireModel):
    """An action as recorded in a committed transaction."""
    id: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[int] = None
    transaction_id: Optional[str] = None
    timestamp: Optional[str] = None
    flavor_id: Optional[str] = None
    source_account_id: Optional[str] = None
    destination_account_id: Optional[str] = None
    tags: Optional[Dict[str, Any]] = None


class ActionSum(WireModel):
    """Action amounts summed over the requested ``group_by`` fields."""
    amount: Optional[int] = None
