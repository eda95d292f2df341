"""API for querying tokens."""

from typing import Any

from ..core.types import TokenGroup, TokenSum
from ..paging.query import ParamsLike, Query


class TokensAPI:
    """
    API for interacting with tokens.

    ``list`` returns token groups (tokens sharing flavor, account and tags);
    ``sum`` returns amounts summed over the ``group_by`` fields, e.g.
    ``QueryParams(group_by=["accountId", "flavorId"])``.
    """

    resource = 'tokens'

    def __init__(self, client: Any):
        self.client = client

    def list(self, params: ParamsLike = None) -> Query[TokenGroup]:
        """Query token groups matching the given filter."""
        return Query(self.client, self.resource, 'list', '/list-tokens', params, item_model=TokenGroup)

    def sum(self, params: ParamsLike = None) -> Query[TokenSum]:
        """Query token sums matching the given filter."""
        return Query(self.client, self.resource, 'sum', '/sum-tokens', params, item_model=TokenSum)
