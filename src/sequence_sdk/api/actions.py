"""API for querying actions."""

from typing import Any

from ..core.types import ActionRecord, ActionSum
from ..paging.query import ParamsLike, Query


class ActionsAPI:
    """API for querying the actions recorded in committed transactions."""

    resource = 'actions'

    def __init__(self, client: Any):
        self.client = client

    def list(self, params: ParamsLike = None) -> Query[ActionRecord]:
        return Query(self.client, self.resource, 'list', '/list-actions', params, item_model=ActionRecord)

    def sum(self, params: ParamsLike = None) -> Query[ActionSum]:
        return Query(self.client, self.resource, 'sum', '/sum-actions', params, item_model=ActionSum)
