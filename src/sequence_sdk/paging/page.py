"""Pages of query results and the logic for fetching the page after them."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.callbacks import Callback, with_callback
from ..core.exceptions import ContinuationResolutionError, NoMorePagesError

logger = logging.getLogger(__name__)

T = TypeVar('T')

PageFetcher = Callable[[Dict[str, Any]], Awaitable['Page']]

# Methods that build a Query rather than fetching a page themselves.
QUERY_CONSTRUCTORS = ('list', 'sum')


@dataclass(frozen=True)
class PageOrigin:
    """How a page was produced: a registered resource and one of its methods."""
    resource: str
    method: str

    def to_dict(self) -> Dict[str, str]:
        return {'resource': self.resource, 'method': self.method}

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> 'PageOrigin':
        return cls(resource=data['resource'], method=data['method'])


def resolve_page_fetcher(client: Any, origin: PageOrigin) -> PageFetcher:
    """Find the coroutine function that fetches further pages for ``origin``.

    ``list``/``sum`` origins go through a fresh, unfiltered query on the
    resource; the continuation carries everything else. Other methods are
    called directly, falling back to the resource's ``query_page``.

    Raises:
        ContinuationResolutionError: The resource is not registered on the
            client or exposes no usable method
    """
    resources = getattr(client, 'resources', None) or {}
    owner = resources.get(origin.resource)
    if owner is None:
        raise ContinuationResolutionError(
            f"Resource {origin.resource!r} is not registered on the client",
            resource=origin.resource,
            method=origin.method
        )

    member = getattr(owner, origin.method, None)
    if callable(member):
        if origin.method in QUERY_CONSTRUCTORS:
            return lambda params: member().page(params)
        return member

    fallback = getattr(owner, 'query_page', None)
    if callable(fallback):
        return fallback

    raise ContinuationResolutionError(
        f"Resource {origin.resource!r} has no method {origin.method!r} and no query_page",
        resource=origin.resource,
        method=origin.method
    )


def _parse_item(item: Any, item_model: Optional[Type[BaseModel]]) -> Any:
    if item_model is None or not isinstance(item, Mapping):
        return item
    return item_model.model_validate(item)


class Page(Generic[T]):
    """
    One page of results returned from a query.

    A page remembers the resource and method that produced it, so the next
    page can be requested from any page object without going back to the
    original query. Pages are never mutated; ``next_page`` returns a new one.

    Attributes:
        items: Results in the order the ledger returned them
        cursor: Opaque token for the next page, empty when not provided
        next: Legacy query object for the next page (deprecated, used only
            when ``cursor`` is empty)
        last_page: True when no further pages exist
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        client: Any,
        origin: PageOrigin,
        item_model: Optional[Type[BaseModel]] = None
    ):
        """
        Build a page from one API response.

        Args:
            data: Decoded response body for a single page
            client: Client the page was fetched through
            origin: Resource and method that produced the page
            item_model: Optional pydantic model for each item

        Raises:
            ContinuationResolutionError: ``origin`` cannot be resolved on ``client``
        """
        self.items: List[T] = [_parse_item(item, item_model) for item in data.get('items') or []]
        self.cursor: str = data.get('cursor') or ''
        self.next: Dict[str, Any] = dict(data.get('next') or {})
        self.last_page: bool = bool(data.get('lastPage', False))
        self.client = client
        self.origin = origin
        self._fetch_next = resolve_page_fetcher(client, origin)

    def __repr__(self) -> str:
        return (
            f"Page(items={len(self.items)}, cursor={self.cursor!r}, "
            f"last_page={self.last_page}, origin={self.origin})"
        )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def has_next_page(self) -> bool:
        return not self.last_page and bool(self.cursor or self.next)

    def continuation(self) -> Dict[str, Any]:
        """Request parameters for the page after this one.

        Raises:
            NoMorePagesError: This is the last page, or the ledger sent no
                continuation data
        """
        if self.last_page:
            raise NoMorePagesError("Already on the last page", details={'origin': self.origin.to_dict()})
        if self.cursor:
            return {'cursor': self.cursor}
        if self.next:
            return dict(self.next)
        raise NoMorePagesError("Page carries neither a cursor nor a next query", details={'origin': self.origin.to_dict()})

    async def _next_page(self) -> 'Page[T]':
        params = self.continuation()
        logger.debug(f"Fetching next page for {self.origin.resource}.{self.origin.method}")
        return await self._fetch_next(params)

    def next_page(self, callback: Optional[Callback] = None) -> Awaitable['Page[T]']:
        """
        Fetch the next page of data for the query that produced this page.

        Args:
            callback: Optional ``callback(error, page)``, fired exactly once

        Returns:
            Awaitable resolving to a new Page

        Raises:
            NoMorePagesError: This is the last page
        """
        return with_callback(self._next_page(), callback)
