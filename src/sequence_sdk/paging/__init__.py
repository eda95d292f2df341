"""Paginated query support shared by every resource API."""

from .page import Page, PageOrigin, resolve_page_fetcher
from .query import (
    Query,
    IterationOutcome,
    STOP,
    query_page,
    query_each,
    query_all,
)

__all__ = [
    "Page",
    "PageOrigin",
    "resolve_page_fetcher",
    "Query",
    "IterationOutcome",
    "STOP",
    "query_page",
    "query_each",
    "query_all",
]
