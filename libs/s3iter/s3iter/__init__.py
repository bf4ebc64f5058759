"""Lazy paginated iteration over S3 object listings."""

from s3iter.cursor import PaginatedListCursor, collect_keys
from s3iter.exceptions import ConfigurationError, ListFetchError, S3IterError
from s3iter.models import (
    CursorState,
    Exhausted,
    HasMore,
    ListRequest,
    NotYetFetched,
    Page,
    S3Object,
)
from s3iter.pagination import iter_objects, iter_pages
from s3iter.transport import ListingTransport, build_transport

__all__ = [
    "ConfigurationError",
    "CursorState",
    "Exhausted",
    "HasMore",
    "ListFetchError",
    "ListRequest",
    "ListingTransport",
    "NotYetFetched",
    "Page",
    "PaginatedListCursor",
    "S3IterError",
    "S3Object",
    "build_transport",
    "collect_keys",
    "iter_objects",
    "iter_pages",
]
