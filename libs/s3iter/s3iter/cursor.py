"""Lazy pull-based cursor over a paginated listing."""

from __future__ import annotations

import logging
from collections import deque

from s3iter.models import CursorState, Exhausted, HasMore, ListRequest, NotYetFetched, S3Object
from s3iter.transport.base import ListingTransport

logger = logging.getLogger(__name__)


class PaginatedListCursor:
    """Return listed objects one at a time, fetching pages only when needed.

    The cursor borrows `transport` (it never closes it) and keeps its own copy
    of the immutable `request`. Only one `next()` call may be in flight at a
    time; there is no internal locking.

    Usage:
        cursor = PaginatedListCursor(transport, ListRequest(bucket="b"))
        while (obj := await cursor.next()) is not None:
            print(obj.key)
    """

    def __init__(self, transport: ListingTransport, request: ListRequest) -> None:
        self._transport = transport
        self._request = request
        self._state: CursorState = NotYetFetched()
        self._buffer: deque[S3Object] = deque()
        self._pages_fetched = 0

    @property
    def request(self) -> ListRequest:
        return self._request

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    async def next(self) -> S3Object | None:
        """Return the next object in service order, or None once the listing is done.

        Raises:
            ListFetchError: The page fetch failed. State and buffer are unchanged,
                so calling `next()` again repeats the same request.
        """
        if self._buffer:
            return self._buffer.popleft()

        if isinstance(self._state, Exhausted):
            return None

        await self._fetch()
        if self._buffer:
            return self._buffer.popleft()
        return None

    async def _fetch(self) -> None:
        token = self._state.continuation_token if isinstance(self._state, HasMore) else None

        # Nothing is assigned until the awaited call returns.
        page = await self._transport.fetch_page(self._request, token)

        self._state = HasMore(page.next_token) if page.next_token is not None else Exhausted()
        self._buffer = deque(page.items)
        self._pages_fetched += 1
        logger.debug(
            "listing page fetched (bucket=%s, page=%d, items=%d, exhausted=%s)",
            self._request.bucket,
            self._pages_fetched,
            len(page.items),
            isinstance(self._state, Exhausted),
        )

    def reset(self) -> None:
        """Restart the traversal from the first page."""
        self._state = NotYetFetched()
        self._buffer.clear()
        self._pages_fetched = 0

    def __aiter__(self) -> "PaginatedListCursor":
        return self

    async def __anext__(self) -> S3Object:
        # `next()` returns None for an empty page that still has a token; keep pulling.
        while True:
            obj = await self.next()
            if obj is not None:
                return obj
            if isinstance(self._state, Exhausted):
                raise StopAsyncIteration


async def collect_keys(cursor: PaginatedListCursor) -> list[str]:
    """Drain `cursor` and return the keys it yields."""
    return [obj.key async for obj in cursor]
