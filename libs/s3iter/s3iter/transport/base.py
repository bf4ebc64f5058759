"""Listing transport base class."""

from abc import ABC, abstractmethod

from s3iter.models import ListRequest, Page


class ListingTransport(ABC):
    """Abstract source of listing pages.

    A transport is shared: cursors hold a reference to it but never close it.
    """

    @abstractmethod
    async def fetch_page(
        self,
        request: ListRequest,
        continuation_token: str | None = None,
    ) -> Page:
        """Fetch one page of a listing.

        Args:
            request: Fixed listing parameters.
            continuation_token: Token from the previous page, or None for the first page.

        Returns:
            The page's items in service order and the next token, if any.

        Raises:
            ListFetchError: The call did not complete successfully.
        """
        ...

    async def close(self) -> None:
        return None
