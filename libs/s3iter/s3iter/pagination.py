"""Blocking page iteration for callers without an event loop."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from s3iter.exceptions import ConfigurationError
from s3iter.models import ListRequest, Page, S3Object
from s3iter.transport.s3 import list_page_v1, list_page_v2


def iter_pages(client: Any, request: ListRequest, *, api: str = "v2") -> Iterator[Page]:
    """Iterate over listing pages.

    This centralizes the continuation loop for `list_objects_v2` and the
    marker-based `list_objects`.
    """
    name = str(api or "v2").strip().lower()
    if name == "v2":
        fetch = list_page_v2
    elif name == "v1":
        fetch = list_page_v1
    else:
        raise ConfigurationError(f"Unknown listing api: {api!r} (expected: v2/v1)")

    token: str | None = None
    while True:
        page = fetch(client, request, token)
        yield page

        if page.next_token is None:
            break
        token = page.next_token


def iter_objects(client: Any, request: ListRequest, *, api: str = "v2") -> Iterator[S3Object]:
    for page in iter_pages(client, request, api=api):
        yield from page.items
