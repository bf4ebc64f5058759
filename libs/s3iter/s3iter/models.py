"""Listing models: request parameters, listed objects, pages and cursor state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Union

from s3iter.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListRequest:
    """Fixed parameters of one listing. Never carries a continuation token."""

    bucket: str
    prefix: str | None = None
    delimiter: str | None = None
    start_after: str | None = None
    max_keys: int | None = None

    def __post_init__(self) -> None:
        if not str(self.bucket or "").strip():
            raise ConfigurationError("ListRequest.bucket must be a non-empty string")
        if self.max_keys is None:
            return
        try:
            max_keys = int(self.max_keys)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"ListRequest.max_keys must be an integer (got {self.max_keys!r})") from exc
        if max_keys < 1:
            raise ConfigurationError(f"ListRequest.max_keys must be >= 1 (got {self.max_keys!r})")


@dataclass(frozen=True)
class S3Object:
    key: str
    size: int | None = None
    etag: str | None = None
    last_modified: datetime | None = None
    storage_class: str | None = None

    @classmethod
    def from_boto(cls, raw: dict[str, Any]) -> "S3Object":
        """Build from one entry of a boto3 `Contents` list."""
        key = raw.get("Key")
        if not isinstance(key, str):
            raise ValueError(f"listed object has no string Key: {raw!r}")
        size = raw.get("Size")
        return cls(
            key=key,
            size=int(size) if size is not None else None,
            etag=raw.get("ETag"),
            last_modified=raw.get("LastModified"),
            storage_class=raw.get("StorageClass"),
        )


@dataclass(frozen=True)
class Page:
    """One fetched batch. `next_token is None` marks the end of the listing."""

    items: tuple[S3Object, ...] = field(default_factory=tuple)
    next_token: str | None = None

    @property
    def is_last(self) -> bool:
        return self.next_token is None


@dataclass(frozen=True)
class NotYetFetched:
    """No page has been retrieved yet."""


@dataclass(frozen=True)
class HasMore:
    """The last page said more data exists, resumable from this token."""

    continuation_token: str


@dataclass(frozen=True)
class Exhausted:
    """The service reported no further pages. Terminal."""


CursorState = Union[NotYetFetched, HasMore, Exhausted]


def normalize_next_token(next_token: Any, is_truncated: Any = None) -> str | None:
    """Fold token-style and flag-style pagination signals into one token.

    A non-empty token always wins, even when `is_truncated` says otherwise.
    Without a token the listing is over, whatever the flag says.
    """
    token = str(next_token or "")
    if token:
        return token
    if is_truncated:
        logger.warning("listing reported truncation without a continuation token; treating as complete")
    return None
