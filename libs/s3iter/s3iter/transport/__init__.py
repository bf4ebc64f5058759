"""Listing transports."""

from typing import Any

from s3iter.exceptions import ConfigurationError
from s3iter.transport.base import ListingTransport
from s3iter.transport.s3 import S3ListObjectsV1Transport, S3ListObjectsV2Transport


def build_transport(client: Any, api: str = "v2") -> ListingTransport:
    name = str(api or "v2").strip().lower()
    if name == "v2":
        return S3ListObjectsV2Transport(client)
    if name == "v1":
        return S3ListObjectsV1Transport(client)
    raise ConfigurationError(f"Unknown listing api: {api!r} (expected: v2/v1)")


__all__ = [
    "ListingTransport",
    "S3ListObjectsV1Transport",
    "S3ListObjectsV2Transport",
    "build_transport",
]
