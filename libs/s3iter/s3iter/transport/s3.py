"""S3/MinIO listing transports backed by a boto3 client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from s3iter.error_codes import ErrorCode, error_code_for_s3
from s3iter.exceptions import ListFetchError
from s3iter.models import ListRequest, Page, S3Object, normalize_next_token
from s3iter.transport.base import ListingTransport

logger = logging.getLogger(__name__)


def _base_kwargs(request: ListRequest) -> dict[str, Any]:
    call_kwargs: dict[str, Any] = {"Bucket": request.bucket}
    if request.prefix:
        call_kwargs["Prefix"] = request.prefix
    if request.delimiter:
        call_kwargs["Delimiter"] = request.delimiter
    if request.max_keys is not None:
        call_kwargs["MaxKeys"] = int(request.max_keys)
    return call_kwargs


def _parse_contents(resp: dict[str, Any]) -> tuple[S3Object, ...]:
    contents = resp.get("Contents") or []
    if not isinstance(contents, list):
        raise ValueError(f"Contents is not a list: {type(contents).__name__}")
    return tuple(S3Object.from_boto(dict(obj)) for obj in contents)


def _call(
    operation: str,
    client: Any,
    request: ListRequest,
    continuation_token: str | None,
    call_kwargs: dict[str, Any],
) -> dict[str, Any]:
    try:
        return dict(getattr(client, operation)(**call_kwargs))
    except ClientError as exc:
        code = str(exc.response.get("Error", {}).get("Code", "") or "")
        raise ListFetchError(
            request.bucket,
            f"{operation} failed: {exc}",
            continuation_token=continuation_token,
            error_code=error_code_for_s3(code),
        ) from exc
    except BotoCoreError as exc:
        raise ListFetchError(
            request.bucket,
            f"{operation} failed: {exc}",
            continuation_token=continuation_token,
            error_code=ErrorCode.TRANSPORT_FAILED,
        ) from exc


def list_page_v2(client: Any, request: ListRequest, continuation_token: str | None = None) -> Page:
    """Fetch one `list_objects_v2` page (blocking)."""
    call_kwargs = _base_kwargs(request)
    if request.start_after:
        call_kwargs["StartAfter"] = request.start_after
    if continuation_token:
        call_kwargs["ContinuationToken"] = continuation_token

    resp = _call("list_objects_v2", client, request, continuation_token, call_kwargs)
    try:
        items = _parse_contents(resp)
    except (TypeError, ValueError) as exc:
        raise ListFetchError(
            request.bucket,
            f"malformed list_objects_v2 response: {exc}",
            continuation_token=continuation_token,
            error_code=ErrorCode.INVALID_RESPONSE,
        ) from exc

    next_token = normalize_next_token(resp.get("NextContinuationToken"), resp.get("IsTruncated"))
    return Page(items=items, next_token=next_token)


def list_page_v1(client: Any, request: ListRequest, continuation_token: str | None = None) -> Page:
    """Fetch one `list_objects` page (blocking), using the marker as the token.

    S3 only returns `NextMarker` when a delimiter is set; otherwise a truncated
    page resumes after its last key.
    """
    call_kwargs = _base_kwargs(request)
    marker = continuation_token or request.start_after
    if marker:
        call_kwargs["Marker"] = marker

    resp = _call("list_objects", client, request, continuation_token, call_kwargs)
    try:
        items = _parse_contents(resp)
    except (TypeError, ValueError) as exc:
        raise ListFetchError(
            request.bucket,
            f"malformed list_objects response: {exc}",
            continuation_token=continuation_token,
            error_code=ErrorCode.INVALID_RESPONSE,
        ) from exc

    is_truncated = bool(resp.get("IsTruncated"))
    next_marker = resp.get("NextMarker")
    if not next_marker and is_truncated and items:
        next_marker = items[-1].key
    return Page(items=items, next_token=normalize_next_token(next_marker, is_truncated))


class S3ListObjectsV2Transport(ListingTransport):
    """Continuation-token listing (`ListObjectsV2`)."""

    def __init__(self, client: Any) -> None:
        self.client = client

    async def fetch_page(
        self,
        request: ListRequest,
        continuation_token: str | None = None,
    ) -> Page:
        page = await asyncio.to_thread(list_page_v2, self.client, request, continuation_token)
        logger.debug(
            "list_objects_v2 page (bucket=%s, items=%d, has_more=%s)",
            request.bucket,
            len(page.items),
            not page.is_last,
        )
        return page


class S3ListObjectsV1Transport(ListingTransport):
    """Truncation-flag listing (`ListObjects` with `Marker`)."""

    def __init__(self, client: Any) -> None:
        self.client = client

    async def fetch_page(
        self,
        request: ListRequest,
        continuation_token: str | None = None,
    ) -> Page:
        page = await asyncio.to_thread(list_page_v1, self.client, request, continuation_token)
        logger.debug(
            "list_objects page (bucket=%s, items=%d, has_more=%s)",
            request.bucket,
            len(page.items),
            not page.is_last,
        )
        return page
