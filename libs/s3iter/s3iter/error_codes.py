"""Canonical error codes surfaced to the CLI and callers."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"

    LIST_FAILED = "LIST_FAILED"
    ACCESS_DENIED = "ACCESS_DENIED"
    NO_SUCH_BUCKET = "NO_SUCH_BUCKET"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    TRANSPORT_FAILED = "TRANSPORT_FAILED"


_S3_ERROR_CODES: dict[str, ErrorCode] = {
    "AccessDenied": ErrorCode.ACCESS_DENIED,
    "AllAccessDisabled": ErrorCode.ACCESS_DENIED,
    "InvalidAccessKeyId": ErrorCode.ACCESS_DENIED,
    "SignatureDoesNotMatch": ErrorCode.ACCESS_DENIED,
    "NoSuchBucket": ErrorCode.NO_SUCH_BUCKET,
}


def error_code_for_s3(code: str | None) -> ErrorCode:
    """Map an S3 `Error.Code` string to an ErrorCode."""
    raw = str(code or "").strip()
    if not raw:
        return ErrorCode.LIST_FAILED
    return _S3_ERROR_CODES.get(raw, ErrorCode.LIST_FAILED)
