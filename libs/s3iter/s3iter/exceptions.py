"""s3iter exception hierarchy."""

from __future__ import annotations

from s3iter.error_codes import ErrorCode


class S3IterError(Exception):
    """Base error for s3iter."""


class ConfigurationError(S3IterError):
    """Raised when configuration or inputs are invalid."""


class ListFetchError(S3IterError):
    """Raised when fetching one page of a listing fails."""

    def __init__(
        self,
        bucket: str,
        message: str,
        *,
        continuation_token: str | None = None,
        error_code: ErrorCode | str | None = None,
    ) -> None:
        prefix = f"{bucket}"
        if continuation_token:
            prefix = f"{prefix} (continuation_token={continuation_token})"
        super().__init__(f"{prefix}: {message}")
        self.bucket = bucket
        self.continuation_token = continuation_token
        self.message = message
        self.error_code = error_code
