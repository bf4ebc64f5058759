"""boto3 S3 client construction."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.config import Config

from s3iter.config import S3Config

logger = logging.getLogger(__name__)


def resolve_region(config: S3Config, session: Any | None = None) -> str:
    """Configured region, then boto3's default chain, then `default_region`."""
    region = str(config.region or "").strip()
    if region:
        return region
    session = session if session is not None else boto3.session.Session()
    region = str(session.region_name or "").strip()
    if region:
        return region
    return config.default_region


def create_s3_client(config: S3Config, *, session: Any | None = None) -> Any:
    """Build a boto3 S3 client. The caller owns it and may share it across cursors."""
    session = session if session is not None else boto3.session.Session()
    region = resolve_region(config, session)

    kwargs: dict[str, Any] = {
        "region_name": region,
        "config": Config(s3={"addressing_style": config.addressing_style}),
    }
    endpoint = str(config.endpoint_url or "").strip()
    if endpoint:
        kwargs["endpoint_url"] = endpoint.rstrip("/")
    if config.access_key and config.secret_key:
        kwargs["aws_access_key_id"] = config.access_key
        kwargs["aws_secret_access_key"] = config.secret_key
        if config.session_token:
            kwargs["aws_session_token"] = config.session_token

    logger.debug(
        "creating s3 client (region=%s, endpoint=%s, addressing_style=%s)",
        region,
        kwargs.get("endpoint_url"),
        config.addressing_style,
    )
    return session.client("s3", **kwargs)
