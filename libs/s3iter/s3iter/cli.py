"""Print every object key in an S3 bucket."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from s3iter.client import create_s3_client
from s3iter.config import Settings
from s3iter.cursor import PaginatedListCursor
from s3iter.exceptions import ConfigurationError, ListFetchError
from s3iter.models import ListRequest
from s3iter.pagination import iter_pages
from s3iter.transport import ListingTransport, build_transport
from s3iter.utils.logging_setup import setup_logging

logger = logging.getLogger("s3iter.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="s3iter-list", description="Print all objects in an S3 bucket.")
    parser.add_argument("-b", "--bucket", required=True, help="Bucket name")
    parser.add_argument("-p", "--prefix", default=None, help="Only list keys under this prefix")
    parser.add_argument("--delimiter", default=None)
    parser.add_argument("--start-after", default=None, help="Start listing after this key")
    parser.add_argument("--max-keys", type=int, default=None, help="Page size (1-1000)")
    parser.add_argument("--api", choices=["v2", "v1"], default=None, help="Listing API (default: LIST_API or v2)")
    parser.add_argument(
        "--mode",
        choices=["cursor", "pages"],
        default="cursor",
        help="cursor: pull objects one at a time; pages: iterate whole pages",
    )
    parser.add_argument("--stderr", action="store_true", default=False, help="Print keys to stderr")
    parser.add_argument("--endpoint-url", default=None, help="S3-compatible endpoint (e.g. MinIO)")
    parser.add_argument("--region", default=None)
    parser.add_argument("--log-level", default=None)
    return parser


async def print_with_cursor(transport: ListingTransport, request: ListRequest, *, out: TextIO) -> int:
    cursor = PaginatedListCursor(transport, request)
    count = 0
    async for obj in cursor:
        print(obj.key, file=out)
        count += 1
    logger.info("listing complete (bucket=%s, objects=%d, pages=%d)", request.bucket, count, cursor.pages_fetched)
    return count


async def print_with_pages(client: Any, request: ListRequest, *, api: str, out: TextIO) -> int:
    def _run() -> int:
        count = 0
        for page in iter_pages(client, request, api=api):
            for obj in page.items:
                print(obj.key, file=out)
                count += 1
        return count

    count = await asyncio.to_thread(_run)
    logger.info("listing complete (bucket=%s, objects=%d)", request.bucket, count)
    return count


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    s3_config = settings.s3.model_copy(
        update={
            k: v
            for k, v in {"endpoint_url": args.endpoint_url, "region": args.region}.items()
            if v is not None
        }
    )
    api = str(args.api or settings.listing.api)
    max_keys = args.max_keys if args.max_keys is not None else settings.listing.max_keys

    request = ListRequest(
        bucket=args.bucket,
        prefix=args.prefix,
        delimiter=args.delimiter,
        start_after=args.start_after,
        max_keys=max_keys,
    )
    client = create_s3_client(s3_config)
    out = sys.stderr if args.stderr else sys.stdout

    if args.mode == "pages":
        count = await print_with_pages(client, request, api=api, out=out)
    else:
        transport = build_transport(client, api)
        try:
            count = await print_with_cursor(transport, request, out=out)
        finally:
            await transport.close()

    print(f"Found {count} objects")
    return count


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
        setup_logging(settings, level=args.log_level)
        asyncio.run(_run(args, settings))
    except (ConfigurationError, ValidationError) as exc:
        logger.error("invalid configuration: %s", exc)
        return 2
    except ListFetchError as exc:
        logger.error("listing failed (error_code=%s): %s", getattr(exc.error_code, "value", exc.error_code), exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
