#!/usr/bin/env python3
"""Print all objects in an S3 bucket, followed by a count."""

from __future__ import annotations

from s3iter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
