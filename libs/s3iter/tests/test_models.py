from __future__ import annotations

from datetime import datetime, timezone

import pytest

from s3iter.exceptions import ConfigurationError
from s3iter.models import Exhausted, HasMore, ListRequest, NotYetFetched, S3Object, normalize_next_token


def test_list_request_requires_bucket() -> None:
    with pytest.raises(ConfigurationError):
        ListRequest(bucket="  ")


def test_list_request_rejects_non_positive_max_keys() -> None:
    with pytest.raises(ConfigurationError):
        ListRequest(bucket="b", max_keys=0)


def test_s3_object_from_boto_entry() -> None:
    ts = datetime(2024, 1, 2, tzinfo=timezone.utc)
    obj = S3Object.from_boto({"Key": "k", "Size": "7", "ETag": '"e"', "LastModified": ts})

    assert obj == S3Object(key="k", size=7, etag='"e"', last_modified=ts)


def test_s3_object_requires_key() -> None:
    with pytest.raises(ValueError):
        S3Object.from_boto({"Size": 1})


@pytest.mark.parametrize(
    ("token", "truncated", "expected"),
    [
        ("T1", True, "T1"),
        ("T1", False, "T1"),
        (None, True, None),
        ("", True, None),
        (None, False, None),
    ],
)
def test_normalize_next_token(token, truncated, expected) -> None:
    assert normalize_next_token(token, truncated) == expected


def test_cursor_states_are_distinct_variants() -> None:
    assert HasMore("a") == HasMore("a")
    assert HasMore("a") != HasMore("b")
    assert NotYetFetched() != Exhausted()


def test_list_request_rejects_non_numeric_max_keys() -> None:
    with pytest.raises(ConfigurationError):
        ListRequest(bucket="b", max_keys="ten")  # type: ignore[arg-type]
