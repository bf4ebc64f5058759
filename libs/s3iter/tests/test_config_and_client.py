from __future__ import annotations

import pytest

from s3iter.client import create_s3_client, resolve_region
from s3iter.config import ListingConfig, S3Config
from s3iter.exceptions import ConfigurationError


class _FakeSession:
    def __init__(self, region_name: str | None = None):
        self.region_name = region_name
        self.client_calls: list[tuple[str, dict[str, object]]] = []

    def client(self, service: str, **kwargs):  # noqa: ANN003
        self.client_calls.append((service, kwargs))
        return object()


def test_s3_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("S3_ENDPOINT_URL", "http://localhost:9000")
    monkeypatch.setenv("S3_ADDRESSING_STYLE", "PATH")

    cfg = S3Config()

    assert cfg.endpoint_url == "http://localhost:9000"
    assert cfg.addressing_style == "path"


def test_s3_config_rejects_unknown_addressing_style() -> None:
    with pytest.raises(ConfigurationError):
        S3Config(addressing_style="sideways")


def test_listing_config_validates_api(monkeypatch) -> None:
    monkeypatch.setenv("LIST_API", "V1")
    assert ListingConfig().api == "v1"

    with pytest.raises(ConfigurationError):
        ListingConfig(api="v3")


@pytest.mark.parametrize(
    ("configured", "session_region", "expected"),
    [
        ("eu-west-1", "ap-south-1", "eu-west-1"),
        (None, "ap-south-1", "ap-south-1"),
        (None, None, "us-east-1"),
    ],
)
def test_resolve_region_chain(configured, session_region, expected) -> None:
    cfg = S3Config(region=configured)
    assert resolve_region(cfg, _FakeSession(session_region)) == expected


def test_create_s3_client_uses_static_keys_and_endpoint() -> None:
    session = _FakeSession()
    cfg = S3Config(
        endpoint_url="http://minio:9000/",
        region="us-west-2",
        access_key="ak",
        secret_key="sk",
        addressing_style="path",
    )

    create_s3_client(cfg, session=session)

    ((service, kwargs),) = session.client_calls
    assert service == "s3"
    assert kwargs["endpoint_url"] == "http://minio:9000"
    assert kwargs["region_name"] == "us-west-2"
    assert kwargs["aws_access_key_id"] == "ak"
    assert kwargs["aws_secret_access_key"] == "sk"
    assert "aws_session_token" not in kwargs
    assert kwargs["config"].s3 == {"addressing_style": "path"}


def test_create_s3_client_defers_to_default_credentials() -> None:
    session = _FakeSession("eu-central-1")

    create_s3_client(S3Config(access_key="", secret_key=""), session=session)

    ((_, kwargs),) = session.client_calls
    assert "aws_access_key_id" not in kwargs
    assert "endpoint_url" not in kwargs
    assert kwargs["region_name"] == "eu-central-1"


def test_settings_fixture_builds_client_config(settings) -> None:
    session = _FakeSession()

    create_s3_client(settings.s3, session=session)

    ((_, kwargs),) = session.client_calls
    assert kwargs["region_name"] == "us-east-1"
    assert kwargs["aws_access_key_id"] == "test"
    assert settings.listing.api in {"v2", "v1"}
