from __future__ import annotations

import pytest

from s3iter.config import LoggingSettings, S3Config, Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        log_dir=str(tmp_path / "logs"),
        s3=S3Config(region="us-east-1", access_key="test", secret_key="test"),
        logging=LoggingSettings(level="DEBUG", console=False, file=None),
    )
