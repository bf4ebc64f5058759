"""Configuration management using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from s3iter.exceptions import ConfigurationError

_ENV_FILES = (".env", "../.env", "../../.env")

_ADDRESSING_STYLES = {"auto", "path", "virtual"}
_LIST_APIS = {"v2", "v1"}


class S3Config(BaseSettings):
    """S3/MinIO connection configuration."""

    model_config = SettingsConfigDict(
        env_prefix="S3_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    endpoint_url: str | None = None  # e.g. http://localhost:9000 for MinIO
    region: str | None = None
    default_region: str = "us-east-1"
    # Empty keys fall back to boto3's default credential chain.
    access_key: str = ""
    secret_key: str = ""
    session_token: str | None = None
    addressing_style: str = "auto"

    @field_validator("addressing_style")
    @classmethod
    def _validate_addressing_style(cls, value: str) -> str:
        style = str(value or "").strip().lower()
        if style not in _ADDRESSING_STYLES:
            raise ConfigurationError(
                f"S3_ADDRESSING_STYLE must be one of {sorted(_ADDRESSING_STYLES)} (got {value!r})"
            )
        return style


class ListingConfig(BaseSettings):
    """Defaults for listing requests."""

    model_config = SettingsConfigDict(
        env_prefix="LIST_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api: str = "v2"  # "v2" (continuation token) | "v1" (marker + IsTruncated)
    max_keys: int | None = Field(default=None, ge=1, le=1000)

    @field_validator("api")
    @classmethod
    def _validate_api(cls, value: str) -> str:
        api = str(value or "").strip().lower()
        if api not in _LIST_APIS:
            raise ConfigurationError(f"LIST_API must be one of {sorted(_LIST_APIS)} (got {value!r})")
        return api


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    console: bool = True
    file: str | None = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=5, ge=0)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    log_dir: str = "./logs"

    # Sections read their own env prefixes when Settings is built, not at import.
    s3: S3Config = Field(default_factory=S3Config)
    listing: ListingConfig = Field(default_factory=ListingConfig)

    # Logging
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
