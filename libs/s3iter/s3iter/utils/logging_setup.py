"""Logging initialization helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from s3iter.config import Settings
from s3iter.exceptions import ConfigurationError

_CONFIGURED_ATTR = "_s3iter_configured"


def resolve_level(name: str | None) -> int:
    level_name = str(name or "WARNING").strip().upper()
    levels = logging.getLevelNamesMapping()
    if level_name not in levels:
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return levels[level_name]


def _build_handlers(settings: Settings) -> list[logging.Handler]:
    formatter = logging.Formatter(
        fmt=str(settings.logging.format),
        datefmt=str(settings.logging.datefmt),
    )
    handlers: list[logging.Handler] = []
    if settings.logging.console:
        # stderr, so keys printed on stdout stay pipeable.
        handlers.append(logging.StreamHandler())

    if settings.logging.file:
        file_path = Path(str(settings.logging.file))
        if not file_path.is_absolute():
            file_path = Path(settings.log_dir) / file_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                file_path,
                maxBytes=int(settings.logging.max_bytes),
                backupCount=int(settings.logging.backup_count),
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _apply_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def setup_logging(settings: Settings, *, level: str | None = None) -> logging.Logger:
    """Configure the `s3iter` logger tree and return its root logger.

    Handlers are built once. An explicit `level` (the CLI's `--log-level`)
    always wins over `settings.logging.level`, also on repeated calls, and
    routes botocore's logger through the same handlers at that level so the
    underlying ListObjects requests can be traced.
    """
    logger = logging.getLogger("s3iter")
    first = not getattr(logger, _CONFIGURED_ATTR, False)
    if not first and level is None:
        return logger

    resolved = resolve_level(level or settings.logging.level)
    if first:
        logger.handlers = _build_handlers(settings)
        logger.propagate = False
        setattr(logger, _CONFIGURED_ATTR, True)
    _apply_level(logger, resolved)

    if level is not None:
        boto_logger = logging.getLogger("botocore")
        boto_logger.handlers = list(logger.handlers)
        boto_logger.propagate = False
        boto_logger.setLevel(resolved)
    return logger
