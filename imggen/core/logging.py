"""Centralised logging configuration for the imggen CLI.

Diagnostics go to stderr so that stdout only ever carries the image URL,
the raw JSON body or an error block.
"""
from __future__ import annotations

import logging
import logging.config
from typing import Dict

from imggen.config import environment
from imggen.core.utils.env import get_env

_LOGGING_CONFIGURED = False


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and isinstance(getattr(logging, value, None), int):
        return value
    return default


def setup_logging(level: str | None = None, force: bool = False) -> None:
    """Configure the root logger with a single stderr console handler."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    log_level = _resolve_level(
        level or get_env(environment.LOG_LEVEL_ENV, default=environment.DEFAULT_LOG_LEVEL),
        environment.DEFAULT_LOG_LEVEL,
    )

    config: Dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)s [%(name)s] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    # HTTP client internals are noisy at DEBUG
    for name in ("httpx", "httpcore", "httpcore.http11", "httpcore.connection"):
        logging.getLogger(name).setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
