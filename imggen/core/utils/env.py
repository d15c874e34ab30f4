"""Common environment helpers."""

from __future__ import annotations

import os

from imggen.core.exceptions import ConfigurationError

__all__ = ["get_env"]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"{key} was not set.", key=key)
    return value
