"""Runtime settings resolved from the environment.

Static lookup data (supported models, sizes and so on) lives in
``imggen.config.image``; this module only covers values that vary per
invocation.
"""

from __future__ import annotations

from dataclasses import dataclass

from imggen.config import environment
from imggen.core.exceptions import ConfigurationError
from imggen.core.utils.env import get_env


@dataclass(frozen=True)
class Settings:
    """Credentials and transport settings for one invocation."""

    api_key: str
    api_endpoint: str = environment.DEFAULT_API_ENDPOINT
    timeout: float = environment.DEFAULT_TIMEOUT


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return environment.DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{environment.TIMEOUT_ENV} must be a number of seconds, got '{raw}'.",
            key=environment.TIMEOUT_ENV,
        ) from None
    if timeout <= 0:
        raise ConfigurationError(
            f"{environment.TIMEOUT_ENV} must be positive, got '{raw}'.",
            key=environment.TIMEOUT_ENV,
        )
    return timeout


def load_settings() -> Settings:
    """Build :class:`Settings` from the process environment.

    Raises:
        ConfigurationError: when ``IMGGEN_API_KEY`` is unset or the timeout is
            not a positive number.
    """

    api_key = get_env(environment.API_KEY_ENV, required=True)
    api_endpoint = (
        get_env(environment.API_ENDPOINT_ENV, default=environment.DEFAULT_API_ENDPOINT)
        or environment.DEFAULT_API_ENDPOINT
    )
    timeout = _parse_timeout(get_env(environment.TIMEOUT_ENV))

    return Settings(
        api_key=api_key,
        api_endpoint=api_endpoint.rstrip("/"),
        timeout=timeout,
    )


__all__ = ["Settings", "load_settings"]
