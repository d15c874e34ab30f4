"""Environment variable names and defaults read by the CLI."""

from __future__ import annotations

API_KEY_ENV = "IMGGEN_API_KEY"
API_ENDPOINT_ENV = "IMGGEN_API_ENDPOINT"
TIMEOUT_ENV = "IMGGEN_TIMEOUT"
LOG_LEVEL_ENV = "IMGGEN_LOG_LEVEL"

DEFAULT_API_ENDPOINT = "https://api.openai.com/v1"
# Seconds; image generation routinely takes tens of seconds.
DEFAULT_TIMEOUT = 120.0
DEFAULT_LOG_LEVEL = "WARNING"

__all__ = [
    "API_KEY_ENV",
    "API_ENDPOINT_ENV",
    "TIMEOUT_ENV",
    "LOG_LEVEL_ENV",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_LOG_LEVEL",
]
