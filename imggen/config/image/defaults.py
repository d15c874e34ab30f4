"""Image generation configuration defaults."""

from __future__ import annotations

# Defaults applied when a flag is not given on the command line
DEFAULT_MODEL = "dall-e-2"
DEFAULT_SIZE = "1024x1024"
DEFAULT_STYLE = "vivid"
DEFAULT_QUALITY = "standard"

OUTPUT_LIST = "list"
OUTPUT_JSON = "json"
DEFAULT_OUTPUT_FORMAT = OUTPUT_LIST
SUPPORTED_OUTPUT_FORMATS = (OUTPUT_LIST, OUTPUT_JSON)

IMAGES_ENDPOINT = "/images/generations"

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_SIZE",
    "DEFAULT_STYLE",
    "DEFAULT_QUALITY",
    "OUTPUT_LIST",
    "OUTPUT_JSON",
    "DEFAULT_OUTPUT_FORMAT",
    "SUPPORTED_OUTPUT_FORMATS",
    "IMAGES_ENDPOINT",
]
