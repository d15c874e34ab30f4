"""Value types passed between the image generation stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from imggen.config.image import (
    DEFAULT_MODEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_QUALITY,
    DEFAULT_SIZE,
    DEFAULT_STYLE,
)


@dataclass(frozen=True)
class GenerationOptions:
    """User-selected generation options, as given on the command line."""

    model: str = DEFAULT_MODEL
    size: str = DEFAULT_SIZE
    style: str = DEFAULT_STYLE
    quality: str = DEFAULT_QUALITY
    output_format: str = DEFAULT_OUTPUT_FORMAT


@dataclass(frozen=True)
class GenerationSuccess:
    image_url: str
    revised_prompt: str
    b64_json: Optional[str] = None
    created: Optional[int] = None


@dataclass(frozen=True)
class GenerationFailure:
    message: str
    code: Optional[str] = None
    param: Optional[str] = None
    type: Optional[str] = None
    status_code: Optional[int] = None


GenerationResult = Union[GenerationSuccess, GenerationFailure]


@dataclass(frozen=True)
class Outcome:
    """What the CLI prints on stdout and the status it exits with."""

    stdout: str
    exit_code: int
    show_usage: bool = False
