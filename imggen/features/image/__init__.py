"""Image generation feature: option validation, request building and response interpretation."""

from .builder import build_payload, build_request
from .interpreter import interpret, parse_response
from .service import ImageGenerationService
from .types import (
    GenerationFailure,
    GenerationOptions,
    GenerationResult,
    GenerationSuccess,
    Outcome,
)
from .validator import validate_options, validate_prompt

__all__ = [
    "GenerationFailure",
    "GenerationOptions",
    "GenerationResult",
    "GenerationSuccess",
    "ImageGenerationService",
    "Outcome",
    "build_payload",
    "build_request",
    "interpret",
    "parse_response",
    "validate_options",
    "validate_prompt",
]
