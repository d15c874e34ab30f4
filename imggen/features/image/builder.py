"""Request payload construction."""

from __future__ import annotations

from imggen.config.image.providers.openai import STYLE_QUALITY_MODELS
from imggen.core.pydantic_schemas import ImageGenerationRequest
from imggen.features.image.types import GenerationOptions


def build_request(options: GenerationOptions, prompt: str) -> ImageGenerationRequest:
    """Return the typed payload for ``options`` and ``prompt``.

    Style and quality are only sent to models that accept them; for dall-e-2
    they are dropped even when supplied.
    """

    if options.model in STYLE_QUALITY_MODELS:
        return ImageGenerationRequest(
            model=options.model,
            prompt=prompt,
            size=options.size,
            style=options.style,
            quality=options.quality,
        )
    return ImageGenerationRequest(model=options.model, prompt=prompt, size=options.size)


def build_payload(options: GenerationOptions, prompt: str) -> str:
    """Return the serialized JSON body for ``options`` and ``prompt``."""

    return build_request(options, prompt).to_json()


__all__ = ["build_payload", "build_request"]
