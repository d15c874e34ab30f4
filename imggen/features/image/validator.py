"""Prompt and option validation against the per-model capability table."""

from __future__ import annotations

import dataclasses
import logging

from imggen.config.image import DEFAULT_OUTPUT_FORMAT, SUPPORTED_OUTPUT_FORMATS
from imggen.config.image.providers.openai import (
    SUPPORTED_MODELS,
    SUPPORTED_QUALITIES,
    SUPPORTED_SIZES,
    SUPPORTED_STYLES,
)
from imggen.core.exceptions import ValidationError
from imggen.features.image.types import GenerationOptions

logger = logging.getLogger(__name__)

# (field, label, table) in the order the checks run
_PER_MODEL_CHECKS = (
    ("size", "Size", SUPPORTED_SIZES),
    ("style", "Style", SUPPORTED_STYLES),
    ("quality", "Quality", SUPPORTED_QUALITIES),
)


def validate_prompt(prompt: str | None) -> str:
    """Return ``prompt`` or raise when it is missing or empty."""

    if not prompt:
        raise ValidationError("Prompt is required.", field="prompt", value=prompt)
    return prompt


def validate_options(options: GenerationOptions) -> GenerationOptions:
    """Check ``options`` against the capability table.

    An unknown model or a size/style/quality the model does not support raises
    :class:`ValidationError`; the first failing field wins. An unknown output
    format is only warned about and replaced with ``list``.

    Returns:
        The options, with ``output_format`` normalised.
    """

    if options.model not in SUPPORTED_MODELS:
        raise ValidationError(
            f"Model '{options.model}' is not supported.",
            field="model",
            value=options.model,
        )

    for field, label, table in _PER_MODEL_CHECKS:
        value = getattr(options, field)
        if value not in table[options.model]:
            raise ValidationError(
                f"{label} '{value}' is not supported for model '{options.model}'.",
                field=field,
                value=value,
            )

    if options.output_format not in SUPPORTED_OUTPUT_FORMATS:
        logger.warning(
            "Output format '%s' is not supported; falling back to '%s'",
            options.output_format,
            DEFAULT_OUTPUT_FORMAT,
        )
        options = dataclasses.replace(options, output_format=DEFAULT_OUTPUT_FORMAT)

    return options


__all__ = ["validate_options", "validate_prompt"]
