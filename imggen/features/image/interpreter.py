"""Response interpretation: status and body in, stdout text and exit code out.

Two paths, selected by the HTTP status:

* 200 - the body must be an image generation response. ``list`` output prints
  the first image's URL and revised prompt; ``json`` prints the body as is.
* anything else - the body must be an error envelope. ``json`` output prints
  the body as is; otherwise the provider's message is printed after usage.

A body that does not match the schema for its path is fatal on both paths.
"""

from __future__ import annotations

import logging

import pydantic

from imggen.config.image import OUTPUT_JSON, OUTPUT_LIST
from imggen.core.errors import format_service_error
from imggen.core.exceptions import ProviderError, ResponseParseError
from imggen.core.pydantic_schemas import ErrorResponse, ImageGenerationResponse
from imggen.features.image.types import (
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    Outcome,
)

logger = logging.getLogger(__name__)

HTTP_OK = 200


def parse_response(status_code: int, raw_body: str) -> GenerationResult:
    """Parse ``raw_body`` with the schema matching ``status_code``.

    Raises:
        ResponseParseError: when the body is not valid JSON for that schema.
    """

    try:
        if status_code == HTTP_OK:
            success = ImageGenerationResponse.model_validate_json(raw_body)
            # Multi-image responses are not supported; only the first is surfaced
            first = success.data[0]
            return GenerationSuccess(
                image_url=first.url or "",
                revised_prompt=first.revised_prompt or "",
                b64_json=first.b64_json,
                created=success.created,
            )

        error = ErrorResponse.model_validate_json(raw_body).error
    except pydantic.ValidationError as exc:
        logger.debug("Response body (status %s) failed validation: %s", status_code, exc)
        raise ResponseParseError(
            "Failed to parse response, body is as follows:\n" + raw_body,
            body=raw_body,
        ) from exc

    return GenerationFailure(
        message=error.message or "",
        code=None if error.code is None else str(error.code),
        param=error.param,
        type=error.type,
        status_code=status_code,
    )


def format_listing(result: GenerationSuccess) -> str:
    return f"Image URL:\n {result.image_url}\n\nRevised Prompt:\n {result.revised_prompt}\n"


def interpret(status_code: int, raw_body: str, output_format: str) -> Outcome:
    """Turn a provider response into the CLI's :class:`Outcome`."""

    try:
        result = parse_response(status_code, raw_body)
    except ResponseParseError as exc:
        return Outcome(stdout=format_service_error(exc), exit_code=1)

    if isinstance(result, GenerationFailure):
        error = ProviderError(
            result.message,
            code=result.code,
            param=result.param,
            error_type=result.type,
            status_code=result.status_code,
        )
        logger.info(
            "Image API returned %s (code=%s, type=%s, param=%s)",
            error.status_code,
            error.code,
            error.error_type,
            error.param,
        )
        if output_format == OUTPUT_JSON:
            return Outcome(stdout=raw_body, exit_code=1)
        return Outcome(stdout=format_service_error(error), exit_code=1, show_usage=True)

    if output_format == OUTPUT_LIST:
        return Outcome(stdout=format_listing(result), exit_code=0)
    return Outcome(stdout=raw_body, exit_code=0)


__all__ = ["format_listing", "interpret", "parse_response"]
