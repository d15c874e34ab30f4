"""Utilities for rendering errors into CLI output."""

from __future__ import annotations

from imggen.core.exceptions import ServiceError, UsageError

ERROR_BLOCK_TEMPLATE = "\nError:\n\n  {message}\n"


def format_error_block(message: str) -> str:
    """Return the stdout block printed for any fatal error."""

    return ERROR_BLOCK_TEMPLATE.format(message=message)


def format_service_error(exc: ServiceError) -> str:
    """Return the error block for a :class:`ServiceError`."""

    return format_error_block(exc.message)


def shows_usage(exc: ServiceError) -> bool:
    """True when usage help should precede the error block."""

    return isinstance(exc, UsageError)


__all__ = ["ERROR_BLOCK_TEMPLATE", "format_error_block", "format_service_error", "shows_usage"]
