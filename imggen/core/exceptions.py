"""Custom exception hierarchy for imggen.

Exception Handling Flow:
    1. Validation, configuration, transport or interpretation code raises a
       typed exception
    2. The CLI entry point catches ``ServiceError`` (see main.py)
    3. ``core.errors`` renders it into the error block printed on stdout
    4. The process exits with status 1
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all imggen errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UsageError(ServiceError):
    """Raised for invocation mistakes; usage help is shown alongside."""


class ValidationError(UsageError):
    """Raised when a prompt or option fails validation."""

    def __init__(self, message: str, field: str | None = None, value: str | None = None):
        super().__init__(message)
        self.field = field
        self.value = value


class ConfigurationError(UsageError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class TransportError(ServiceError):
    """Raised when the request cannot be built, sent or read."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ResponseParseError(ServiceError):
    """Raised when the provider returns a body that does not match its schema."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ProviderError(ServiceError):
    """Raised when the provider answers with a well-formed error payload."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        param: str | None = None,
        error_type: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.param = param
        self.error_type = error_type
        self.status_code = status_code
