"""Exception hierarchy for the JSend response layer.

Exception Handling Flow:
    1. The builder (or a request handler) raises a typed exception
    2. Caller misuse and encoding failures propagate to the caller unchanged
    3. ``FailError`` is converted to a fail envelope by the FastAPI handlers
       registered through :func:`jsend_payload.http.errors.register_exception_handlers`
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence


class JsendError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(JsendError, ValueError):
    """Raised when a builder receives a missing or malformed argument."""

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class EnvelopeEncodingError(JsendError):
    """Raised when an envelope cannot be represented as JSON."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ConfigurationError(JsendError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class FailError(JsendError):
    """Raised by request handlers to answer with a fail envelope."""

    def __init__(
        self,
        errors: Sequence[Any],
        code: int = 400,
        meta: Mapping[str, Any] | None = None,
        message: str = "Request failed",
    ):
        super().__init__(message)
        self.errors = errors
        self.code = code
        self.meta = meta


__all__ = [
    "ConfigurationError",
    "EnvelopeEncodingError",
    "FailError",
    "InvalidArgumentError",
    "JsendError",
]
