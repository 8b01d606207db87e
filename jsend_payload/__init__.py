"""Standard JSend (success/fail/error) response envelopes for JSON APIs."""

from .builder import ResponseBuilder
from .dependencies import get_response_builder
from .exceptions import (
    ConfigurationError,
    EnvelopeEncodingError,
    FailError,
    InvalidArgumentError,
    JsendError,
)
from .http.status import HttpStatusCode, coerce_status_code
from .pydantic_schemas import ErrorEnvelope, ErrorItem, FailEnvelope, JsendStatus, SuccessEnvelope
from .responses import JSON_MEDIA_TYPE, JsendResponse

__all__ = [
    "ConfigurationError",
    "EnvelopeEncodingError",
    "ErrorEnvelope",
    "ErrorItem",
    "FailEnvelope",
    "FailError",
    "HttpStatusCode",
    "InvalidArgumentError",
    "JSON_MEDIA_TYPE",
    "JsendError",
    "JsendResponse",
    "JsendStatus",
    "ResponseBuilder",
    "SuccessEnvelope",
    "coerce_status_code",
    "get_response_builder",
]
