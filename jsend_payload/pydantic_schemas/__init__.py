"""Public pydantic schema exports."""

from .envelope import (
    ErrorEnvelope,
    ErrorItem,
    FailEnvelope,
    JsendStatus,
    PayloadModel,
    SuccessEnvelope,
)

__all__ = [
    "ErrorEnvelope",
    "ErrorItem",
    "FailEnvelope",
    "JsendStatus",
    "PayloadModel",
    "SuccessEnvelope",
]
