"""HTTP-facing helpers: status codes and FastAPI exception handlers."""

from .status import (
    HttpStatusCode,
    StatusCodeLike,
    allows_body,
    coerce_body_status_code,
    coerce_status_code,
)

__all__ = [
    "HttpStatusCode",
    "StatusCodeLike",
    "allows_body",
    "coerce_body_status_code",
    "coerce_status_code",
]
