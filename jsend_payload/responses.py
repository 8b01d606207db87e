"""HTTP response representation for JSend envelopes."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from jsend_payload.utils.json_serialization import encode_json

JSON_MEDIA_TYPE = "application/json"


class JsendResponse(JSONResponse):
    """JSON response rendered with the envelope encoding rules.

    Starlette appends a charset only to ``text/*`` media types, so the
    content type header stays exactly ``application/json``.
    """

    media_type = JSON_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        return encode_json(content, context="response body").encode("utf-8")

    @property
    def text(self) -> str:
        """Decoded response body."""

        return bytes(self.body).decode("utf-8")


__all__ = ["JSON_MEDIA_TYPE", "JsendResponse"]
