"""FastAPI exception handlers answering with JSend envelopes."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, Iterable, List, Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from jsend_payload.builder import ResponseBuilder
from jsend_payload.config import Settings
from jsend_payload.exceptions import FailError
from jsend_payload.pydantic_schemas import ErrorItem
from jsend_payload.responses import JsendResponse

logger = logging.getLogger(__name__)


def _format_location(loc: Iterable[Any]) -> str | None:
    parts = [str(part) for part in loc]
    return ".".join(parts) if parts else None


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Convert pydantic error dictionaries into fail envelope items."""

    items: List[Dict[str, Any]] = []
    for detail in errors:
        item = ErrorItem(
            field=_format_location(detail.get("loc", ())),
            error=str(detail.get("type", "invalid")),
            message=str(detail.get("msg", "Invalid value")),
        )
        items.append(item.to_payload())
    return items


def register_exception_handlers(
    app: FastAPI,
    builder: ResponseBuilder | None = None,
    settings: Settings | None = None,
) -> None:
    """Install handlers that turn raised errors into fail/error envelopes."""

    builder = builder or ResponseBuilder()
    settings = settings or Settings.from_env()

    @app.exception_handler(FailError)
    async def fail_error_handler(request: Request, exc: FailError) -> JsendResponse:
        """Return the fail envelope carried by the exception."""

        logger.info("Request %s %s failed: %s", request.method, request.url.path, exc.message)
        return builder.fail(exc.errors, exc.code, exc.meta)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JsendResponse:
        """Return a 422 fail envelope listing each invalid input."""

        items = format_validation_errors(exc.errors())
        logger.info(
            "Request %s %s rejected with %d validation error(s)",
            request.method,
            request.url.path,
            len(items),
        )
        return builder.fail(items, HTTPStatus.UNPROCESSABLE_ENTITY)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JsendResponse:
        """Return a 500 error envelope for anything left unhandled."""

        logger.exception("Unhandled error in %s %s", request.method, request.url.path, exc_info=exc)
        data = {"exception": type(exc).__name__} if settings.expose_error_details else None
        return builder.error(
            settings.unhandled_error_message,
            HTTPStatus.INTERNAL_SERVER_ERROR,
            data,
        )


__all__ = ["format_validation_errors", "register_exception_handlers"]
