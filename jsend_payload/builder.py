"""Response builders producing JSend envelopes.

Request handlers hold (or inject, see :mod:`jsend_payload.dependencies`) one
:class:`ResponseBuilder` and pick the operation matching their outcome::

    builder = ResponseBuilder()
    builder.success({"id": 10}, HTTPStatus.CREATED, meta={"version": "1.0"})
    builder.required("email")

Every operation is a pure function of its arguments, so a single instance is
safe to share between threads and tasks.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Mapping, Sequence, Type

from pydantic import ValidationError as PydanticValidationError

from jsend_payload.exceptions import EnvelopeEncodingError, InvalidArgumentError
from jsend_payload.http.status import StatusCodeLike, coerce_body_status_code
from jsend_payload.pydantic_schemas.envelope import (
    ErrorEnvelope,
    ErrorItem,
    FailEnvelope,
    PayloadModel,
    SuccessEnvelope,
)
from jsend_payload.responses import JsendResponse

logger = logging.getLogger(__name__)


def _require_text(value: Any, argument: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"'{argument}' is required", argument=argument)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"'{argument}' must be a string, got {type(value).__name__}",
            argument=argument,
        )
    return value


def _normalise_meta(meta: Mapping[Any, Any] | None) -> Dict[Any, Any]:
    if meta is None:
        return {}
    if not isinstance(meta, Mapping):
        raise InvalidArgumentError(
            f"'meta' must be a mapping, got {type(meta).__name__}", argument="meta"
        )
    return dict(meta)


def _normalise_errors(errors: Sequence[Any]) -> List[Any]:
    if errors is None:
        raise InvalidArgumentError("'errors' is required", argument="errors")
    if isinstance(errors, (str, bytes, bytearray, Mapping)) or not isinstance(errors, Sequence):
        raise InvalidArgumentError(
            f"'errors' must be a sequence of error items, got {type(errors).__name__}",
            argument="errors",
        )
    return [item.to_payload() if isinstance(item, ErrorItem) else item for item in errors]


class ResponseBuilder:
    """Build JSON responses wrapped in the success/fail/error envelope."""

    def __init__(self, response_class: Type[JsendResponse] = JsendResponse) -> None:
        self._response_class = response_class

    @property
    def response_class(self) -> Type[JsendResponse]:
        return self._response_class

    def success(
        self,
        data: Any,
        code: StatusCodeLike = HTTPStatus.OK,
        meta: Mapping[Any, Any] | None = None,
    ) -> JsendResponse:
        """Answer with ``{"status": "success", "data": ..., "meta": ...}``.

        ``meta`` is always emitted, as ``{}`` when not supplied.
        """

        envelope = self._envelope(SuccessEnvelope, data=data, meta=_normalise_meta(meta))
        return self._respond(envelope, code)

    def fail(
        self,
        errors: Sequence[Any],
        code: StatusCodeLike = HTTPStatus.BAD_REQUEST,
        meta: Mapping[Any, Any] | None = None,
    ) -> JsendResponse:
        """Answer with ``{"status": "fail", "data": errors, "meta": ...}``.

        Items are echoed as given; only :class:`ErrorItem` instances are
        converted, dropping an unset ``field``.
        """

        envelope = self._envelope(
            FailEnvelope, data=_normalise_errors(errors), meta=_normalise_meta(meta)
        )
        return self._respond(envelope, code)

    def error(
        self,
        message: str,
        code: StatusCodeLike = HTTPStatus.INTERNAL_SERVER_ERROR,
        data: Any = None,
    ) -> JsendResponse:
        """Answer with ``{"status": "error", "message": ...}``; ``data`` only when not None."""

        envelope = self._envelope(
            ErrorEnvelope, message=_require_text(message, "message"), data=data
        )
        return self._respond(envelope, code)

    def no_content(self, code: StatusCodeLike = HTTPStatus.OK) -> JsendResponse:
        """Answer with ``{"status": "success", "data": null}`` and no meta.

        The envelope is a body, so 204 NO_CONTENT is rejected like every
        other body-less code.
        """

        return self._respond(SuccessEnvelope(data=None, meta=None), code)

    def invalid_uuid(self, code: StatusCodeLike = HTTPStatus.BAD_REQUEST) -> JsendResponse:
        return self._fail_with(
            ErrorItem(
                field="id",
                error="invalidUuidFormat",
                message="The provided uuid format is invalid",
            ),
            code,
        )

    def record_not_found(self, code: StatusCodeLike = HTTPStatus.NOT_FOUND) -> JsendResponse:
        return self._fail_with(
            ErrorItem(
                field="id",
                error="recordNotFound",
                message="The record was not found with the given id",
            ),
            code,
        )

    def empty_payload(self, code: StatusCodeLike = HTTPStatus.BAD_REQUEST) -> JsendResponse:
        return self._fail_with(
            ErrorItem(error="emptyPayload", message="It was send a empty payload"),
            code,
        )

    def required(
        self, field_name: str, code: StatusCodeLike = HTTPStatus.BAD_REQUEST
    ) -> JsendResponse:
        field_name = _require_text(field_name, "field_name")
        return self._fail_with(
            ErrorItem(
                field=field_name,
                error="required",
                message=f'The "{field_name}" field is required',
            ),
            code,
        )

    def column_not_found(
        self, column_name: str, code: StatusCodeLike = HTTPStatus.BAD_REQUEST
    ) -> JsendResponse:
        column_name = _require_text(column_name, "column_name")
        return self._fail_with(
            ErrorItem(
                field=column_name,
                error="columnNotFound",
                message=f'The "{column_name}" column was not found',
            ),
            code,
        )

    def _fail_with(self, item: ErrorItem, code: StatusCodeLike) -> JsendResponse:
        return self.fail([item], code)

    @staticmethod
    def _envelope(model: Type[PayloadModel], **fields: Any) -> PayloadModel:
        try:
            return model(**fields)
        except PydanticValidationError as exc:
            raise InvalidArgumentError(f"Invalid {model.__name__} arguments: {exc}") from exc

    def _respond(self, envelope: PayloadModel, code: StatusCodeLike) -> JsendResponse:
        status_code = coerce_body_status_code(code)
        try:
            payload = envelope.to_payload()
            response = self._response_class(content=payload, status_code=int(status_code))
        except EnvelopeEncodingError:
            raise
        except (TypeError, ValueError, RecursionError) as exc:
            logger.error("Failed to serialise %s: %s", type(envelope).__name__, exc)
            raise EnvelopeEncodingError(
                f"{type(envelope).__name__} is not JSON-serializable: {exc}",
                original_error=exc,
            ) from exc

        logger.debug(
            "Built %s response with status %d", envelope.status, response.status_code
        )
        return response


__all__ = ["ResponseBuilder"]
