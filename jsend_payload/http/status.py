"""HTTP status codes accepted by the response builders."""

from __future__ import annotations

from http import HTTPStatus
from typing import Union

from jsend_payload.exceptions import InvalidArgumentError

HttpStatusCode = HTTPStatus

StatusCodeLike = Union[HTTPStatus, int]

# RFC 9110: these responses never carry content
BODYLESS_STATUS_CODES = frozenset({HTTPStatus.NO_CONTENT, HTTPStatus.NOT_MODIFIED})


def coerce_status_code(code: StatusCodeLike) -> HTTPStatus:
    """Return ``code`` as an :class:`HTTPStatus` member.

    Integers are accepted only when they name a known status code.
    """

    if isinstance(code, HTTPStatus):
        return code
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidArgumentError(
            f"Status code must be an HTTPStatus member, got {type(code).__name__}",
            argument="code",
        )
    try:
        return HTTPStatus(code)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unsupported HTTP status code: {code}", argument="code") from exc


def allows_body(code: HTTPStatus) -> bool:
    """True when a response with ``code`` may carry a JSON body."""

    return code >= HTTPStatus.OK and code not in BODYLESS_STATUS_CODES


def coerce_body_status_code(code: StatusCodeLike) -> HTTPStatus:
    """Like :func:`coerce_status_code`, rejecting 1xx, 204 and 304."""

    status_code = coerce_status_code(code)
    if not allows_body(status_code):
        raise InvalidArgumentError(
            f"HTTP status {int(status_code)} {status_code.phrase} cannot carry an envelope body",
            argument="code",
        )
    return status_code


__all__ = [
    "BODYLESS_STATUS_CODES",
    "HttpStatusCode",
    "StatusCodeLike",
    "allows_body",
    "coerce_body_status_code",
    "coerce_status_code",
]
