"""FastAPI dependencies for the response builder."""

from __future__ import annotations

import logging

from jsend_payload.builder import ResponseBuilder

logger = logging.getLogger(__name__)

_response_builder: ResponseBuilder | None = None


def get_response_builder() -> ResponseBuilder:
    """Return the process-wide :class:`ResponseBuilder`.

    Use as ``builder: ResponseBuilder = Depends(get_response_builder)``.
    """
    global _response_builder

    if _response_builder is None:
        logger.debug("Initialising shared response builder")
        _response_builder = ResponseBuilder()

    return _response_builder


__all__ = ["get_response_builder"]
