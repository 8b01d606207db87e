"""JSON encoding helpers for response envelopes."""

from __future__ import annotations

import json
import logging
from typing import Any

from jsend_payload.exceptions import EnvelopeEncodingError

logger = logging.getLogger(__name__)

# Compact output; unicode and "/" are written literally
_SEPARATORS = (",", ":")


def encode_json(obj: Any, *, context: str | None = None) -> str:
    """Serialise ``obj`` to JSON text or raise :class:`EnvelopeEncodingError`.

    Keys keep their insertion order. NaN and infinities are rejected instead of
    being written as non-standard tokens.
    """

    try:
        return json.dumps(
            obj,
            ensure_ascii=False,
            allow_nan=False,
            separators=_SEPARATORS,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        ctx = f" ({context})" if context else ""
        logger.error("Failed to encode JSON payload%s: %s", ctx, exc)
        raise EnvelopeEncodingError(
            f"Object not JSON-serializable{ctx}: {exc}",
            original_error=exc,
        ) from exc


__all__ = ["encode_json"]
