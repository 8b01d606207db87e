from __future__ import annotations

import pytest

from jsend_payload.exceptions import EnvelopeEncodingError
from jsend_payload.utils.json_serialization import encode_json


def test_encode_json_is_compact_and_literal():
    assert encode_json({"path": "/a/b", "city": "Kraków"}) == '{"path":"/a/b","city":"Kraków"}'


def test_encode_json_keeps_insertion_order():
    assert encode_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'


def test_encode_json_rejects_unserialisable_objects():
    with pytest.raises(EnvelopeEncodingError, match=r"\(meta\)"):
        encode_json({"handle": object()}, context="meta")


def test_encode_json_rejects_circular_references():
    payload: list = []
    payload.append(payload)

    with pytest.raises(EnvelopeEncodingError) as exc_info:
        encode_json(payload)

    assert isinstance(exc_info.value.original_error, ValueError)


def test_encode_json_rejects_nan():
    with pytest.raises(EnvelopeEncodingError):
        encode_json({"value": float("inf")})
