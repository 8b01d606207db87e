"""Tests for the shared response builder dependency."""

from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from jsend_payload import ResponseBuilder, get_response_builder

_RECORDS = {"5b0e5f7c-6f3c-4a53-9d7e-3c2b1f0a9e11": {"id": 1, "name": "John"}}


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/records/{record_id}")
    async def get_record(
        record_id: str,
        builder: ResponseBuilder = Depends(get_response_builder),
    ):
        try:
            UUID(record_id)
        except ValueError:
            return builder.invalid_uuid()
        record = _RECORDS.get(record_id)
        if record is None:
            return builder.record_not_found()
        return builder.success(record, HTTPStatus.OK, {"source": "memory"})

    @app.delete("/records/{record_id}")
    async def delete_record(
        record_id: str,
        builder: ResponseBuilder = Depends(get_response_builder),
    ):
        return builder.no_content()

    return app


def test_get_response_builder_is_shared():
    assert get_response_builder() is get_response_builder()


def test_builder_dependency_answers_success():
    client = TestClient(_build_app())

    response = client.get("/records/5b0e5f7c-6f3c-4a53-9d7e-3c2b1f0a9e11")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {
        "status": "success",
        "data": {"id": 1, "name": "John"},
        "meta": {"source": "memory"},
    }


def test_builder_dependency_answers_invalid_uuid():
    client = TestClient(_build_app())

    response = client.get("/records/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["data"][0]["error"] == "invalidUuidFormat"


def test_builder_dependency_answers_record_not_found():
    client = TestClient(_build_app())

    response = client.get("/records/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json()["data"][0]["error"] == "recordNotFound"


def test_builder_dependency_answers_no_content():
    client = TestClient(_build_app())

    response = client.delete("/records/5b0e5f7c-6f3c-4a53-9d7e-3c2b1f0a9e11")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": None}
