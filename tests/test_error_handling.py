from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from pymongo.errors import DuplicateKeyError

from tasklists.app.core.logging import RequestContextFilter
from tasklists.app.errors import ApplicationError, NotFoundError

pytestmark = pytest.mark.asyncio


async def test_application_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError(
            "Example failure",
            code="example_error",
            status_code=status.HTTP_418_IM_A_TEAPOT,
            details={"foo": "bar"},
        )

    response = await client.get("/error/application")

    assert response.status_code == status.HTTP_418_IM_A_TEAPOT
    payload = response.json()
    request_id = response.headers["X-Request-ID"]
    assert payload == {
        "code": "example_error",
        "message": "Example failure",
        "details": {"foo": "bar", "request_id": request_id},
    }


async def test_domain_error_keeps_incoming_request_id(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/missing")
    async def trigger_not_found() -> None:  # pragma: no cover - defined in test
        raise NotFoundError("List not found")

    response = await client.get("/error/missing", headers={"X-Request-ID": "req-123"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["X-Request-ID"] == "req-123"
    assert response.json() == {
        "code": "not_found",
        "message": "List not found",
        "details": {"request_id": "req-123"},
    }


async def test_validation_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    class ExamplePayload(BaseModel):
        name: str

    @app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    response = await client.post("/error/validation", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    payload = response.json()
    request_id = response.headers["X-Request-ID"]
    assert payload["code"] == "validation_error"
    assert payload["message"] == "Request validation failed."
    assert "errors" in payload["details"]
    assert payload["details"]["request_id"] == request_id


async def test_not_found_error_response_schema(client: AsyncClient) -> None:
    response = await client.get("/error/not-found")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    request_id = response.headers["X-Request-ID"]
    assert payload["code"] == "not_found"
    assert payload["message"]
    assert payload["details"]["request_id"] == request_id


async def test_duplicate_key_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/database")
    async def trigger_duplicate_key() -> None:  # pragma: no cover - defined in test
        raise DuplicateKeyError("E11000 duplicate key error")

    response = await client.get("/error/database")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    payload = response.json()
    request_id = response.headers["X-Request-ID"]
    assert payload["code"] == "conflict"
    assert payload["message"] == "Resource already exists"
    assert payload["details"]["request_id"] == request_id
    assert "E11000" not in response.text


async def test_unhandled_error_hides_internal_details(app: FastAPI) -> None:
    @app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Sensitive detail")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = response.json()
    assert payload["code"] == "server_error"
    assert payload["message"] == "Internal server error."
    assert "Sensitive" not in response.text


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


async def test_request_id_attached_to_logs(app: FastAPI, client: AsyncClient) -> None:
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    @app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    try:
        response = await client.get("/log")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in handler.records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id


@pytest.mark.parametrize("supplied", ["x" * 200, "   "])
async def test_unusable_request_ids_are_replaced(client: AsyncClient, supplied: str) -> None:
    response = await client.get("/healthz", headers={"X-Request-ID": supplied})

    request_id = response.headers["X-Request-ID"]
    assert request_id != supplied.strip()
    assert len(request_id) == 32


async def test_completed_requests_are_logged(client: AsyncClient) -> None:
    logger = logging.getLogger("tasklists.app.core.middleware")
    handler = _InMemoryHandler()
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    try:
        response = await client.get("/healthz", headers={"X-Request-ID": "req-access-1"})
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    (record,) = [item for item in handler.records if item.getMessage() == "Request completed"]
    assert response.status_code == 200
    assert record.path == "/healthz"
    assert record.status_code == 200
    assert record.method == "GET"
