"""Request id propagation and the access log line."""

import logging

from fastapi import FastAPI
import httpx

from irontrack.middleware.request_logging import RequestLoggingMiddleware


async def test_generated_request_id_is_returned_and_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="irontrack.request"):
        response = await client.get("/api/health")

    request_id = response.headers["X-Request-ID"]
    assert request_id
    (record,) = [r for r in caplog.records if r.name == "irontrack.request"]
    message = record.getMessage()
    assert message.startswith("request_complete")
    assert f"request_id={request_id}" in message
    assert "method=GET path=/api/health status_code=200" in message


async def test_incoming_request_id_is_propagated(client):
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_error_responses_carry_request_id(client):
    response = await client.get("/api/workouts/12345")
    assert response.status_code == 404
    assert response.headers["X-Request-ID"]


async def test_unhandled_exception_becomes_json_500(caplog):
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        with caplog.at_level(logging.INFO, logger="irontrack.request"):
            response = await c.get("/boom", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert response.headers["X-Request-ID"] == "req-500"
    assert any("status_code=500" in r.getMessage() for r in caplog.records if r.name == "irontrack.request")
