"""Tests for main API endpoints."""

import pytest
from fastapi.testclient import TestClient

from user_api import main as main_module
from user_api.exceptions import StoreError
from user_api.infrastructure.common import middleware as middleware_module
from user_api.infrastructure.users.routers.users import get_user_service
from user_api.main import app


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Server is running"}


def test_openapi_schema_lists_user_routes(client: TestClient) -> None:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/users/" in paths
    assert "/api/v1/users/{user_id}" in paths


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": True, "msg": "Not Found"}


def test_request_id_is_generated(client: TestClient) -> None:
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_request_id_is_propagated(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_unhandled_exception_hides_details(client: TestClient) -> None:
    """Unexpected errors return a generic 500 without internals."""

    def broken_service() -> None:
        raise RuntimeError("connection string with secrets")

    app.dependency_overrides[get_user_service] = broken_service
    raw_client = TestClient(app, raise_server_exceptions=False)

    response = raw_client.get("/api/v1/users/")

    assert response.status_code == 500
    assert response.json() == {"error": True, "msg": "Internal server error"}
    assert "secrets" not in response.text


class EventRecorder:
    """Stands in for a structlog logger and keeps (level, event) pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def info(self, event: str, **kw: object) -> None:
        self.events.append(("info", event))

    def error(self, event: str, **kw: object) -> None:
        self.events.append(("error", event))

    def exception(self, event: str, **kw: object) -> None:
        self.events.append(("exception", event))


def test_handled_and_escaped_errors_log_distinct_events(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    app_events = EventRecorder()
    middleware_events = EventRecorder()
    monkeypatch.setattr(main_module, "logger", app_events)
    monkeypatch.setattr(middleware_module, "logger", middleware_events)

    def store_down() -> None:
        raise StoreError("Failed to reach the database", "test")

    app.dependency_overrides[get_user_service] = store_down
    response = client.get("/api/v1/users/")

    assert response.status_code == 500
    assert response.json() == {"error": True, "msg": "Failed to reach the database"}
    assert ("error", "request_error_handled") in app_events.events
    assert ("info", "request_completed") in middleware_events.events

    def broken_service() -> None:
        raise RuntimeError("boom")

    app.dependency_overrides[get_user_service] = broken_service
    TestClient(app, raise_server_exceptions=False).get("/api/v1/users/")

    assert ("exception", "request_failed") in middleware_events.events
    assert ("error", "unhandled_exception") in app_events.events
