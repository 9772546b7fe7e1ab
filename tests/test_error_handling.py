"""
Error handling and edge case tests.

- Storage errors surfaced by PersistenceContext.save() map to 409 responses
- Concurrency conflicts map to CONCURRENCY_CONFLICT
- Health check reports an unreachable database with 503
- Docs can be switched off
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from test_fixtures import client, make_settings
from app.exceptions import IdentityChangeError, ServiceValidationError
from main import create_app


@pytest.fixture
def failing_client():
    """App with extra routes that raise the errors the handlers translate"""
    app = create_app(make_settings())

    @app.get("/boom/integrity")
    def raise_integrity():
        raise IntegrityError("INSERT INTO meals ...", {}, Exception("FOREIGN KEY constraint failed"))

    @app.get("/boom/stale")
    def raise_stale():
        raise StaleDataError("UPDATE statement on table 'meals' expected to update 1 row(s); 0 were matched.")

    @app.get("/boom/identity")
    def raise_identity():
        raise IdentityChangeError("Meal", uuid.uuid4(), uuid.uuid4())

    @app.get("/boom/crash")
    def raise_unexpected():
        raise RuntimeError("disk on fire")

    @app.get("/boom/validation")
    def raise_validation():
        raise ServiceValidationError("calories must be positive", code="BAD_CALORIES")

    with TestClient(app) as test_client:
        yield test_client


def test_integrity_error_maps_to_constraint_violation(failing_client):
    response = failing_client.get("/boom/integrity")

    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "CONSTRAINT_VIOLATION"
    # driver messages are not leaked to clients
    assert "FOREIGN KEY" not in body["error"]["message"]


def test_stale_data_maps_to_concurrency_conflict(failing_client):
    response = failing_client.get("/boom/stale")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONCURRENCY_CONFLICT"


def test_identity_change_maps_to_constraint_violation(failing_client):
    response = failing_client.get("/boom/identity")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


def test_service_validation_error_keeps_code(failing_client):
    response = failing_client.get("/boom/validation")

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "BAD_CALORIES",
        "message": "calories must be positive",
    }


def test_unexpected_error_keeps_tracing_headers(failing_client):
    response = failing_client.get("/boom/crash", headers={"X-Request-ID": "abc"})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "disk on fire" not in response.text
    assert response.headers["X-Request-ID"] == "abc"
    assert "X-Process-Time" in response.headers
    assert response.headers["api-supported-versions"] == "1.0"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


def test_malformed_uuid_is_validation_error(client):
    response = client.get("/api/v1/meals/not-a-uuid")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_negative_calories_rejected(client):
    user = client.post("/api/v1/users", json={"name": "Ana", "email": "ana@test.com"}).json()

    response = client.post(
        "/api/v1/meals",
        json={"user_id": user["id"], "title": "Café", "calories": -5, "time_of_day": "breakfast"},
    )

    assert response.status_code == 422


def test_health_reports_unreachable_database(client):
    client.app.state.database.ping = lambda: False

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
    assert response.json()["database"] == "unreachable"


def test_docs_can_be_disabled():
    app = create_app(make_settings(docs_enabled=False))

    with TestClient(app) as test_client:
        assert test_client.get("/swagger").status_code == 404
        assert test_client.get("/swagger/v1/swagger.json").status_code == 404
        assert test_client.get("/").json()["swagger"] is None
