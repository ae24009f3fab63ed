"""Tests for application-wide error handling."""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_account_service, get_marketplace_service
from shared.exceptions import StorageError


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


class TestRequestValidation:
    def test_invalid_body_returns_400(self, app):
        """Schema failures should be 400, not FastAPI's default 422."""
        service = AsyncMock()
        app.dependency_overrides[get_account_service] = lambda: service

        response = TestClient(app).post("/users", json={"name": "Ana", "email": "not-an-email"})

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Validation Error"
        assert isinstance(data["detail"], list)
        service.register_user.assert_not_called()

    def test_unknown_fields_rejected(self, app):
        """Request bodies should reject unknown fields."""
        service = AsyncMock()
        app.dependency_overrides[get_account_service] = lambda: service

        response = TestClient(app).post(
            "/users",
            json={"name": "Ana", "email": "ana@example.com", "password": "pw", "points": 99999},
        )

        assert response.status_code == 400
        service.register_user.assert_not_called()

    def test_malformed_json_returns_400(self, app):
        """Unparseable JSON should also be a 400."""
        response = TestClient(app).post(
            "/users", content="{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400


class TestServerErrors:
    def test_storage_error_returns_generic_500(self, app):
        """Storage failures should not leak internal details."""
        service = AsyncMock()
        service.list_markets.side_effect = StorageError(
            "Database error during list_markets", operation="list_markets"
        )
        app.dependency_overrides[get_account_service] = lambda: service

        response = TestClient(app).get("/markets")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_unexpected_error_returns_generic_500(self, app):
        """Unhandled exceptions should be a generic 500."""
        service = AsyncMock()
        service.list_active_offers.side_effect = RuntimeError("boom: secret internals")
        app.dependency_overrides[get_marketplace_service] = lambda: service

        response = TestClient(app, raise_server_exceptions=False).get("/market/offers")

        assert response.status_code == 500
        assert "secret internals" not in response.text
