"""Tests for health check endpoints."""

from unittest.mock import patch, MagicMock
from fastapi.testclient import TestClient

from api.app import create_app


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        client = TestClient(create_app())
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert set(data.keys()) == {"status", "version"}

    @patch("api.routes.health.get_supabase_client")
    def test_readiness_check(self, mock_client):
        """Readiness should report ready when the database client is available."""
        mock_client.return_value = MagicMock()
        client = TestClient(create_app())

        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "configured"}

    def test_readiness_without_database_config(self):
        """Readiness should return 503 when Supabase is not configured."""
        client = TestClient(create_app())

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_readiness_with_malformed_database_url(self, monkeypatch):
        """A Supabase URL the client rejects should also give 503, not 500."""
        from shared.config import get_settings

        monkeypatch.setenv("RECYCLEME_SUPABASE_URL", "supabase.example")
        monkeypatch.setenv("RECYCLEME_SUPABASE_SERVICE_ROLE_KEY", "test-key")
        get_settings.cache_clear()
        client = TestClient(create_app(), raise_server_exceptions=False)

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not_ready", "database": "unconfigured"}
