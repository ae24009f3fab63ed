"""
Tests for account endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_account_service
from modules.accounts.models import Market, Rank, User, UserProfile
from modules.accounts.exceptions import (
    CnpjAlreadyRegisteredError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
)

MARKET_BODY = {
    "name": "Mercado Verde Ltda",
    "tradeName": "Mercado Verde",
    "cnpj": "12.345.678/0001-90",
    "password": "market-pass",
    "address": "Rua das Flores, 100",
    "latitude": -23.55,
    "longitude": -46.63,
}


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def account_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_account_service] = lambda: service
    return service


class TestRegisterUser:
    """Tests for POST /users"""

    def test_success(self, app, account_service):
        account_service.register_user.return_value = User(
            id=1, name="Ana Souza", email="ana@example.com"
        )

        response = TestClient(app).post(
            "/users",
            json={"name": "Ana Souza", "email": "ana@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["points"] == 0
        assert data["isCertified"] is False
        assert "password" not in data

    def test_duplicate_email(self, app, account_service):
        account_service.register_user.side_effect = EmailAlreadyRegisteredError()

        response = TestClient(app).post(
            "/users",
            json={"name": "Ana Souza", "email": "ana@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "This email is already registered"


class TestRegisterMarket:
    """Tests for POST /markets"""

    def test_success(self, app, account_service):
        account_service.register_market.return_value = Market(
            id=10, name="Mercado Verde Ltda", trade_name="Mercado Verde", cnpj="12345678000190"
        )

        response = TestClient(app).post("/markets", json=MARKET_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["tradeName"] == "Mercado Verde"
        assert data["isVerified"] is False
        request = account_service.register_market.call_args.args[0]
        assert request.cnpj == "12345678000190"

    def test_duplicate_cnpj(self, app, account_service):
        account_service.register_market.side_effect = CnpjAlreadyRegisteredError()

        response = TestClient(app).post("/markets", json=MARKET_BODY)

        assert response.status_code == 409

    def test_missing_coordinates(self, app, account_service):
        body = {k: v for k, v in MARKET_BODY.items() if k != "latitude"}

        response = TestClient(app).post("/markets", json=body)

        assert response.status_code == 400
        account_service.register_market.assert_not_called()


class TestListMarkets:
    """Tests for GET /markets"""

    def test_lists_without_passwords(self, app, account_service):
        account_service.list_markets.return_value = [
            Market(id=10, name="Mercado Verde Ltda", cnpj="12345678000190", latitude=-23.5, longitude=-46.6),
            Market(id=11, name="Super Eco", cnpj="98765432000110"),
        ]

        response = TestClient(app).get("/markets")

        assert response.status_code == 200
        data = response.json()
        assert [m["id"] for m in data] == [10, 11]
        assert all("password" not in m for m in data)


class TestProfile:
    """Tests for GET /profile/me"""

    def test_returns_profile(self, app, account_service, user_headers):
        account_service.get_profile.return_value = UserProfile(
            id=1,
            name="Ana Souza",
            email="ana@example.com",
            points=200,
            xp=500,
            level=1,
            xp_needed=1000,
            rank=Rank.BRONZE,
        )

        response = TestClient(app).get("/profile/me", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["points"] == 200
        assert data["xpNeeded"] == 1000
        assert data["rank"] == "Bronze"
        assert data["recentActivity"] == []

    def test_deleted_user(self, app, account_service, user_headers):
        account_service.get_profile.side_effect = UserNotFoundError(1)

        response = TestClient(app).get("/profile/me", headers=user_headers)

        assert response.status_code == 404

    def test_requires_token(self, app, account_service):
        response = TestClient(app).get("/profile/me")

        assert response.status_code == 401
