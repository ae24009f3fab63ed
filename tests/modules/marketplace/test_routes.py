"""
Tests for marketplace endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_account_service, get_marketplace_service
from modules.accounts.service import AccountService
from modules.marketplace.models import Offer, OfferWithMarket, MarketSummary, Redemption
from modules.marketplace.service import MarketplaceService
from modules.marketplace.exceptions import (
    InsufficientPointsError,
    OfferExpiredError,
    OfferNotStartedError,
    OfferUnavailableError,
)

CREATED = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def marketplace_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_marketplace_service] = lambda: service
    return service


def make_offer(**overrides) -> Offer:
    fields = {"id": 3, "title": "Free coffee", "cost": 150, "market_id": 10, "created_at": CREATED}
    fields.update(overrides)
    return Offer(**fields)


class TestCreateOffer:
    """Tests for POST /market/offers"""

    def test_market_publishes_offer(self, app, marketplace_service, market_headers):
        """Unverified markets may publish offers."""
        marketplace_service.create_offer.return_value = make_offer()

        response = TestClient(app).post(
            "/market/offers",
            json={"title": "Free coffee", "description": "One espresso", "cost": 150},
            headers=market_headers,
        )

        assert response.status_code == 201
        assert response.json()["active"] is True
        market_id, request = marketplace_service.create_offer.call_args.args
        assert market_id == 10
        assert request.cost == 150

    def test_user_cannot_publish(self, app, marketplace_service, user_headers):
        response = TestClient(app).post(
            "/market/offers", json={"title": "Free coffee", "cost": 150}, headers=user_headers
        )

        assert response.status_code == 403
        marketplace_service.create_offer.assert_not_called()

    def test_invalid_window(self, app, marketplace_service, market_headers):
        response = TestClient(app).post(
            "/market/offers",
            json={
                "title": "Free coffee",
                "cost": 150,
                "validFrom": "2025-03-10T00:00:00Z",
                "validUntil": "2025-03-01T00:00:00Z",
            },
            headers=market_headers,
        )

        assert response.status_code == 400

    def test_requires_token(self, app, marketplace_service):
        response = TestClient(app).post("/market/offers", json={"title": "x", "cost": 1})
        assert response.status_code == 401


class TestListOffers:
    """Tests for GET /market/offers and GET /market/my-offers"""

    def test_public_listing(self, app, marketplace_service):
        marketplace_service.list_active_offers.return_value = [
            OfferWithMarket(
                **make_offer().model_dump(),
                market=MarketSummary(name="Mercado Verde Ltda", trade_name="Mercado Verde"),
            )
        ]

        response = TestClient(app).get("/market/offers")

        assert response.status_code == 200
        data = response.json()
        assert data[0]["market"]["tradeName"] == "Mercado Verde"
        assert data[0]["marketId"] == 10

    def test_my_offers(self, app, marketplace_service, market_headers):
        marketplace_service.list_market_offers.return_value = [make_offer(active=False)]

        response = TestClient(app).get("/market/my-offers", headers=market_headers)

        assert response.status_code == 200
        assert response.json()[0]["active"] is False
        marketplace_service.list_market_offers.assert_awaited_once_with(10)

    def test_my_offers_requires_market(self, app, marketplace_service, user_headers):
        response = TestClient(app).get("/market/my-offers", headers=user_headers)
        assert response.status_code == 403


class TestRedeem:
    """Tests for POST /market/redeem"""

    def test_success(self, app, marketplace_service, user_headers):
        marketplace_service.redeem_offer.return_value = Redemption(
            id=8, user_id=1, offer_id=3, cost_at_time=150, coupon_code="#3-0917", created_at=CREATED
        )

        response = TestClient(app).post("/market/redeem", json={"offerId": 3}, headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Redemption completed"
        assert data["coupon"]["couponCode"] == "#3-0917"
        assert data["coupon"]["costAtTime"] == 150
        marketplace_service.redeem_offer.assert_awaited_once_with(1, 3)

    @pytest.mark.parametrize(
        "error,message",
        [
            (OfferUnavailableError(3), "Offer unavailable"),
            (OfferNotStartedError(3), "This offer has not started yet"),
            (OfferExpiredError(3), "This offer has expired"),
            (InsufficientPointsError(required=400, available=200), "Insufficient balance"),
        ],
    )
    def test_domain_failures_are_400(self, app, marketplace_service, user_headers, error, message):
        marketplace_service.redeem_offer.side_effect = error

        response = TestClient(app).post("/market/redeem", json={"offerId": 3}, headers=user_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == message

    def test_market_cannot_redeem(self, app, marketplace_service, verified_market_headers):
        response = TestClient(app).post(
            "/market/redeem", json={"offerId": 3}, headers=verified_market_headers
        )

        assert response.status_code == 403
        marketplace_service.redeem_offer.assert_not_called()

    def test_missing_offer_id(self, app, marketplace_service, user_headers):
        response = TestClient(app).post("/market/redeem", json={}, headers=user_headers)
        assert response.status_code == 400


class TestRedeemEndToEnd:
    """Redemption flow through the HTTP layer with the in-memory store."""

    @pytest.fixture
    def wired_app(self, app, store, offer_repository, account_repository):
        store.clock = None
        marketplace = MarketplaceService(offer_repository, account_repository)
        accounts = AccountService(account_repository)
        app.dependency_overrides[get_marketplace_service] = lambda: marketplace
        app.dependency_overrides[get_account_service] = lambda: accounts
        return app

    def test_redeem_then_overspend(self, wired_app, store, user_headers):
        """500 points: a 300 offer succeeds, then a 400 offer fails and the balance stays 200."""
        store.add_user(1, points=500)
        cheap = store.add_offer(cost=300)
        pricey = store.add_offer(cost=400)
        client = TestClient(wired_app)

        first = client.post("/market/redeem", json={"offerId": cheap.id}, headers=user_headers)
        assert first.status_code == 200
        assert first.json()["coupon"]["couponCode"].startswith(f"#{cheap.id}-")

        profile = client.get("/profile/me", headers=user_headers)
        assert profile.json()["points"] == 200

        second = client.post("/market/redeem", json={"offerId": pricey.id}, headers=user_headers)
        assert second.status_code == 400
        assert second.json()["detail"] == "Insufficient balance"

        profile = client.get("/profile/me", headers=user_headers)
        assert profile.json()["points"] == 200
        assert len(store.redemptions) == 1
