"""
Pytest fixtures for marketplace tests.

Provides an in-memory stand-in for the offers, users and redemptions
tables whose redeem_offer follows the same rules as the SQL function in
migrations/002_transactions.sql.
"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Optional

from modules.accounts.models import User
from modules.marketplace.models import (
    CreateOfferRequest,
    Offer,
    OfferWithMarket,
    MarketSummary,
    Redemption,
    RedemptionOutcome,
    RedemptionStatus,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryMarketplace:
    """Users, offers and redemptions kept in dicts."""

    def __init__(self):
        self.users: dict[int, User] = {}
        self.offers: dict[int, Offer] = {}
        self.redemptions: list[Redemption] = []
        self.taken_coupons: set[str] = set()
        self.clock: Optional[datetime] = None

    def add_user(self, user_id: int, points: int) -> User:
        user = User(id=user_id, name=f"User {user_id}", email=f"user{user_id}@example.com", points=points)
        self.users[user_id] = user
        return user

    def add_offer(self, cost: int, **fields) -> Offer:
        offer_id = len(self.offers) + 1
        offer = Offer(
            id=offer_id,
            title=fields.pop("title", f"Offer {offer_id}"),
            cost=cost,
            market_id=fields.pop("market_id", 10),
            created_at=fields.pop("created_at", NOW - timedelta(days=1)),
            **fields,
        )
        self.offers[offer_id] = offer
        return offer

    def now(self) -> datetime:
        return self.clock or datetime.now(timezone.utc)


class FakeOfferRepository:
    def __init__(self, store: InMemoryMarketplace):
        self.store = store
        self.attempted_coupons: list[str] = []

    def create_offer(self, market_id: int, request: CreateOfferRequest) -> Offer:
        return self.store.add_offer(
            request.cost,
            title=request.title,
            description=request.description,
            image=request.image,
            valid_from=request.valid_from,
            valid_until=request.valid_until,
            market_id=market_id,
        )

    def get_offer(self, offer_id: int) -> Optional[Offer]:
        return self.store.offers.get(offer_id)

    def list_active_offers(self) -> list[OfferWithMarket]:
        return [
            OfferWithMarket(**o.model_dump(), market=MarketSummary(name="Mercado"))
            for o in self.store.offers.values()
            if o.active
        ]

    def list_market_offers(self, market_id: int) -> list[Offer]:
        return [o for o in self.store.offers.values() if o.market_id == market_id]

    def redeem_offer(self, user_id: int, offer_id: int, coupon_code: str) -> RedemptionOutcome:
        self.attempted_coupons.append(coupon_code)
        offer = self.store.offers.get(offer_id)
        now = self.store.now()
        if offer is None or not offer.active:
            return RedemptionOutcome(status=RedemptionStatus.OFFER_UNAVAILABLE)
        if offer.valid_from and offer.valid_from > now:
            return RedemptionOutcome(status=RedemptionStatus.OFFER_NOT_STARTED)
        if offer.valid_until and offer.valid_until < now:
            return RedemptionOutcome(status=RedemptionStatus.OFFER_EXPIRED)

        user = self.store.users[user_id]
        if user.points < offer.cost:
            return RedemptionOutcome(status=RedemptionStatus.INSUFFICIENT_POINTS)
        if coupon_code in self.store.taken_coupons:
            return RedemptionOutcome(status=RedemptionStatus.COUPON_CONFLICT)

        self.store.users[user_id] = user.model_copy(update={"points": user.points - offer.cost})
        redemption = Redemption(
            id=len(self.store.redemptions) + 1,
            user_id=user_id,
            offer_id=offer.id,
            cost_at_time=offer.cost,
            coupon_code=coupon_code,
            created_at=now,
        )
        self.store.redemptions.append(redemption)
        self.store.taken_coupons.add(coupon_code)
        return RedemptionOutcome(status=RedemptionStatus.OK, redemption=redemption)


class FakeAccountRepository:
    def __init__(self, store: InMemoryMarketplace):
        self.store = store

    def get_user(self, user_id: int) -> Optional[User]:
        return self.store.users.get(user_id)


@pytest.fixture
def store() -> InMemoryMarketplace:
    store = InMemoryMarketplace()
    store.clock = NOW
    return store


@pytest.fixture
def offer_repository(store) -> FakeOfferRepository:
    return FakeOfferRepository(store)


@pytest.fixture
def account_repository(store) -> FakeAccountRepository:
    return FakeAccountRepository(store)
