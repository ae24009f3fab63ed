"""
Marketplace service implementation.

Offer publishing and the points-for-coupon exchange.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from shared.exceptions import StorageError
from modules.accounts.repository import AccountRepository
from modules.accounts.exceptions import UserNotFoundError

from .interfaces import IMarketplaceService
from .repository import OfferRepository
from .coupons import generate_coupon_code
from .models import (
    CreateOfferRequest,
    Offer,
    OfferWithMarket,
    Redemption,
    RedemptionStatus,
)
from .exceptions import (
    InsufficientPointsError,
    OfferExpiredError,
    OfferNotStartedError,
    OfferUnavailableError,
)

logger = logging.getLogger(__name__)

# Pause before retrying after a coupon collision, so the next code
# comes from a different millisecond.
COUPON_RETRY_DELAY = 0.002


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def check_redeemable(offer: Optional[Offer], offer_id: int, now: datetime) -> Offer:
    """
    Validate an offer against the clock.

    Raises the error for the first failing check, in order: missing or
    inactive, not started, expired.
    """
    if offer is None or not offer.active:
        raise OfferUnavailableError(offer_id)
    if offer.valid_from is not None and now < _as_utc(offer.valid_from):
        raise OfferNotStartedError(offer_id)
    if offer.valid_until is not None and now > _as_utc(offer.valid_until):
        raise OfferExpiredError(offer_id)
    return offer


class MarketplaceService(IMarketplaceService):
    """Marketplace service with Supabase backend."""

    def __init__(
        self,
        repository: OfferRepository,
        accounts: AccountRepository,
        coupon_max_attempts: int = 3,
    ):
        self._repository = repository
        self._accounts = accounts
        self._coupon_max_attempts = max(1, coupon_max_attempts)

    async def create_offer(self, market_id: int, request: CreateOfferRequest) -> Offer:
        """Publish an offer."""
        offer = self._repository.create_offer(market_id, request)
        logger.info(f"Offer {offer.id} published by market {market_id} for {offer.cost} points")
        return offer

    async def list_active_offers(self) -> list[OfferWithMarket]:
        """List the public marketplace."""
        return self._repository.list_active_offers()

    async def list_market_offers(self, market_id: int) -> list[Offer]:
        """List a market's own offers."""
        return self._repository.list_market_offers(market_id)

    async def redeem_offer(
        self,
        user_id: int,
        offer_id: int,
        now: Optional[datetime] = None,
    ) -> Redemption:
        """Exchange points for a coupon."""
        now = _as_utc(now or datetime.now(timezone.utc))

        offer = check_redeemable(self._repository.get_offer(offer_id), offer_id, now)

        user = self._accounts.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if user.points < offer.cost:
            raise InsufficientPointsError(required=offer.cost, available=user.points)

        for attempt in range(1, self._coupon_max_attempts + 1):
            coupon_code = generate_coupon_code(offer.id)
            outcome = self._repository.redeem_offer(user_id, offer.id, coupon_code)

            if outcome.status == RedemptionStatus.OK and outcome.redemption is not None:
                logger.info(
                    f"User {user_id} redeemed offer {offer.id} for {offer.cost} points "
                    f"(coupon {outcome.redemption.coupon_code})"
                )
                return outcome.redemption

            if outcome.status == RedemptionStatus.OFFER_UNAVAILABLE:
                # Deactivated after the checks above
                raise OfferUnavailableError(offer.id)
            if outcome.status == RedemptionStatus.OFFER_NOT_STARTED:
                raise OfferNotStartedError(offer.id)
            if outcome.status == RedemptionStatus.OFFER_EXPIRED:
                # Window closed between the checks above and the transaction
                raise OfferExpiredError(offer.id)
            if outcome.status == RedemptionStatus.INSUFFICIENT_POINTS:
                # A concurrent redemption spent the balance first
                raise InsufficientPointsError(required=offer.cost)

            logger.warning(
                f"Coupon {coupon_code} already taken "
                f"(attempt {attempt}/{self._coupon_max_attempts})"
            )
            await asyncio.sleep(COUPON_RETRY_DELAY)

        logger.error(f"Could not generate a unique coupon for offer {offer.id}")
        raise StorageError(
            "Could not generate a unique coupon code",
            operation="redeem_offer",
            details={"offer_id": offer.id, "attempts": self._coupon_max_attempts},
        )
