"""
Marketplace module interface.

The API layer depends on IMarketplaceService for offers and redemptions.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import CreateOfferRequest, Offer, OfferWithMarket, Redemption


@runtime_checkable
class IMarketplaceService(Protocol):
    """Interface for the points marketplace."""

    async def create_offer(self, market_id: int, request: CreateOfferRequest) -> Offer:
        """Publish an offer owned by ``market_id``."""
        ...

    async def list_active_offers(self) -> list[OfferWithMarket]:
        """List active offers across all markets, newest first."""
        ...

    async def list_market_offers(self, market_id: int) -> list[Offer]:
        """List every offer of one market, newest first."""
        ...

    async def redeem_offer(
        self,
        user_id: int,
        offer_id: int,
        now: Optional[datetime] = None,
    ) -> Redemption:
        """
        Exchange a user's points for an offer.

        Checks run in this order and the first failure wins: offer exists
        and is active, window has opened, window has not closed, balance
        covers the cost.

        Returns:
            The stored redemption with its coupon code

        Raises:
            OfferUnavailableError: Offer missing or inactive
            OfferNotStartedError: Before valid_from
            OfferExpiredError: After valid_until
            InsufficientPointsError: Balance below cost
            UserNotFoundError: Caller's account no longer exists
        """
        ...
