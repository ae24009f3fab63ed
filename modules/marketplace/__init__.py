"""
Marketplace module.

Offers published by markets and their redemption for points.

Public API:
- IMarketplaceService: Interface for marketplace operations
- Offer, Redemption: Marketplace models
- Redemption exceptions: InsufficientPointsError, etc.
"""

from .interfaces import IMarketplaceService
from .models import (
    CreateOfferRequest,
    Offer,
    OfferWithMarket,
    RedeemRequest,
    Redemption,
    RedemptionReceipt,
)
from .exceptions import (
    InsufficientPointsError,
    MarketplaceError,
    OfferExpiredError,
    OfferNotStartedError,
    OfferUnavailableError,
)

__all__ = [
    # Interface
    "IMarketplaceService",
    # Models
    "CreateOfferRequest",
    "Offer",
    "OfferWithMarket",
    "RedeemRequest",
    "Redemption",
    "RedemptionReceipt",
    # Exceptions
    "InsufficientPointsError",
    "MarketplaceError",
    "OfferExpiredError",
    "OfferNotStartedError",
    "OfferUnavailableError",
]
