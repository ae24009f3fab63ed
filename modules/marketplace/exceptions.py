"""
Marketplace module exceptions.

Every redemption precondition has its own error so the client can show
the exact reason. All of them map to HTTP 400.
"""

from typing import Optional

from shared.exceptions import RecycleMeError, ValidationError


class MarketplaceError(RecycleMeError):
    """Base exception for marketplace-related errors."""

    pass


class OfferUnavailableError(MarketplaceError, ValidationError):
    """Raised when an offer does not exist or is inactive."""

    def __init__(self, offer_id: int):
        super().__init__(
            "Offer unavailable",
            code="OFFER_UNAVAILABLE",
            details={"offer_id": offer_id},
        )


class OfferNotStartedError(MarketplaceError, ValidationError):
    """Raised when an offer's validity window has not opened yet."""

    def __init__(self, offer_id: int):
        super().__init__(
            "This offer has not started yet",
            code="OFFER_NOT_STARTED",
            details={"offer_id": offer_id},
        )


class OfferExpiredError(MarketplaceError, ValidationError):
    """Raised when an offer's validity window has closed."""

    def __init__(self, offer_id: int):
        super().__init__(
            "This offer has expired",
            code="OFFER_EXPIRED",
            details={"offer_id": offer_id},
        )


class InsufficientPointsError(MarketplaceError, ValidationError):
    """
    Raised when a user doesn't have enough points for an offer.

    The UI should handle this gracefully by pointing the user
    to the recycling flow.
    """

    def __init__(self, required: int, available: Optional[int] = None):
        details: dict = {"required": required}
        if available is not None:
            details["available"] = available
            details["shortfall"] = required - available
        super().__init__(
            "Insufficient balance",
            code="INSUFFICIENT_POINTS",
            details=details,
        )
