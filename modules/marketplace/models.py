"""
Marketplace module data models.

Offers are published by markets and bought with points; a redemption is
the immutable receipt of one purchase.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from shared.models import CamelModel, RequestModel

DEFAULT_OFFER_ICON = "fa-gift"


class MarketSummary(CamelModel):
    """Owning market's names, attached to public offer listings."""

    name: str
    trade_name: Optional[str] = None


class Offer(CamelModel):
    """A reward published by a market."""

    id: int
    title: str
    description: str = ""
    cost: int
    image: str = DEFAULT_OFFER_ICON
    active: bool = True
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    market_id: int
    created_at: datetime


class OfferWithMarket(Offer):
    """Offer as shown in the public marketplace."""

    market: Optional[MarketSummary] = None


class CreateOfferRequest(RequestModel):
    """Request to publish a new offer."""

    title: str = Field(..., min_length=1, max_length=120)
    description: str = Field(default="", max_length=1000)
    cost: int = Field(..., gt=0, description="Price in points")
    image: str = Field(default=DEFAULT_OFFER_ICON, min_length=1, max_length=50, description="Icon tag")
    valid_from: Optional[datetime] = Field(None, description="Redeemable from (inclusive)")
    valid_until: Optional[datetime] = Field(None, description="Redeemable until (inclusive)")

    @field_validator("valid_from", "valid_until")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Timestamps without an offset are taken as UTC."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def check_window(self) -> "CreateOfferRequest":
        if self.valid_from and self.valid_until and self.valid_until < self.valid_from:
            raise ValueError("validUntil must not be earlier than validFrom")
        return self


class RedeemRequest(RequestModel):
    """Request to buy an offer with points."""

    offer_id: int = Field(..., gt=0)


class Redemption(CamelModel):
    """Receipt of a completed redemption. Never mutated."""

    id: int
    user_id: int
    offer_id: int
    cost_at_time: int
    coupon_code: str
    created_at: datetime


class RedemptionReceipt(CamelModel):
    """Response of POST /market/redeem."""

    message: str = "Redemption completed"
    coupon: Redemption


class RedemptionStatus(str, Enum):
    """Outcome kinds returned by the redeem_offer transaction."""

    OK = "ok"
    OFFER_UNAVAILABLE = "offer_unavailable"
    OFFER_NOT_STARTED = "offer_not_started"
    OFFER_EXPIRED = "offer_expired"
    INSUFFICIENT_POINTS = "insufficient_points"
    COUPON_CONFLICT = "coupon_conflict"


class RedemptionOutcome(BaseModel):
    """Result of the redeem_offer transaction."""

    status: RedemptionStatus
    redemption: Optional[Redemption] = None
