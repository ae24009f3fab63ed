"""
Collections module data models.

A collection is a recycling deposit: the user registers what they are
bringing, and the market confirms the final weight on site, which awards
points.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel, RequestModel


class CollectionStatus(str, Enum):
    """Deposit lifecycle."""

    PENDING = "PENDING"      # Created by the user, waiting at the market
    COMPLETED = "COMPLETED"  # Weighed and confirmed, points awarded


class Collection(CamelModel):
    """A recycling deposit request."""

    id: int
    user_id: int
    market_id: Optional[int] = None
    material_type: str
    weight_in_kg: float
    points_earned: int = 0
    status: CollectionStatus = CollectionStatus.PENDING
    created_at: datetime
    updated_at: Optional[datetime] = None


class CollectionOwner(CamelModel):
    """Public contact info of the user who created a collection."""

    name: str
    email: str


class CollectionDetails(Collection):
    """Collection as seen by the market inspecting it."""

    user: Optional[CollectionOwner] = None


class CreateCollectionRequest(RequestModel):
    """Request to register a new deposit."""

    material_type: str = Field(..., min_length=1, max_length=100, description="e.g. plastic, glass")
    weight_in_kg: float = Field(..., gt=0, le=10000, description="Estimated weight in kilograms")


class CreateCollectionResponse(CamelModel):
    """Response after registering a deposit. The token is the collection id."""

    message: str = "Collection request created"
    token: int
    details: Collection


class ConfirmCollectionRequest(RequestModel):
    """Request sent by the market after weighing the material."""

    final_weight: float = Field(..., gt=0, le=10000, description="Measured weight in kilograms")


class ConfirmCollectionResponse(CamelModel):
    """Response after a deposit is confirmed."""

    message: str = "Collection confirmed and points awarded"
    points_generated: int


class MarketStats(CamelModel):
    """Totals over a market's completed collections."""

    daily_count: int = 0
    total_weight: float = 0.0
    total_points: int = 0


class ConfirmationStatus(str, Enum):
    """Outcome kinds returned by the confirm_collection transaction."""

    OK = "ok"
    NOT_FOUND = "not_found"
    ALREADY_COMPLETED = "already_completed"


class ConfirmationOutcome(BaseModel):
    """Result of the confirm_collection transaction."""

    status: ConfirmationStatus
    collection: Optional[Collection] = None
