"""
Collections service implementation.

Registers recycling deposits and turns confirmed weight into points.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, ROUND_FLOOR
from typing import Optional

from .interfaces import ICollectionService
from .repository import CollectionRepository
from .models import (
    Collection,
    CollectionDetails,
    CollectionStatus,
    ConfirmationStatus,
    CreateCollectionRequest,
    MarketStats,
)
from .exceptions import CollectionNotFoundError, CollectionAlreadyCompletedError

logger = logging.getLogger(__name__)


def calculate_points(weight_in_kg: float, points_per_kg: int) -> int:
    """
    Points awarded for a confirmed weight, rounded down.

    Goes through Decimal so that e.g. 2.3kg at 100/kg gives 230, not 229.
    """
    points = Decimal(str(weight_in_kg)) * points_per_kg
    return int(points.to_integral_value(rounding=ROUND_FLOOR))


class CollectionService(ICollectionService):
    """Collection service with Supabase backend."""

    def __init__(self, repository: CollectionRepository, points_per_kg: int = 100):
        self._repository = repository
        self._points_per_kg = points_per_kg

    async def create_collection(
        self,
        user_id: int,
        request: CreateCollectionRequest,
    ) -> Collection:
        """Register a PENDING deposit."""
        collection = self._repository.create_collection(
            user_id=user_id,
            material_type=request.material_type,
            weight_in_kg=request.weight_in_kg,
        )
        logger.info(f"Collection {collection.id} created by user {user_id}")
        return collection

    async def inspect_collection(self, collection_id: int) -> CollectionDetails:
        """Look up a PENDING collection."""
        collection = self._repository.get_collection(collection_id)
        if collection is None:
            raise CollectionNotFoundError(collection_id)
        if collection.status == CollectionStatus.COMPLETED:
            raise CollectionAlreadyCompletedError(collection_id)
        return collection

    async def confirm_collection(
        self,
        collection_id: int,
        market_id: int,
        final_weight: float,
    ) -> int:
        """Confirm a deposit and credit the user."""
        await self.inspect_collection(collection_id)

        points = calculate_points(final_weight, self._points_per_kg)
        outcome = self._repository.confirm_collection(
            collection_id=collection_id,
            market_id=market_id,
            final_weight=final_weight,
            points=points,
        )

        if outcome.status == ConfirmationStatus.NOT_FOUND:
            raise CollectionNotFoundError(collection_id)
        if outcome.status == ConfirmationStatus.ALREADY_COMPLETED:
            # Another confirmation committed between the check and the update
            raise CollectionAlreadyCompletedError(collection_id)

        logger.info(
            f"Collection {collection_id} confirmed by market {market_id}: "
            f"{final_weight}kg, {points} points"
        )
        return points

    async def get_market_stats(
        self,
        market_id: int,
        now: Optional[datetime] = None,
    ) -> MarketStats:
        """Count today's confirmations and sum weight and points."""
        now = now or datetime.now(timezone.utc)
        today = now.astimezone(timezone.utc).date()

        collections = self._repository.list_completed_for_market(market_id)

        daily_count = 0
        for collection in collections:
            confirmed_at = collection.updated_at or collection.created_at
            if confirmed_at.tzinfo is None:
                confirmed_at = confirmed_at.replace(tzinfo=timezone.utc)
            if confirmed_at.astimezone(timezone.utc).date() == today:
                daily_count += 1

        return MarketStats(
            daily_count=daily_count,
            total_weight=sum(c.weight_in_kg for c in collections),
            total_points=sum(c.points_earned for c in collections),
        )
