"""
Collections module interface.

The API layer depends on ICollectionService for recycling deposits.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from .models import (
    Collection,
    CollectionDetails,
    CreateCollectionRequest,
    MarketStats,
)


@runtime_checkable
class ICollectionService(Protocol):
    """Interface for recycling deposit operations."""

    async def create_collection(
        self,
        user_id: int,
        request: CreateCollectionRequest,
    ) -> Collection:
        """
        Register a deposit for a user.

        Returns:
            The PENDING collection. Its id is the token shown at the market.
        """
        ...

    async def inspect_collection(self, collection_id: int) -> CollectionDetails:
        """
        Look up a collection before confirming it.

        Raises:
            CollectionNotFoundError: If the token is unknown
            CollectionAlreadyCompletedError: If it was already confirmed
        """
        ...

    async def confirm_collection(
        self,
        collection_id: int,
        market_id: int,
        final_weight: float,
    ) -> int:
        """
        Confirm a deposit and award points to its user.

        Returns:
            Number of points awarded

        Raises:
            CollectionNotFoundError: If the token is unknown
            CollectionAlreadyCompletedError: If it was already confirmed
        """
        ...

    async def get_market_stats(
        self,
        market_id: int,
        now: Optional[datetime] = None,
    ) -> MarketStats:
        """Totals over the market's completed collections."""
        ...
