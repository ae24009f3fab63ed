"""
Collections repository for database access.

Encapsulates all Supabase queries for the collections table and the
confirm_collection transaction (see migrations/002_transactions.sql).
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import (
    Collection,
    CollectionDetails,
    CollectionOwner,
    CollectionStatus,
    ConfirmationOutcome,
    ConfirmationStatus,
)


class CollectionRepository(BaseRepository[Collection]):
    """
    Repository for recycling deposits.

    Note: This repository does NOT perform authorization checks.
    The service layer and route dependencies decide who may call what.
    """

    def create_collection(
        self,
        user_id: int,
        material_type: str,
        weight_in_kg: float,
    ) -> Collection:
        """
        Create a PENDING collection for a user.

        Returns:
            Created Collection with generated ID and timestamps.
        """
        data = {
            "user_id": user_id,
            "material_type": material_type,
            "weight_in_kg": weight_in_kg,
            "status": CollectionStatus.PENDING.value,
        }
        result = self._run(
            "create_collection",
            lambda: self._db.table("collections").insert(data).execute(),
        )
        return self._map_to_collection(result.data[0])

    def get_collection(self, collection_id: int) -> Optional[CollectionDetails]:
        """
        Get a collection with the owning user's name and email.

        Returns:
            CollectionDetails, or None if not found.
        """
        result = self._run(
            "get_collection",
            lambda: self._db.table("collections")
            .select("*, users(name, email)")
            .eq("id", collection_id)
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_details(result.data[0])

    def list_completed_for_market(self, market_id: int) -> list[Collection]:
        """List every collection a market has confirmed."""
        result = self._run(
            "list_completed_for_market",
            lambda: self._db.table("collections")
            .select("*")
            .eq("market_id", market_id)
            .eq("status", CollectionStatus.COMPLETED.value)
            .execute(),
        )
        return [self._map_to_collection(row) for row in result.data]

    def list_completed_for_user(self, user_id: int, limit: int = 5) -> list[Collection]:
        """List a user's most recent confirmed collections, newest first."""
        result = self._run(
            "list_completed_for_user",
            lambda: self._db.table("collections")
            .select("*")
            .eq("user_id", user_id)
            .eq("status", CollectionStatus.COMPLETED.value)
            .order("created_at", desc=True)
            .limit(limit)
            .execute(),
        )
        return [self._map_to_collection(row) for row in result.data]

    def confirm_collection(
        self,
        collection_id: int,
        market_id: int,
        final_weight: float,
        points: int,
    ) -> ConfirmationOutcome:
        """
        Complete a collection and credit the user in one transaction.

        The SQL function only touches rows still PENDING, so two markets
        racing on the same token cannot both award points.

        Returns:
            ConfirmationOutcome with the outcome kind and, on success,
            the updated collection.
        """
        params = {
            "p_collection_id": collection_id,
            "p_market_id": market_id,
            "p_final_weight": final_weight,
            "p_points": points,
        }
        result = self._run(
            "confirm_collection",
            lambda: self._db.rpc("confirm_collection", params).execute(),
        )
        payload: dict[str, Any] = result.data or {}
        collection_data = payload.get("collection")

        return ConfirmationOutcome(
            status=ConfirmationStatus(payload.get("status", ConfirmationStatus.NOT_FOUND.value)),
            collection=self._map_to_collection(collection_data) if collection_data else None,
        )

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_collection(self, data: dict[str, Any]) -> Collection:
        """Map database row to Collection model."""
        return Collection(
            id=data["id"],
            user_id=data["user_id"],
            market_id=data.get("market_id"),
            material_type=data["material_type"],
            weight_in_kg=float(data.get("weight_in_kg") or 0),
            points_earned=data.get("points_earned") or 0,
            status=CollectionStatus(data.get("status", CollectionStatus.PENDING.value)),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )

    def _map_to_details(self, data: dict[str, Any]) -> CollectionDetails:
        """Map database row with embedded user to CollectionDetails."""
        collection = self._map_to_collection(data)
        user_data = data.get("users")
        owner = CollectionOwner(name=user_data["name"], email=user_data["email"]) if user_data else None
        return CollectionDetails(**collection.model_dump(), user=owner)
