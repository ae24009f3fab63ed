"""
Marketplace repository for database access.

Encapsulates all Supabase queries for offers and redemptions, plus the
redeem_offer transaction (see migrations/002_transactions.sql).
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import (
    CreateOfferRequest,
    MarketSummary,
    Offer,
    OfferWithMarket,
    Redemption,
    RedemptionOutcome,
    RedemptionStatus,
)


class OfferRepository(BaseRepository[Offer]):
    """
    Repository for offers and redemptions.

    Note: This repository does NOT perform authorization checks.
    The service layer and route dependencies decide who may call what.
    """

    def create_offer(self, market_id: int, request: CreateOfferRequest) -> Offer:
        """
        Publish an active offer for a market.

        Returns:
            Created Offer with generated ID and timestamps.
        """
        data = {
            "market_id": market_id,
            "title": request.title,
            "description": request.description,
            "cost": request.cost,
            "image": request.image,
            "active": True,
            "valid_from": request.valid_from.isoformat() if request.valid_from else None,
            "valid_until": request.valid_until.isoformat() if request.valid_until else None,
        }
        result = self._run(
            "create_offer",
            lambda: self._db.table("offers").insert(data).execute(),
        )
        return self._map_to_offer(result.data[0])

    def get_offer(self, offer_id: int) -> Optional[Offer]:
        """
        Get an offer by ID.

        Returns:
            Offer, or None if not found.
        """
        result = self._run(
            "get_offer",
            lambda: self._db.table("offers").select("*").eq("id", offer_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_offer(result.data[0])

    def list_active_offers(self) -> list[OfferWithMarket]:
        """List active offers of every market, newest first."""
        result = self._run(
            "list_active_offers",
            lambda: self._db.table("offers")
            .select("*, markets(name, trade_name)")
            .eq("active", True)
            .order("created_at", desc=True)
            .execute(),
        )
        return [self._map_to_offer_with_market(row) for row in result.data]

    def list_market_offers(self, market_id: int) -> list[Offer]:
        """List all offers of one market, active or not, newest first."""
        result = self._run(
            "list_market_offers",
            lambda: self._db.table("offers")
            .select("*")
            .eq("market_id", market_id)
            .order("created_at", desc=True)
            .execute(),
        )
        return [self._map_to_offer(row) for row in result.data]

    def redeem_offer(self, user_id: int, offer_id: int, coupon_code: str) -> RedemptionOutcome:
        """
        Debit the user and record the redemption in one transaction.

        The SQL function decrements the balance only if it still covers the
        offer's cost, so concurrent redemptions can never overdraw it.

        Returns:
            RedemptionOutcome with the outcome kind and, on success,
            the stored redemption.
        """
        params = {
            "p_user_id": user_id,
            "p_offer_id": offer_id,
            "p_coupon_code": coupon_code,
        }
        result = self._run(
            "redeem_offer",
            lambda: self._db.rpc("redeem_offer", params).execute(),
        )
        payload: dict[str, Any] = result.data or {}
        redemption_data = payload.get("redemption")

        return RedemptionOutcome(
            status=RedemptionStatus(payload.get("status", RedemptionStatus.OFFER_UNAVAILABLE.value)),
            redemption=self._map_to_redemption(redemption_data) if redemption_data else None,
        )

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_offer(self, data: dict[str, Any]) -> Offer:
        """Map database row to Offer model."""
        return Offer(
            id=data["id"],
            title=data["title"],
            description=data.get("description") or "",
            cost=data["cost"],
            image=data.get("image") or "fa-gift",
            active=data.get("active", True),
            valid_from=data.get("valid_from"),
            valid_until=data.get("valid_until"),
            market_id=data["market_id"],
            created_at=data["created_at"],
        )

    def _map_to_offer_with_market(self, data: dict[str, Any]) -> OfferWithMarket:
        """Map database row with embedded market to OfferWithMarket."""
        offer = self._map_to_offer(data)
        market_data = data.get("markets")
        market = (
            MarketSummary(name=market_data["name"], trade_name=market_data.get("trade_name"))
            if market_data
            else None
        )
        return OfferWithMarket(**offer.model_dump(), market=market)

    def _map_to_redemption(self, data: dict[str, Any]) -> Redemption:
        """Map database row to Redemption model."""
        return Redemption(
            id=data["id"],
            user_id=data["user_id"],
            offer_id=data["offer_id"],
            cost_at_time=data["cost_at_time"],
            coupon_code=data["coupon_code"],
            created_at=data["created_at"],
        )
