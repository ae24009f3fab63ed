"""
Marketplace API endpoints.

Markets publish offers; users spend points on them.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_marketplace_service
from api.middleware.auth import require_market, require_user
from shared.exceptions import ValidationError
from shared.models import AuthenticatedAccount
from modules.accounts.exceptions import UserNotFoundError

from .interfaces import IMarketplaceService
from .models import (
    CreateOfferRequest,
    Offer,
    OfferWithMarket,
    RedeemRequest,
    RedemptionReceipt,
)

router = APIRouter()


@router.post("/offers", response_model=Offer, status_code=201)
async def create_offer(
    request: CreateOfferRequest,
    account: AuthenticatedAccount = Depends(require_market),
    service: IMarketplaceService = Depends(get_marketplace_service),
) -> Offer:
    """Publish an offer for the calling market."""
    return await service.create_offer(account.id, request)


@router.get("/offers", response_model=list[OfferWithMarket])
async def list_offers(
    service: IMarketplaceService = Depends(get_marketplace_service),
) -> list[OfferWithMarket]:
    """
    List active offers from every market.

    Each offer carries its market's name, most recent first.
    """
    return await service.list_active_offers()


@router.get("/my-offers", response_model=list[Offer])
async def list_my_offers(
    account: AuthenticatedAccount = Depends(require_market),
    service: IMarketplaceService = Depends(get_marketplace_service),
) -> list[Offer]:
    """List the calling market's offers, including inactive ones."""
    return await service.list_market_offers(account.id)


@router.post("/redeem", response_model=RedemptionReceipt)
async def redeem_offer(
    request: RedeemRequest,
    account: AuthenticatedAccount = Depends(require_user),
    service: IMarketplaceService = Depends(get_marketplace_service),
) -> RedemptionReceipt:
    """
    Exchange points for an offer's coupon.

    Fails with 400 when the offer is unavailable, outside its validity
    window, or more expensive than the current balance.
    """
    try:
        redemption = await service.redeem_offer(account.id, request.offer_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    return RedemptionReceipt(coupon=redemption)
