"""
Recycling deposit endpoints.

Users register deposits; markets look them up by token, weigh the
material and confirm, which awards the points.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_collection_service
from api.middleware.auth import require_market, require_user, require_verified_market
from shared.models import AuthenticatedAccount

from .interfaces import ICollectionService
from .models import (
    CollectionDetails,
    ConfirmCollectionRequest,
    ConfirmCollectionResponse,
    CreateCollectionRequest,
    CreateCollectionResponse,
    MarketStats,
)
from .exceptions import CollectionAlreadyCompletedError, CollectionNotFoundError

router = APIRouter()


@router.post("/create", response_model=CreateCollectionResponse, status_code=201)
async def create_collection(
    request: CreateCollectionRequest,
    account: AuthenticatedAccount = Depends(require_user),
    service: ICollectionService = Depends(get_collection_service),
) -> CreateCollectionResponse:
    """
    Register a deposit.

    The returned token is shown to the market at drop-off.
    """
    collection = await service.create_collection(account.id, request)
    return CreateCollectionResponse(token=collection.id, details=collection)


# Declared before /{collection_id} so "market" is not parsed as an id
@router.get("/market/stats", response_model=MarketStats)
async def get_market_stats(
    account: AuthenticatedAccount = Depends(require_market),
    service: ICollectionService = Depends(get_collection_service),
) -> MarketStats:
    """Today's confirmations and all-time totals for the calling market."""
    return await service.get_market_stats(account.id)


@router.get("/{collection_id}", response_model=CollectionDetails)
async def get_collection(
    collection_id: int,
    account: AuthenticatedAccount = Depends(require_verified_market),
    service: ICollectionService = Depends(get_collection_service),
) -> CollectionDetails:
    """
    Look up a pending deposit by token.
    """
    try:
        return await service.inspect_collection(collection_id)
    except CollectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CollectionAlreadyCompletedError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.patch("/{collection_id}/confirm", response_model=ConfirmCollectionResponse)
async def confirm_collection(
    collection_id: int,
    request: ConfirmCollectionRequest,
    account: AuthenticatedAccount = Depends(require_verified_market),
    service: ICollectionService = Depends(get_collection_service),
) -> ConfirmCollectionResponse:
    """
    Confirm a deposit with the measured weight and credit the user.
    """
    try:
        points = await service.confirm_collection(
            collection_id=collection_id,
            market_id=account.id,
            final_weight=request.final_weight,
        )
    except CollectionNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CollectionAlreadyCompletedError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return ConfirmCollectionResponse(points_generated=points)
