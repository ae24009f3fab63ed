"""
Account endpoints.

Signup for users and markets, the public market directory and the
user's own profile.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_account_service
from api.middleware.auth import require_user
from shared.models import AuthenticatedAccount

from .interfaces import IAccountService
from .models import (
    CreateMarketRequest,
    CreateUserRequest,
    Market,
    User,
    UserProfile,
)
from .exceptions import (
    CnpjAlreadyRegisteredError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
)

router = APIRouter()


@router.post("/users", response_model=User, status_code=201)
async def register_user(
    request: CreateUserRequest,
    service: IAccountService = Depends(get_account_service),
) -> User:
    """
    Register a user.

    New users start with zero points, zero XP and level 1.
    """
    try:
        return await service.register_user(request)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/markets", response_model=Market, status_code=201)
async def register_market(
    request: CreateMarketRequest,
    service: IAccountService = Depends(get_account_service),
) -> Market:
    """
    Register a partner market.

    Markets start unverified and cannot confirm deposits until reviewed.
    """
    try:
        return await service.register_market(request)
    except CnpjAlreadyRegisteredError as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.get("/markets", response_model=list[Market])
async def list_markets(
    service: IAccountService = Depends(get_account_service),
) -> list[Market]:
    """List every partner market."""
    return await service.list_markets()


@router.get("/profile/me", response_model=UserProfile)
async def get_my_profile(
    account: AuthenticatedAccount = Depends(require_user),
    service: IAccountService = Depends(get_account_service),
) -> UserProfile:
    """
    Get the current user's profile.

    Includes rank, XP target for the next level and the latest
    confirmed deposits.
    """
    try:
        return await service.get_profile(account.id)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
