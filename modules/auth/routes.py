"""
Login endpoints.

Users log in with email, markets with CNPJ. Both return a bearer token.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_auth_service
from shared.exceptions import AuthenticationError

from .interfaces import IAuthService
from .models import (
    MarketLoginRequest,
    MarketLoginResponse,
    UserLoginRequest,
    UserLoginResponse,
)

router = APIRouter()


@router.post("/user", response_model=UserLoginResponse)
async def login_user(
    request: UserLoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> UserLoginResponse:
    """
    Log in a user.

    Unknown email and wrong password return the same 401.
    """
    try:
        return await service.login_user(request.email, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=e.message)


@router.post("/market", response_model=MarketLoginResponse)
async def login_market(
    request: MarketLoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> MarketLoginResponse:
    """
    Log in a partner market.

    The CNPJ may be sent with or without punctuation.
    """
    try:
        return await service.login_market(request.cnpj, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=e.message)
