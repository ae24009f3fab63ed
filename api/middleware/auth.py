"""
Bearer token authentication dependencies.

Validates session tokens and extracts the calling account. The header is
parsed by hand (rather than with HTTPBearer) so that a missing header, a
malformed header, a wrong scheme, a bad token and an expired token each
get their own 401 message.
"""

import re
from typing import Optional
from fastapi import Depends, Header, HTTPException, status

from shared.models import AccountType, AuthenticatedAccount
from modules.auth.exceptions import MalformedTokenError, MissingTokenError
from modules.auth.tokens import decode_access_token
from shared.exceptions import AuthenticationError

_BEARER = re.compile(r"^Bearer$", re.IGNORECASE)


class AuthError(HTTPException):
    """Authentication error with consistent format."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Authorization error with consistent format."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    Raises:
        MissingTokenError: If the header is absent or empty
        MalformedTokenError: If it is not exactly two parts or not Bearer
    """
    if not authorization:
        raise MissingTokenError()

    parts = authorization.split()
    if len(parts) != 2:
        raise MalformedTokenError()

    scheme, token = parts
    if not _BEARER.match(scheme):
        raise MalformedTokenError("Token scheme must be Bearer")

    return token


async def get_current_account(
    authorization: Optional[str] = Header(default=None),
) -> AuthenticatedAccount:
    """
    Dependency that requires authentication.

    Use this for endpoints open to both users and markets.

    Usage:
        @router.get("/protected")
        async def protected_route(account: AuthenticatedAccount = Depends(get_current_account)):
            return {"account_id": account.id}
    """
    try:
        token = extract_bearer_token(authorization)
        return decode_access_token(token)
    except AuthenticationError as e:
        raise AuthError(e.message)


def _require_type(account: AuthenticatedAccount, required: AccountType, message: str) -> None:
    if account.type != required:
        raise ForbiddenError(message)


async def require_user(
    account: AuthenticatedAccount = Depends(get_current_account),
) -> AuthenticatedAccount:
    """Dependency that only lets user accounts through."""
    _require_type(account, AccountType.USER, "Only users can perform this action")
    return account


async def require_market(
    account: AuthenticatedAccount = Depends(get_current_account),
) -> AuthenticatedAccount:
    """Dependency that only lets market accounts through."""
    _require_type(account, AccountType.MARKET, "Only partner markets can perform this action")
    return account


async def require_verified_market(
    account: AuthenticatedAccount = Depends(require_market),
) -> AuthenticatedAccount:
    """Dependency for markets that finished the verification review."""
    if not account.verified:
        raise ForbiddenError("Your account is still under review")
    return account
