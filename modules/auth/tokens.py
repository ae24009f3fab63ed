"""
Session token signing and verification.

Tokens are HS256 JWTs signed with settings.jwt_secret. They carry the
account id, account type, display name and verification flag, so the
bearer dependency never needs a database round-trip.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedAccount

from .models import IssuedToken, TokenPayload
from .exceptions import AuthNotConfiguredError, ExpiredTokenError, InvalidTokenError


def create_access_token(
    account: AuthenticatedAccount,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> IssuedToken:
    """
    Sign a session token for an account.

    Args:
        account: The account the token identifies
        settings: Settings to read the secret and lifetime from
        now: Issue time (defaults to the current UTC time)

    Raises:
        AuthNotConfiguredError: If no JWT secret is configured
    """
    settings = settings or get_settings()
    if not settings.jwt_secret:
        raise AuthNotConfiguredError()

    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": str(account.id),
        "type": account.type.value,
        "name": account.name,
        "verified": account.verified,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return IssuedToken(token=token, expires_at=expires_at)


def decode_access_token(
    token: str,
    settings: Optional[Settings] = None,
) -> AuthenticatedAccount:
    """
    Verify a session token and return the account it identifies.

    Raises:
        AuthNotConfiguredError: If no JWT secret is configured
        ExpiredTokenError: If the token has expired
        InvalidTokenError: If the signature or claims are invalid
    """
    settings = settings or get_settings()
    if not settings.jwt_secret:
        raise AuthNotConfiguredError()

    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        payload = TokenPayload(**claims)
        account_id = int(payload.sub)
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError:
        raise InvalidTokenError()
    except (PydanticValidationError, ValueError):
        raise InvalidTokenError("Invalid token claims")

    return AuthenticatedAccount(
        id=account_id,
        type=payload.type,
        name=payload.name,
        verified=payload.verified,
    )
