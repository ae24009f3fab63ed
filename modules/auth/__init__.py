"""
Authentication module.

Handles logins for users and markets and the session tokens they receive.

Public API:
- IAuthService: Interface for auth operations
- create_access_token / decode_access_token: Session token helpers
- Login request and response models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    IssuedToken,
    MarketLoginRequest,
    MarketLoginResponse,
    TokenPayload,
    UserLoginRequest,
    UserLoginResponse,
)
from .tokens import create_access_token, decode_access_token
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Tokens
    "create_access_token",
    "decode_access_token",
    # Models
    "IssuedToken",
    "MarketLoginRequest",
    "MarketLoginResponse",
    "TokenPayload",
    "UserLoginRequest",
    "UserLoginResponse",
    # Exceptions
    "AuthNotConfiguredError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedTokenError",
    "MissingTokenError",
]
