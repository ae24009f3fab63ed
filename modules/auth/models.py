"""
Authentication module data models.

These models define the login payloads and the session token claims.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AccountType, CamelModel, RequestModel
from modules.accounts.models import Market, User, normalize_cnpj


class TokenPayload(BaseModel):
    """
    Decoded session token claims.

    Issued by AuthService on login and read back by the bearer
    dependency on every protected request.
    """

    sub: str = Field(..., description="Subject (account ID)")
    type: AccountType = Field(..., description="Account type")
    name: str = Field(default="", description="Display name")
    verified: bool = Field(default=False, description="Verification flag")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class UserLoginRequest(RequestModel):
    """Login with email and password."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class MarketLoginRequest(RequestModel):
    """Login with CNPJ and password."""

    cnpj: str
    password: str = Field(..., min_length=1)

    @field_validator("cnpj")
    @classmethod
    def validate_cnpj(cls, value: str) -> str:
        return normalize_cnpj(value)


class IssuedToken(BaseModel):
    """A freshly signed session token."""

    token: str
    expires_at: datetime


class UserLoginResponse(CamelModel):
    """Successful user login."""

    message: str = "User login successful"
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: User


class MarketLoginResponse(CamelModel):
    """Successful market login."""

    message: str = "Market login successful"
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    market: Market

