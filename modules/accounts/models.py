"""
Accounts module data models.

Users earn and spend points; markets are partner locations that accept
deposits and publish offers. Stored* variants carry the password hash,
which is excluded from every serialization.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, Optional
from pydantic import AfterValidator, EmailStr, Field, field_validator

from shared.models import CamelModel, RequestModel

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def normalize_cnpj(value: str) -> str:
    """
    Strip CNPJ punctuation ("12.345.678/0001-90" -> "12345678000190").

    Raises:
        ValueError: If the result is not 14 digits
    """
    digits = re.sub(r"[.\-/\s]", "", value)
    if not re.fullmatch(r"\d{14}", digits):
        raise ValueError("CNPJ must have 14 digits")
    return digits


def _check_password(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[str, Field(min_length=1), AfterValidator(_check_password)]


class Rank(str, Enum):
    """Profile rank derived from the point balance."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    DIAMOND = "Diamond"
    MYTHIC = "Mythic"


class User(CamelModel):
    """A registered end user (password never included)."""

    id: int
    name: str
    email: str
    points: int = 0
    xp: int = 0
    level: int = 1
    is_certified: bool = False
    created_at: Optional[datetime] = None


class StoredUser(User):
    """User row including the password hash. Never returned to clients."""

    password_hash: str = Field(..., exclude=True, repr=False)


class Market(CamelModel):
    """A partner market (password never included)."""

    id: int
    name: str
    trade_name: Optional[str] = None
    cnpj: str
    cep: Optional[str] = None
    number: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_verified: bool = False
    created_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return self.trade_name or self.name


class StoredMarket(Market):
    """Market row including the password hash. Never returned to clients."""

    password_hash: str = Field(..., exclude=True, repr=False)


class CreateUserRequest(RequestModel):
    """User signup."""

    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: Password


class CreateMarketRequest(RequestModel):
    """Market signup."""

    name: str = Field(..., min_length=1, max_length=120)
    trade_name: Optional[str] = Field(None, max_length=120)
    cnpj: str
    password: Password
    cep: Optional[str] = Field(None, max_length=9)
    number: Optional[str] = Field(None, max_length=20)
    address: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @field_validator("cnpj")
    @classmethod
    def validate_cnpj(cls, value: str) -> str:
        return normalize_cnpj(value)


class ActivityItem(CamelModel):
    """One entry of the profile's recent activity feed."""

    id: int
    type: str = "recycling"
    description: str
    date: datetime


class UserProfile(User):
    """User record enriched with gamification data."""

    xp_needed: int
    rank: Rank
    recent_activity: list[ActivityItem] = Field(default_factory=list)
