"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for API payloads.

    Python attributes are snake_case; the JSON wire format is camelCase
    (e.g. ``trade_name`` <-> ``tradeName``). Both spellings are accepted
    on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RequestModel(CamelModel):
    """Base model for request bodies. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class AccountType(str, Enum):
    """Kind of account behind a session token."""

    USER = "user"
    MARKET = "market"


class AuthenticatedAccount(BaseModel):
    """
    Represents an authenticated account in the system.

    This model is populated from the session token claims and made
    available to route handlers via dependency injection.
    """

    id: int = Field(..., description="Account ID (users.id or markets.id)")
    type: AccountType = Field(..., description="Whether the account is a user or a market")
    name: str = Field(default="", description="Display name")
    verified: bool = Field(
        default=False,
        description="Market: verified partner. User: completed certification.",
    )

    model_config = {"frozen": True}

    @property
    def is_user(self) -> bool:
        return self.type == AccountType.USER

    @property
    def is_market(self) -> bool:
        return self.type == AccountType.MARKET
