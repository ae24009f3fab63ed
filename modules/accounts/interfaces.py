"""
Accounts module interface.

Covers signup for both account types, the public market directory and
the user profile.
"""

from typing import Protocol, runtime_checkable

from .models import (
    CreateMarketRequest,
    CreateUserRequest,
    Market,
    User,
    UserProfile,
)


@runtime_checkable
class IAccountService(Protocol):
    """Interface for account operations."""

    async def register_user(self, request: CreateUserRequest) -> User:
        """
        Create a user with a hashed password and a zero balance.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def register_market(self, request: CreateMarketRequest) -> Market:
        """
        Create an unverified market with a hashed password.

        Raises:
            CnpjAlreadyRegisteredError: If the CNPJ is taken
        """
        ...

    async def list_markets(self) -> list[Market]:
        """List every partner market (for the map)."""
        ...

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Get a user's profile with rank, XP target and recent activity.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...
