"""
Accounts service implementation.

Signup, the market directory and the gamified user profile.
"""

import logging
from typing import Optional

from shared.security import hash_password
from modules.collections.repository import CollectionRepository

from .interfaces import IAccountService
from .repository import AccountRepository
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
from .gamification import activity_from_collection, rank_for_points, xp_needed_for_level

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 5


class AccountService(IAccountService):
    """Account service with Supabase backend."""

    def __init__(
        self,
        repository: AccountRepository,
        collections: Optional[CollectionRepository] = None,
    ):
        self._repository = repository
        self._collections = collections

    async def register_user(self, request: CreateUserRequest) -> User:
        """Create a user account."""
        email = request.email.lower()
        try:
            user = self._repository.create_user(
                name=request.name,
                email=email,
                password_hash=hash_password(request.password),
            )
        except EmailAlreadyRegisteredError:
            logger.info("Signup rejected: email already registered")
            raise

        logger.info(f"User {user.id} registered")
        return user

    async def register_market(self, request: CreateMarketRequest) -> Market:
        """Create a market account."""
        data = request.model_dump(exclude={"password"})
        try:
            market = self._repository.create_market(
                data,
                password_hash=hash_password(request.password),
            )
        except CnpjAlreadyRegisteredError:
            logger.info("Market signup rejected: CNPJ already registered")
            raise

        logger.info(f"Market {market.id} registered")
        return market

    async def list_markets(self) -> list[Market]:
        """List every market."""
        return self._repository.list_markets()

    async def get_profile(self, user_id: int) -> UserProfile:
        """Build the profile of a user."""
        user = self._repository.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        recent = []
        if self._collections is not None:
            recent = self._collections.list_completed_for_user(
                user_id, limit=RECENT_ACTIVITY_LIMIT
            )

        return UserProfile(
            **user.model_dump(),
            xp_needed=xp_needed_for_level(user.level),
            rank=rank_for_points(user.points),
            recent_activity=[activity_from_collection(c) for c in recent],
        )
