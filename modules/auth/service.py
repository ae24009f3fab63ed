"""
Authentication service implementation.

Checks credentials against the accounts table and issues session tokens.
"""

import logging
from functools import lru_cache
from typing import Optional

from shared.config import Settings, get_settings
from shared.models import AccountType, AuthenticatedAccount
from shared.security import hash_password, verify_password
from modules.accounts.models import Market, User
from modules.accounts.repository import AccountRepository

from .interfaces import IAuthService
from .models import MarketLoginResponse, UserLoginResponse
from .exceptions import InvalidCredentialsError
from .tokens import create_access_token

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash() -> str:
    """Hash checked when the identity is unknown, so both failure paths cost one bcrypt check."""
    return hash_password("recycleme-dummy-password")


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users log in with email, markets with CNPJ. Both get the same kind of
    session token, distinguished by its ``type`` claim.
    """

    def __init__(
        self,
        repository: AccountRepository,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._settings = settings or get_settings()

    async def login_user(self, email: str, password: str) -> UserLoginResponse:
        """Check user credentials and issue a session token."""
        user = self._repository.get_user_by_email(email.lower())
        password_hash = user.password_hash if user else _dummy_hash()

        if not verify_password(password, password_hash) or user is None:
            logger.info("User login failed")
            raise InvalidCredentialsError("Invalid email or password")

        issued = create_access_token(
            AuthenticatedAccount(
                id=user.id,
                type=AccountType.USER,
                name=user.name,
                verified=user.is_certified,
            ),
            self._settings,
        )
        logger.info(f"User {user.id} logged in")
        return UserLoginResponse(
            token=issued.token,
            expires_at=issued.expires_at,
            user=User(**user.model_dump()),
        )

    async def login_market(self, cnpj: str, password: str) -> MarketLoginResponse:
        """Check market credentials and issue a session token."""
        market = self._repository.get_market_by_cnpj(cnpj)
        password_hash = market.password_hash if market else _dummy_hash()

        if not verify_password(password, password_hash) or market is None:
            logger.info("Market login failed")
            raise InvalidCredentialsError("Invalid CNPJ or password")

        issued = create_access_token(
            AuthenticatedAccount(
                id=market.id,
                type=AccountType.MARKET,
                name=market.display_name,
                verified=market.is_verified,
            ),
            self._settings,
        )
        logger.info(f"Market {market.id} logged in")
        return MarketLoginResponse(
            token=issued.token,
            expires_at=issued.expires_at,
            market=Market(**market.model_dump()),
        )
