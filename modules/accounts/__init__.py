"""
Accounts module.

Signup for users and partner markets, the market directory and the
gamified user profile.

Public API:
- IAccountService: Interface for account operations
- User, Market, UserProfile: Account models
- Account exceptions: EmailAlreadyRegisteredError, etc.
"""

from .interfaces import IAccountService
from .models import (
    ActivityItem,
    CreateMarketRequest,
    CreateUserRequest,
    Market,
    Rank,
    User,
    UserProfile,
)
from .exceptions import (
    AccountsError,
    CnpjAlreadyRegisteredError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAccountService",
    # Models
    "ActivityItem",
    "CreateMarketRequest",
    "CreateUserRequest",
    "Market",
    "Rank",
    "User",
    "UserProfile",
    # Exceptions
    "AccountsError",
    "CnpjAlreadyRegisteredError",
    "EmailAlreadyRegisteredError",
    "UserNotFoundError",
]
