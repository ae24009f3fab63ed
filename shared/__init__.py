"""
Shared infrastructure for RecycleMe backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with error translation
- security: Password hashing

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    RecycleMeError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    StorageError,
)
from .models import AccountType, AuthenticatedAccount, CamelModel, RequestModel

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "RecycleMeError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "StorageError",
    "AccountType",
    "AuthenticatedAccount",
    "CamelModel",
    "RequestModel",
]
