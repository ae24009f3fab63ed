"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Routes only ever see the interfaces, so tests can swap any service
through app.dependency_overrides.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.accounts.interfaces import IAccountService
    from modules.accounts.repository import AccountRepository
    from modules.marketplace.interfaces import IMarketplaceService
    from modules.marketplace.repository import OfferRepository
    from modules.collections.interfaces import ICollectionService
    from modules.collections.repository import CollectionRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._account_service: "IAccountService | None" = None
        self._marketplace_service: "IMarketplaceService | None" = None
        self._collection_service: "ICollectionService | None" = None
        self._account_repository: "AccountRepository | None" = None
        self._offer_repository: "OfferRepository | None" = None
        self._collection_repository: "CollectionRepository | None" = None

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        from shared.database import get_supabase_client
        return get_supabase_client()

    @property
    def account_repository(self) -> "AccountRepository":
        """Get the account repository instance."""
        if self._account_repository is None:
            from modules.accounts.repository import AccountRepository
            self._account_repository = AccountRepository(self.db)
        return self._account_repository

    @property
    def offer_repository(self) -> "OfferRepository":
        """Get the offer repository instance."""
        if self._offer_repository is None:
            from modules.marketplace.repository import OfferRepository
            self._offer_repository = OfferRepository(self.db)
        return self._offer_repository

    @property
    def collection_repository(self) -> "CollectionRepository":
        """Get the collection repository instance."""
        if self._collection_repository is None:
            from modules.collections.repository import CollectionRepository
            self._collection_repository = CollectionRepository(self.db)
        return self._collection_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(repository=self.account_repository)
        return self._auth_service

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(
                repository=self.account_repository,
                collections=self.collection_repository,
            )
        return self._account_service

    @property
    def marketplace(self) -> "IMarketplaceService":
        """Get the marketplace service instance."""
        if self._marketplace_service is None:
            from modules.marketplace.service import MarketplaceService
            from shared.config import get_settings
            self._marketplace_service = MarketplaceService(
                repository=self.offer_repository,
                accounts=self.account_repository,
                coupon_max_attempts=get_settings().coupon_max_attempts,
            )
        return self._marketplace_service

    @property
    def collections(self) -> "ICollectionService":
        """Get the collection service instance."""
        if self._collection_service is None:
            from modules.collections.service import CollectionService
            from shared.config import get_settings
            self._collection_service = CollectionService(
                repository=self.collection_repository,
                points_per_kg=get_settings().points_per_kg,
            )
        return self._collection_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._account_service = None
        self._marketplace_service = None
        self._collection_service = None
        self._account_repository = None
        self._offer_repository = None
        self._collection_repository = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_marketplace_service() -> "IMarketplaceService":
    """FastAPI dependency for marketplace service."""
    return get_container().marketplace


def get_collection_service() -> "ICollectionService":
    """FastAPI dependency for collection service."""
    return get_container().collections
