"""
Collections module.

Recycling deposits: registered by users, confirmed by verified markets,
converted into points.

Public API:
- ICollectionService: Interface for deposit operations
- Collection, MarketStats: Deposit models
- Collection exceptions: CollectionNotFoundError, etc.
"""

from .interfaces import ICollectionService
from .models import (
    Collection,
    CollectionDetails,
    CollectionStatus,
    CreateCollectionRequest,
    MarketStats,
)
from .exceptions import (
    CollectionAlreadyCompletedError,
    CollectionError,
    CollectionNotFoundError,
)

__all__ = [
    # Interface
    "ICollectionService",
    # Models
    "Collection",
    "CollectionDetails",
    "CollectionStatus",
    "CreateCollectionRequest",
    "MarketStats",
    # Exceptions
    "CollectionAlreadyCompletedError",
    "CollectionError",
    "CollectionNotFoundError",
]
