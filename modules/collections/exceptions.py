"""
Collections module exceptions.
"""

from shared.exceptions import RecycleMeError, NotFoundError, ValidationError


class CollectionError(RecycleMeError):
    """Base exception for collection-related errors."""

    pass


class CollectionNotFoundError(CollectionError, NotFoundError):
    """Raised when a collection token does not match any deposit."""

    def __init__(self, collection_id: int):
        super().__init__(
            "Invalid collection code",
            code="COLLECTION_NOT_FOUND",
            details={"collection_id": collection_id},
        )


class CollectionAlreadyCompletedError(CollectionError, ValidationError):
    """Raised when a collection was already confirmed."""

    def __init__(self, collection_id: int):
        super().__init__(
            "This collection has already been confirmed",
            code="COLLECTION_ALREADY_COMPLETED",
            details={"collection_id": collection_id},
        )
