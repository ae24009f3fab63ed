"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of PostgREST errors into
the shared exception hierarchy.
"""

import logging
from typing import TypeVar, Generic, Any, Callable, Optional

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError, column: Optional[str] = None) -> bool:
    """
    Check whether a PostgREST error is a unique constraint violation.

    Args:
        error: The APIError raised by the client.
        column: Optional column name that must appear in the error text.
    """
    if error.code != UNIQUE_VIOLATION:
        return False
    if column is None:
        return True
    text = " ".join(str(part) for part in (error.message, error.details) if part)
    return column in text


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - _run() to execute a query and wrap unexpected failures

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class OfferRepository(BaseRepository[Offer]):
            def get_offer(self, offer_id: int) -> Optional[Offer]:
                result = self._run(
                    "get_offer",
                    lambda: self._db.table("offers").select("*").eq("id", offer_id).execute(),
                )
                if not result.data:
                    return None
                return self._map_to_offer(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _run(self, operation: str, query: Callable[[], Any]) -> Any:
        """
        Execute a query, turning driver errors into StorageError.

        Unique violations are re-raised untouched so callers can map
        them to a conflict.
        """
        try:
            return query()
        except APIError as e:
            if is_unique_violation(e):
                raise
            logger.error(f"Database error during {operation}: {e.code} {e.message}")
            raise StorageError(
                f"Database error during {operation}",
                operation=operation,
                details={"db_code": e.code},
            ) from e
