"""
Database client factory for Supabase.

The backend always talks to Postgres with the service role: every
ownership and account-type check happens in the service layer.
"""

import logging
from typing import Optional
from supabase import create_client, Client, SupabaseException

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The client is created on first use and cached for the lifetime
    of the process.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If SUPABASE_URL or the service role key is not set,
            or the client rejects them (e.g. a malformed URL)
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set RECYCLEME_SUPABASE_URL and RECYCLEME_SUPABASE_SERVICE_ROLE_KEY "
                "environment variables."
            )
        try:
            _service_client = create_client(
                settings.supabase_url,
                settings.supabase_service_role_key,
            )
        except SupabaseException as e:
            raise RuntimeError(f"Supabase configuration invalid: {e}") from e
        logger.info("Supabase client created")

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
