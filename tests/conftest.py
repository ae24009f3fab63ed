"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    account_id: int = 1,
    account_type: str = "user",
    name: str = "Ana Souza",
    verified: bool = False,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token for authentication.

    Args:
        account_id: Account ID to put in the ``sub`` claim
        account_type: "user" or "market"
        name: Display name claim
        verified: Verification flag claim
        expired: If True, creates an expired token
        secret: Signing secret (pass another one to forge a bad signature)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": str(account_id),
        "type": account_type,
        "name": name,
        "verified": verified,
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=2)).timestamp()) if expired else int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Point settings at test values and reset cached singletons around each test."""
    monkeypatch.setenv("RECYCLEME_JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("RECYCLEME_BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("RECYCLEME_SUPABASE_URL", "")
    monkeypatch.setenv("RECYCLEME_SUPABASE_SERVICE_ROLE_KEY", "")
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Headers for user 1."""
    return bearer(create_test_token(account_id=1, account_type="user"))


@pytest.fixture
def market_headers() -> dict[str, str]:
    """Headers for unverified market 10."""
    return bearer(create_test_token(account_id=10, account_type="market", name="Mercado Verde"))


@pytest.fixture
def verified_market_headers() -> dict[str, str]:
    """Headers for verified market 10."""
    return bearer(
        create_test_token(account_id=10, account_type="market", name="Mercado Verde", verified=True)
    )
