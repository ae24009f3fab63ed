"""
Password hashing helpers.

Passwords are hashed with bcrypt (salted, slow). Only the hash is ever
stored; it never leaves the repository layer.
"""

from typing import Optional

import bcrypt

from .config import get_settings


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with a random salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor. Defaults to settings.bcrypt_rounds.

    Returns:
        The bcrypt hash as a UTF-8 string
    """
    cost = rounds or get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=cost)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
