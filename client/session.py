"""
Client-side authentication state.

A ClientSession holds the bearer token of whoever is logged in. It is
passed explicitly to RecycleMeClient; there is no process-wide session.
"""

from typing import Optional

from shared.models import AccountType


class ClientSession:
    """Token holder for one logged-in account."""

    def __init__(self, token: Optional[str] = None, account_type: Optional[AccountType] = None):
        self._token = token
        self._account_type = account_type

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def account_type(self) -> Optional[AccountType]:
        return self._account_type

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def login(self, token: str, account_type: Optional[AccountType] = None) -> None:
        """Store a freshly issued token."""
        if not token:
            raise ValueError("token must not be empty")
        self._token = token
        self._account_type = account_type

    def logout(self) -> None:
        """Forget the token."""
        self._token = None
        self._account_type = None

    def auth_headers(self) -> dict[str, str]:
        """Authorization header for the current token, or nothing."""
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
