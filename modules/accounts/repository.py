"""
Accounts repository for database access.

Encapsulates all Supabase queries for the users and markets tables.
The password column is only read by the lookups used for login.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.exceptions import StorageError
from shared.repository import BaseRepository, is_unique_violation
from .models import User, StoredUser, Market, StoredMarket
from .exceptions import EmailAlreadyRegisteredError, CnpjAlreadyRegisteredError

# Columns returned to clients (everything except the password hash)
USER_COLUMNS = "id, name, email, points, xp, level, is_certified, created_at"
MARKET_COLUMNS = (
    "id, name, trade_name, cnpj, cep, number, address, "
    "latitude, longitude, is_verified, created_at"
)


class AccountRepository(BaseRepository[User]):
    """
    Repository for user and market accounts.

    Note: This repository does NOT hash passwords. It stores whatever
    hash the service layer hands it.
    """

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a new user with a zero balance.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        data = {
            "name": name,
            "email": email,
            "password": password_hash,
            "points": 0,
            "xp": 0,
            "level": 1,
            "is_certified": False,
        }
        try:
            result = self._run(
                "create_user",
                lambda: self._db.table("users").insert(data).execute(),
            )
        except APIError as e:
            if is_unique_violation(e, "email"):
                raise EmailAlreadyRegisteredError() from e
            raise StorageError("Database error during create_user", operation="create_user") from e
        return self._map_to_user(result.data[0])

    def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID, without the password hash."""
        result = self._run(
            "get_user",
            lambda: self._db.table("users").select(USER_COLUMNS).eq("id", user_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_user_by_email(self, email: str) -> Optional[StoredUser]:
        """Get a user with the password hash, for login."""
        result = self._run(
            "get_user_by_email",
            lambda: self._db.table("users").select("*").eq("email", email).execute(),
        )
        if not result.data:
            return None
        row = result.data[0]
        return StoredUser(**self._map_to_user(row).model_dump(), password_hash=row["password"])

    # -------------------------------------------------------------------------
    # Markets
    # -------------------------------------------------------------------------

    def create_market(self, data: dict[str, Any], password_hash: str) -> Market:
        """
        Insert a new, unverified market.

        Args:
            data: Market columns (name, trade_name, cnpj, address, ...)
            password_hash: bcrypt hash of the market password

        Raises:
            CnpjAlreadyRegisteredError: If the CNPJ is taken
        """
        row = {**data, "password": password_hash, "is_verified": False}
        try:
            result = self._run(
                "create_market",
                lambda: self._db.table("markets").insert(row).execute(),
            )
        except APIError as e:
            if is_unique_violation(e, "cnpj"):
                raise CnpjAlreadyRegisteredError() from e
            raise StorageError("Database error during create_market", operation="create_market") from e
        return self._map_to_market(result.data[0])

    def get_market_by_cnpj(self, cnpj: str) -> Optional[StoredMarket]:
        """Get a market with the password hash, for login."""
        result = self._run(
            "get_market_by_cnpj",
            lambda: self._db.table("markets").select("*").eq("cnpj", cnpj).execute(),
        )
        if not result.data:
            return None
        row = result.data[0]
        return StoredMarket(**self._map_to_market(row).model_dump(), password_hash=row["password"])

    def list_markets(self) -> list[Market]:
        """List every market, without password hashes."""
        result = self._run(
            "list_markets",
            lambda: self._db.table("markets").select(MARKET_COLUMNS).order("id").execute(),
        )
        return [self._map_to_market(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            points=data.get("points") or 0,
            xp=data.get("xp") or 0,
            level=data.get("level") or 1,
            is_certified=bool(data.get("is_certified", False)),
            created_at=data.get("created_at"),
        )

    def _map_to_market(self, data: dict[str, Any]) -> Market:
        """Map database row to Market model."""
        return Market(
            id=data["id"],
            name=data["name"],
            trade_name=data.get("trade_name"),
            cnpj=data["cnpj"],
            cep=data.get("cep"),
            number=data.get("number"),
            address=data.get("address"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            is_verified=bool(data.get("is_verified", False)),
            created_at=data.get("created_at"),
        )
