"""
Accounts module exceptions.
"""

from shared.exceptions import RecycleMeError, ConflictError, NotFoundError


class AccountsError(RecycleMeError):
    """Base exception for account-related errors."""

    pass


class EmailAlreadyRegisteredError(AccountsError, ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self):
        super().__init__(
            "This email is already registered",
            code="EMAIL_ALREADY_REGISTERED",
        )


class CnpjAlreadyRegisteredError(AccountsError, ConflictError):
    """Raised when signing up a market whose CNPJ already has an account."""

    def __init__(self):
        super().__init__(
            "This CNPJ is already registered",
            code="CNPJ_ALREADY_REGISTERED",
        )


class UserNotFoundError(AccountsError, NotFoundError):
    """Raised when a user id from a valid token no longer exists."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
