"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login fails.

    Unknown identity and wrong password share this error on purpose:
    callers must not learn which accounts exist.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no Authorization header is provided."""

    def __init__(self, message: str = "Token not provided"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(AuthenticationError):
    """Raised when the Authorization header is not two parts or not Bearer."""

    def __init__(self, message: str = "Token header is malformed"):
        super().__init__(message, code="MALFORMED_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token signature or its claims are invalid."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when no signing secret is configured on the server."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")

