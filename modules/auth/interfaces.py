"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import MarketLoginResponse, UserLoginResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def login_user(self, email: str, password: str) -> UserLoginResponse:
        """
        Check user credentials and issue a session token.

        Returns:
            UserLoginResponse with the token and the user (no password)

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def login_market(self, cnpj: str, password: str) -> MarketLoginResponse:
        """
        Check market credentials and issue a session token.

        Returns:
            MarketLoginResponse with the token and the market (no password)

        Raises:
            InvalidCredentialsError: If the CNPJ is unknown or the password is wrong
        """
        ...
