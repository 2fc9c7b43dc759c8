"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with substitute collaborators.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    AuthData,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    User,
    UserCredentials,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Storage contract the auth service needs for users."""

    async def find_by_email(self, email: str) -> Optional[User]: ...

    async def find_credentials_by_email(self, email: str) -> Optional[UserCredentials]: ...

    async def get_by_id(self, user_id: str) -> Optional[User]: ...

    async def create(self, name: str, email: str, password_digest: str) -> User: ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthData:
        """
        Register a new user and issue a token.

        Args:
            request: Validated and normalized registration data

        Returns:
            AuthData with the user's public fields and a bearer token

        Raises:
            DuplicateEmailError: If the email is already registered
            InternalError: If persistence or hashing fails
        """
        ...

    async def login(self, request: LoginRequest) -> AuthData:
        """
        Verify credentials and issue a token.

        Args:
            request: Validated and normalized login data

        Returns:
            AuthData with the user's public fields and a bearer token

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password
            InternalError: If the lookup or verification fails unexpectedly
        """
        ...

    async def get_user(self, user_id: str) -> PublicUser:
        """
        Get a user's public profile by ID.

        Raises:
            UserNotFoundError: If no such user exists
        """
        ...
