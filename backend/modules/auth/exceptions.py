"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the
API error handlers into the standard response envelope.
"""

from shared.exceptions import AuthenticationError, ConflictError, NotFoundError


class DuplicateEmailError(ConflictError):
    """
    Raised when registering with an email that already has an account.

    Carries no details so the response never reveals more than the fact
    that the email is taken.
    """

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class InvalidCredentialsError(AuthenticationError):
    """Raised for an unknown email or a wrong password. Both look the same."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(NotFoundError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
