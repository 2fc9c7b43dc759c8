"""
Base exception classes for the hotel booking backend.

Each module should define its own exceptions that inherit from these bases.
The API layer renders them into the standard response envelope using the
``status_code`` declared on each class.
"""

from typing import Optional, Any


class HotelBookingError(Exception):
    """
    Base exception for all hotel booking errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(HotelBookingError):
    """Resource not found."""

    status_code = 404


class ValidationError(HotelBookingError):
    """Request is well-formed but not acceptable in the current state."""

    status_code = 400


class ConflictError(HotelBookingError):
    """Request conflicts with data that already exists."""

    status_code = 400


class AuthenticationError(HotelBookingError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(HotelBookingError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class InternalError(HotelBookingError):
    """
    Unexpected failure while serving a request.

    Wraps database and hashing failures so they surface as a 500
    instead of escaping the request handler.
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, code=code or "INTERNAL_ERROR")
        self.cause = cause


class ConfigurationError(HotelBookingError):
    """Required server configuration is missing. Raised at startup only."""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message,
            code="CONFIGURATION_ERROR",
            details={"setting": setting} if setting else None,
        )
