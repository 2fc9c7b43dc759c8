"""
Shared infrastructure for the hotel booking backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory and indexes
- exceptions: Base exception classes
- models: Response envelopes and the authenticated user

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, configure_logging
from .database import create_mongo_client, get_database, ensure_indexes, ping
from .exceptions import (
    HotelBookingError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ConfigurationError,
)
from .models import (
    AuthenticatedUser,
    FieldError,
    SuccessResponse,
    ValidationErrorResponse,
    ErrorResponse,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "create_mongo_client",
    "get_database",
    "ensure_indexes",
    "ping",
    "HotelBookingError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "ConfigurationError",
    "AuthenticatedUser",
    "FieldError",
    "SuccessResponse",
    "ValidationErrorResponse",
    "ErrorResponse",
]
