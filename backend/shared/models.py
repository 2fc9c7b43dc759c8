"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from a verified bearer token and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (MongoDB ObjectId as string)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class FieldError(BaseModel):
    """One failed request field."""

    field: str
    message: str


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success envelope."""

    success: bool = True
    message: str
    data: Optional[T] = None


class ValidationErrorResponse(BaseModel):
    """Validation failure envelope (HTTP 400)."""

    success: bool = False
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    """
    Domain or unexpected failure envelope.

    ``error`` is only populated for 500 responses.
    """

    success: bool = False
    message: str
    error: Optional[Any] = None
