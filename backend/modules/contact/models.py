"""
Contact module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import SuccessResponse
from shared.validators import normalize_email, require_min_length


class ContactRequest(BaseModel):
    """A message sent through the contact form."""

    name: str = Field(..., max_length=100)
    email: str
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., max_length=5000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_min_length(v, 2, "Name must be at least 2 characters long")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        return require_min_length(v, 10, "Message must be at least 10 characters long")


class ContactMessage(BaseModel):
    """A stored contact message."""

    id: str
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    created_at: Optional[datetime] = None


class ContactData(BaseModel):
    contact: ContactMessage


ContactResponse = SuccessResponse[ContactData]
