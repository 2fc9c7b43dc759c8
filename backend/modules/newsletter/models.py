"""
Newsletter module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from shared.models import SuccessResponse
from shared.validators import normalize_email


class SubscriptionRequest(BaseModel):
    """Subscribe or unsubscribe request body."""

    email: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class Subscriber(BaseModel):
    id: str
    email: str
    subscribed_at: Optional[datetime] = None


class SubscriberData(BaseModel):
    subscriber: Subscriber


SubscriberResponse = SuccessResponse[SubscriberData]
