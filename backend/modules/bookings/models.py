"""
Bookings module data models.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from shared.models import SuccessResponse


class BookingStatus(str, Enum):
    """Booking lifecycle status."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class CreateBookingRequest(BaseModel):
    """Request to book a hotel stay."""

    hotel_id: str = Field(..., min_length=1, description="Hotel to book")
    check_in: date
    check_out: date
    guests: int = Field(default=1, ge=1, le=20)
    rooms: int = Field(default=1, ge=1, le=10)

    @field_validator("check_out")
    @classmethod
    def validate_check_out(cls, v: date, info: ValidationInfo) -> date:
        check_in = info.data.get("check_in")
        if check_in is not None and v <= check_in:
            raise ValueError("Check-out date must be after check-in date")
        return v

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days


class Booking(BaseModel):
    """A stored booking."""

    id: str
    user: str = Field(..., description="ID of the user who made the booking")
    hotel: str = Field(..., description="ID of the booked hotel")
    hotel_name: Optional[str] = None
    check_in: date
    check_out: date
    guests: int
    rooms: int
    total_price: float
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: Optional[datetime] = None


class BookingData(BaseModel):
    booking: Booking


class BookingListData(BaseModel):
    bookings: list[Booking]
    count: int


BookingResponse = SuccessResponse[BookingData]
BookingListResponse = SuccessResponse[BookingListData]
