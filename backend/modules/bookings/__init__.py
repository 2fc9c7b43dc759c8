"""
Bookings module.

Records hotel stays for authenticated users.
"""

from .interfaces import IBookingService
from .models import Booking, BookingStatus, CreateBookingRequest
from .repository import BookingRepository
from .service import BookingService
from .exceptions import (
    BookingNotFoundError,
    BookingAccessDeniedError,
    BookingAlreadyCancelledError,
)

__all__ = [
    "IBookingService",
    "Booking",
    "BookingStatus",
    "CreateBookingRequest",
    "BookingRepository",
    "BookingService",
    "BookingNotFoundError",
    "BookingAccessDeniedError",
    "BookingAlreadyCancelledError",
]
