"""
Bookings module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Booking, CreateBookingRequest


@runtime_checkable
class IBookingService(Protocol):
    """
    Interface for booking operations.

    Every operation is scoped to the calling user.
    """

    async def create_booking(self, user_id: str, request: CreateBookingRequest) -> Booking:
        """
        Book a stay.

        Raises:
            HotelNotFoundError: If the hotel doesn't exist
        """
        ...

    async def list_bookings(self, user_id: str) -> list[Booking]:
        """List the user's bookings, most recent first."""
        ...

    async def get_booking(self, booking_id: str, user_id: str) -> Booking:
        """
        Get one of the user's bookings.

        Raises:
            BookingNotFoundError: If the booking doesn't exist
            BookingAccessDeniedError: If it belongs to someone else
        """
        ...

    async def cancel_booking(self, booking_id: str, user_id: str) -> Booking:
        """
        Cancel one of the user's bookings.

        Raises:
            BookingNotFoundError: If the booking doesn't exist
            BookingAccessDeniedError: If it belongs to someone else
            BookingAlreadyCancelledError: If it is already cancelled
        """
        ...
