"""
Bookings service implementation.

Bookings are recorded as requested; availability and overlapping stays
are not checked.
"""

import logging

from modules.hotels.exceptions import HotelNotFoundError
from modules.hotels.repository import HotelRepository

from .exceptions import (
    BookingAccessDeniedError,
    BookingAlreadyCancelledError,
    BookingNotFoundError,
)
from .interfaces import IBookingService
from .models import Booking, BookingStatus, CreateBookingRequest
from .repository import BookingRepository

logger = logging.getLogger(__name__)


class BookingService(IBookingService):
    """Booking service backed by MongoDB."""

    def __init__(self, bookings: BookingRepository, hotels: HotelRepository):
        self._bookings = bookings
        self._hotels = hotels

    async def create_booking(self, user_id: str, request: CreateBookingRequest) -> Booking:
        hotel = await self._hotels.get_by_id(request.hotel_id)
        if hotel is None:
            raise HotelNotFoundError(request.hotel_id)

        total_price = request.nights * hotel.price * request.rooms
        booking = await self._bookings.create({
            "user": user_id,
            "hotel": hotel.id,
            "hotel_name": hotel.name,
            "check_in": request.check_in,
            "check_out": request.check_out,
            "guests": request.guests,
            "rooms": request.rooms,
            "total_price": total_price,
        })
        logger.info(f"Booking created: {booking.id} for user {user_id} at hotel {hotel.id}")
        return booking

    async def list_bookings(self, user_id: str) -> list[Booking]:
        return await self._bookings.list_for_user(user_id)

    async def get_booking(self, booking_id: str, user_id: str) -> Booking:
        booking = await self._bookings.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        if booking.user != user_id:
            raise BookingAccessDeniedError(booking_id, user_id)
        return booking

    async def cancel_booking(self, booking_id: str, user_id: str) -> Booking:
        booking = await self.get_booking(booking_id, user_id)
        if booking.status == BookingStatus.CANCELLED:
            raise BookingAlreadyCancelledError(booking_id)

        cancelled = await self._bookings.set_status(booking_id, BookingStatus.CANCELLED)
        if cancelled is None:
            raise BookingNotFoundError(booking_id)
        logger.info(f"Booking cancelled: {booking_id} by {user_id}")
        return cancelled
