"""
Bookings module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class BookingNotFoundError(NotFoundError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str):
        super().__init__(
            "Booking not found",
            code="BOOKING_NOT_FOUND",
            details={"booking_id": booking_id},
        )


class BookingAccessDeniedError(AuthorizationError):
    """Raised when user doesn't own a booking."""

    def __init__(self, booking_id: str, user_id: str):
        super().__init__(
            f"Access denied to booking: {booking_id}",
            code="BOOKING_ACCESS_DENIED",
            details={"booking_id": booking_id, "user_id": user_id},
        )


class BookingAlreadyCancelledError(ValidationError):
    """Raised when cancelling a booking that is already cancelled."""

    def __init__(self, booking_id: str):
        super().__init__(
            "Booking is already cancelled",
            code="BOOKING_ALREADY_CANCELLED",
            details={"booking_id": booking_id},
        )
