"""
Booking API endpoints.

All routes require authentication and only ever expose the caller's
own bookings.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_booking_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .exceptions import BookingAccessDeniedError, BookingNotFoundError
from .interfaces import IBookingService
from .models import (
    BookingData,
    BookingListData,
    BookingListResponse,
    BookingResponse,
    CreateBookingRequest,
)

router = APIRouter()


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: CreateBookingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Book a hotel stay."""
    booking = await service.create_booking(user.id, request)
    return BookingResponse(
        message="Booking created successfully",
        data=BookingData(booking=booking),
    )


@router.get("/my", response_model=BookingListResponse)
async def list_my_bookings(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> BookingListResponse:
    """List the current user's bookings, most recent first."""
    bookings = await service.list_bookings(user.id)
    return BookingListResponse(
        message="Bookings retrieved successfully",
        data=BookingListData(bookings=bookings, count=len(bookings)),
    )


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Get one of the current user's bookings."""
    try:
        booking = await service.get_booking(booking_id, user.id)
    except BookingAccessDeniedError:
        raise BookingNotFoundError(booking_id)
    return BookingResponse(
        message="Booking retrieved successfully",
        data=BookingData(booking=booking),
    )


@router.patch("/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Cancel one of the current user's bookings."""
    try:
        booking = await service.cancel_booking(booking_id, user.id)
    except BookingAccessDeniedError:
        raise BookingNotFoundError(booking_id)
    return BookingResponse(
        message="Booking cancelled successfully",
        data=BookingData(booking=booking),
    )
