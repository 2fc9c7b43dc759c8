"""
Hotels module interface.

The API layer depends on IHotelService for all hotel operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateHotelRequest, Hotel, HotelFilters, UpdateHotelRequest


@runtime_checkable
class IHotelService(Protocol):
    """Interface for hotel inventory operations."""

    async def list_hotels(self, filters: Optional[HotelFilters] = None) -> list[Hotel]:
        """List hotels, optionally filtered by city and price range."""
        ...

    async def get_hotel(self, hotel_id: str) -> Hotel:
        """
        Get a hotel by ID.

        Raises:
            HotelNotFoundError: If the hotel doesn't exist
        """
        ...

    async def create_hotel(self, owner_id: str, request: CreateHotelRequest) -> Hotel:
        """Create a hotel owned by ``owner_id``."""
        ...

    async def update_hotel(
        self, hotel_id: str, user_id: str, request: UpdateHotelRequest
    ) -> Hotel:
        """
        Update a hotel.

        Raises:
            HotelNotFoundError: If the hotel doesn't exist
            HotelAccessDeniedError: If ``user_id`` doesn't own it
        """
        ...

    async def delete_hotel(self, hotel_id: str, user_id: str) -> None:
        """
        Delete a hotel.

        Raises:
            HotelNotFoundError: If the hotel doesn't exist
            HotelAccessDeniedError: If ``user_id`` doesn't own it
        """
        ...

    async def seed_hotels(self) -> list[Hotel]:
        """
        Insert the sample hotels into an empty collection.

        Raises:
            HotelsAlreadySeededError: If any hotels already exist
        """
        ...

    async def clear_hotels(self) -> int:
        """Delete every hotel. Returns the number deleted."""
        ...
