"""
Hotels service implementation.

Ownership checks live here; the repository only talks to MongoDB.
"""

import logging
from typing import Optional

from .exceptions import HotelAccessDeniedError, HotelNotFoundError, HotelsAlreadySeededError
from .interfaces import IHotelService
from .models import CreateHotelRequest, Hotel, HotelFilters, UpdateHotelRequest
from .repository import HotelRepository
from .seed import SAMPLE_HOTELS

logger = logging.getLogger(__name__)


class HotelService(IHotelService):
    """Hotel inventory backed by MongoDB."""

    def __init__(self, repository: HotelRepository):
        self._hotels = repository

    async def list_hotels(self, filters: Optional[HotelFilters] = None) -> list[Hotel]:
        return await self._hotels.list_hotels(filters)

    async def get_hotel(self, hotel_id: str) -> Hotel:
        hotel = await self._hotels.get_by_id(hotel_id)
        if hotel is None:
            raise HotelNotFoundError(hotel_id)
        return hotel

    async def create_hotel(self, owner_id: str, request: CreateHotelRequest) -> Hotel:
        hotel = await self._hotels.create({**request.model_dump(), "owner": owner_id})
        logger.info(f"Hotel created: {hotel.id} by {owner_id}")
        return hotel

    async def update_hotel(
        self, hotel_id: str, user_id: str, request: UpdateHotelRequest
    ) -> Hotel:
        await self._get_owned_hotel(hotel_id, user_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return await self.get_hotel(hotel_id)

        updated = await self._hotels.update(hotel_id, changes)
        if updated is None:
            # Deleted between the ownership check and the update
            raise HotelNotFoundError(hotel_id)
        return updated

    async def delete_hotel(self, hotel_id: str, user_id: str) -> None:
        await self._get_owned_hotel(hotel_id, user_id)
        if not await self._hotels.delete(hotel_id):
            raise HotelNotFoundError(hotel_id)
        logger.info(f"Hotel deleted: {hotel_id} by {user_id}")

    async def seed_hotels(self) -> list[Hotel]:
        existing = await self._hotels.count()
        if existing > 0:
            raise HotelsAlreadySeededError(existing)

        hotels = await self._hotels.insert_many(SAMPLE_HOTELS)
        logger.info(f"Seeded {len(hotels)} hotels")
        return hotels

    async def clear_hotels(self) -> int:
        deleted = await self._hotels.delete_all()
        logger.info(f"Deleted {deleted} hotels")
        return deleted

    async def _get_owned_hotel(self, hotel_id: str, user_id: str) -> Hotel:
        hotel = await self.get_hotel(hotel_id)
        if hotel.owner != user_id:
            raise HotelAccessDeniedError(hotel_id, user_id)
        return hotel
