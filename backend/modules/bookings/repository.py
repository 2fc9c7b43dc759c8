"""
Booking repository for database access.

Stay dates are stored as ISO ``YYYY-MM-DD`` strings since BSON has no
date-only type.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import DESCENDING, ReturnDocument

from shared.database import BOOKINGS
from shared.repository import BaseRepository

from .models import Booking, BookingStatus


class BookingRepository(BaseRepository[Booking]):
    """
    Repository for booking data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    collection_name = BOOKINGS

    async def create(self, data: dict[str, Any]) -> Booking:
        """Insert a booking and return it with its generated ID."""
        doc = {
            **data,
            "check_in": data["check_in"].isoformat(),
            "check_out": data["check_out"].isoformat(),
            "status": BookingStatus.CONFIRMED.value,
            "created_at": datetime.now(timezone.utc),
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_booking(doc)

    async def get_by_id(self, booking_id: str) -> Optional[Booking]:
        """Get a booking by ID. Malformed IDs are treated as not found."""
        oid = self.to_object_id(booking_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return self._map_to_booking(doc) if doc else None

    async def list_for_user(self, user_id: str) -> list[Booking]:
        """List a user's bookings, most recent first."""
        cursor = self._collection.find({"user": user_id}).sort("created_at", DESCENDING)
        docs = await cursor.to_list(length=None)
        return [self._map_to_booking(d) for d in docs]

    async def set_status(self, booking_id: str, status: BookingStatus) -> Optional[Booking]:
        oid = self.to_object_id(booking_id)
        if oid is None:
            return None
        doc = await self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": {"status": status.value}},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_booking(doc) if doc else None

    def _map_to_booking(self, doc: dict[str, Any]) -> Booking:
        return Booking(**self.stringify_id(doc))
