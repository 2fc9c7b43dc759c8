"""
Hotel repository for database access.

Encapsulates all MongoDB queries for the ``hotels`` collection.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import ASCENDING, ReturnDocument

from shared.database import HOTELS
from shared.repository import BaseRepository

from .models import Hotel, HotelFilters


class HotelRepository(BaseRepository[Hotel]):
    """
    Repository for hotel data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    collection_name = HOTELS

    async def list_hotels(self, filters: Optional[HotelFilters] = None) -> list[Hotel]:
        """List hotels matching the filters, ordered by name."""
        query = self._build_query(filters or HotelFilters())
        cursor = self._collection.find(query).sort("name", ASCENDING)
        docs = await cursor.to_list(length=None)
        return [self._map_to_hotel(d) for d in docs]

    async def get_by_id(self, hotel_id: str) -> Optional[Hotel]:
        """Get a hotel by ID. Malformed IDs are treated as not found."""
        oid = self.to_object_id(hotel_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return self._map_to_hotel(doc) if doc else None

    async def create(self, data: dict[str, Any]) -> Hotel:
        """Insert a hotel and return it with its generated ID."""
        doc = {**data, "created_at": datetime.now(timezone.utc)}
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_hotel(doc)

    async def update(self, hotel_id: str, changes: dict[str, Any]) -> Optional[Hotel]:
        """Apply ``changes`` and return the updated hotel, or None if it doesn't exist."""
        oid = self.to_object_id(hotel_id)
        if oid is None:
            return None
        doc = await self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_hotel(doc) if doc else None

    async def delete(self, hotel_id: str) -> bool:
        """Delete a hotel. Returns False if nothing was deleted."""
        oid = self.to_object_id(hotel_id)
        if oid is None:
            return False
        result = await self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    async def count(self) -> int:
        return await self._collection.count_documents({})

    async def insert_many(self, hotels: list[dict[str, Any]]) -> list[Hotel]:
        """Bulk insert, used by seeding."""
        now = datetime.now(timezone.utc)
        docs = [{**h, "created_at": now} for h in hotels]
        result = await self._collection.insert_many(docs)
        for doc, oid in zip(docs, result.inserted_ids):
            doc["_id"] = oid
        return [self._map_to_hotel(d) for d in docs]

    async def delete_all(self) -> int:
        result = await self._collection.delete_many({})
        return result.deleted_count

    @staticmethod
    def _build_query(filters: HotelFilters) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if filters.city:
            query["city"] = {"$regex": f"^{re.escape(filters.city.strip())}$", "$options": "i"}
        price: dict[str, float] = {}
        if filters.min_price is not None:
            price["$gte"] = filters.min_price
        if filters.max_price is not None:
            price["$lte"] = filters.max_price
        if price:
            query["price"] = price
        return query

    def _map_to_hotel(self, doc: dict[str, Any]) -> Hotel:
        return Hotel(**self.stringify_id(doc))
