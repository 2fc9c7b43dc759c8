"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and the ObjectId <-> string conversion every
repository needs.
"""

from typing import Any, Generic, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Collection access via self._collection
    - Generic type parameter for model type hints

    Subclasses set ``collection_name`` and implement domain-specific data
    access methods, handling document-to-Pydantic mapping internally.

    Example:
        class HotelRepository(BaseRepository[Hotel]):
            collection_name = "hotels"

            async def get_by_id(self, hotel_id: str) -> Optional[Hotel]:
                oid = self.to_object_id(hotel_id)
                if oid is None:
                    return None
                doc = await self._collection.find_one({"_id": oid})
                return self._map_to_hotel(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: Any) -> None:
        """
        Initialize the repository with a database handle.

        Args:
            db: Motor database (or any object supporting ``db[name]``).
        """
        self._db = db
        self._collection = db[self.collection_name]

    @staticmethod
    def to_object_id(value: str) -> Optional[ObjectId]:
        """Parse an id string, returning None if it is not a valid ObjectId."""
        # ObjectId(None) would generate a fresh id
        if value is None:
            return None
        try:
            return ObjectId(value)
        except (InvalidId, TypeError):
            return None

    @staticmethod
    def stringify_id(doc: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of ``doc`` with ``_id`` renamed to a string ``id``."""
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return data
