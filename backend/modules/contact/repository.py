"""
Contact message repository.
"""

from datetime import datetime, timezone

from shared.database import CONTACTS
from shared.repository import BaseRepository

from .models import ContactMessage, ContactRequest


class ContactRepository(BaseRepository[ContactMessage]):
    """Stores contact form submissions."""

    collection_name = CONTACTS

    async def create(self, request: ContactRequest) -> ContactMessage:
        doc = {
            **request.model_dump(),
            "created_at": datetime.now(timezone.utc),
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return ContactMessage(**self.stringify_id(doc))
