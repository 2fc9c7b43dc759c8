"""
User repository for database access.

Encapsulates all MongoDB queries for the ``users`` collection. The password
digest is excluded from every read except ``find_credentials_by_email``.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from shared.database import USERS
from shared.repository import BaseRepository

from .exceptions import DuplicateEmailError
from .models import User, UserCredentials

# Default projection: never load the digest unless asked for
_PUBLIC_PROJECTION = {"password_digest": 0}


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Relies on the unique index on ``email`` (see ``shared.database.ensure_indexes``)
    as the authoritative duplicate guard.
    """

    collection_name = USERS

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by normalized email, without credentials."""
        doc = await self._collection.find_one({"email": email}, _PUBLIC_PROJECTION)
        return self._map_to_user(doc) if doc else None

    async def find_credentials_by_email(self, email: str) -> Optional[UserCredentials]:
        """Find a user by normalized email, including the password digest."""
        doc = await self._collection.find_one({"email": email})
        if not doc:
            return None
        return UserCredentials(**self.stringify_id(doc))

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID. Malformed IDs are treated as not found."""
        oid = self.to_object_id(user_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid}, _PUBLIC_PROJECTION)
        return self._map_to_user(doc) if doc else None

    async def create(self, name: str, email: str, password_digest: str) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        doc = {
            "name": name,
            "email": email,
            "password_digest": password_digest,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateEmailError()

        return User(
            id=str(result.inserted_id),
            name=name,
            email=email,
            created_at=doc["created_at"],
        )

    def _map_to_user(self, doc: dict[str, Any]) -> User:
        data = self.stringify_id(doc)
        data.pop("password_digest", None)
        return User(**data)
