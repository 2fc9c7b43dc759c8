"""
Newsletter subscriber repository.

Subscriptions are checked by email before insert; the unique index on
``email`` catches concurrent signups the lookup misses.
"""

from datetime import datetime, timezone

from pymongo.errors import DuplicateKeyError

from shared.database import NEWSLETTER_SUBSCRIBERS
from shared.repository import BaseRepository

from .exceptions import AlreadySubscribedError, SubscriptionNotFoundError
from .models import Subscriber


class SubscriberRepository(BaseRepository[Subscriber]):
    """Stores newsletter subscribers keyed by normalized email."""

    collection_name = NEWSLETTER_SUBSCRIBERS

    async def subscribe(self, email: str) -> Subscriber:
        """
        Add an email to the list.

        Raises:
            AlreadySubscribedError: If the email is already subscribed
        """
        if await self._collection.find_one({"email": email}) is not None:
            raise AlreadySubscribedError()

        doc = {"email": email, "subscribed_at": datetime.now(timezone.utc)}
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise AlreadySubscribedError()
        doc["_id"] = result.inserted_id
        return Subscriber(**self.stringify_id(doc))

    async def unsubscribe(self, email: str) -> None:
        """
        Remove an email from the list.

        Raises:
            SubscriptionNotFoundError: If the email isn't subscribed
        """
        result = await self._collection.delete_one({"email": email})
        if result.deleted_count == 0:
            raise SubscriptionNotFoundError()
