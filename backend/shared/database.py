"""
MongoDB client factory and index provisioning.

The client is created once per process by the service container and shared
by every repository. Motor pools connections internally.
"""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from .config import Settings

logger = logging.getLogger(__name__)

USERS = "users"
HOTELS = "hotels"
BOOKINGS = "bookings"
CONTACTS = "contacts"
NEWSLETTER_SUBSCRIBERS = "newsletter_subscribers"


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create a Motor client for the configured MongoDB deployment.

    Raises:
        RuntimeError: If no connection string is configured
    """
    if not settings.mongodb_uri:
        raise RuntimeError(
            "MongoDB configuration missing. Set the MONGODB_URI environment variable."
        )
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the application database from a client."""
    return client[settings.mongodb_database]


async def ensure_indexes(db: Any) -> None:
    """
    Create the indexes the application relies on.

    The unique index on ``users.email`` is what prevents two concurrent
    registrations from creating duplicate accounts.
    """
    await db[USERS].create_index("email", unique=True, name="email_unique")
    await db[HOTELS].create_index([("city", ASCENDING)], name="city_idx")
    await db[BOOKINGS].create_index(
        [("user", ASCENDING), ("created_at", DESCENDING)], name="user_created_idx"
    )
    await db[NEWSLETTER_SUBSCRIBERS].create_index(
        "email", unique=True, name="email_unique"
    )
    logger.info("MongoDB indexes ensured")


async def ping(db: Any) -> bool:
    """Return True if the database answers a ping."""
    try:
        await db.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB ping failed: {e}")
        return False
