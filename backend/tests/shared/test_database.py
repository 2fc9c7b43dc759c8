"""Tests for shared/database.py."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from shared.database import (
    BOOKINGS,
    HOTELS,
    NEWSLETTER_SUBSCRIBERS,
    USERS,
    create_mongo_client,
    ensure_indexes,
    get_database,
    ping,
)

from tests.conftest import make_settings
from tests.fakes import InMemoryDatabase


class TestMongoClient:
    @patch("shared.database.AsyncIOMotorClient")
    def test_create_client_uses_settings(self, mock_client):
        """Should pass the URI and the server selection timeout."""
        settings = make_settings(mongodb_uri="mongodb://db:27017/hotels", mongodb_timeout_ms=1500)

        create_mongo_client(settings)

        mock_client.assert_called_once_with(
            "mongodb://db:27017/hotels",
            serverSelectionTimeoutMS=1500,
        )

    def test_create_client_requires_uri(self):
        """Should raise error if no connection string is configured."""
        with pytest.raises(RuntimeError, match="MONGODB_URI"):
            create_mongo_client(make_settings(mongodb_uri=""))

    def test_get_database_uses_configured_name(self):
        client = MagicMock()
        get_database(client, make_settings(mongodb_database="hotels_test"))
        client.__getitem__.assert_called_once_with("hotels_test")


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_creates_unique_email_indexes(self):
        """users.email and newsletter email must be unique."""
        collections = {}

        def get_collection(name):
            collections.setdefault(name, MagicMock(create_index=AsyncMock()))
            return collections[name]

        db = MagicMock()
        db.__getitem__.side_effect = get_collection

        await ensure_indexes(db)

        collections[USERS].create_index.assert_awaited_once_with(
            "email", unique=True, name="email_unique"
        )
        collections[NEWSLETTER_SUBSCRIBERS].create_index.assert_awaited_once_with(
            "email", unique=True, name="email_unique"
        )
        collections[HOTELS].create_index.assert_awaited_once()
        collections[BOOKINGS].create_index.assert_awaited_once()


class TestPing:
    @pytest.mark.asyncio
    async def test_ping_reachable(self):
        assert await ping(InMemoryDatabase()) is True

    @pytest.mark.asyncio
    async def test_ping_unreachable(self):
        """Connection failures are reported, not raised."""
        db = InMemoryDatabase()
        db.reachable = False
        assert await ping(db) is False
