"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container is built once in the application lifespan
from the settings and holds the process-wide MongoDB client and signing
secret; route handlers receive services through the dependency functions
below, which tests override via ``app.dependency_overrides``.
"""

from datetime import timedelta
import logging
from typing import TYPE_CHECKING, Any, Optional

from fastapi import Depends, Request
from pymongo.errors import PyMongoError

from shared.config import Settings
from shared.database import (
    create_mongo_client,
    ensure_indexes as provision_indexes,
    get_database as select_database,
)
from shared.exceptions import InternalError

logger = logging.getLogger(__name__)

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorClient
    from modules.auth.interfaces import IAuthService
    from modules.auth.password import PasswordHasher
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenIssuer
    from modules.bookings.interfaces import IBookingService
    from modules.contact.repository import ContactRepository
    from modules.hotels.interfaces import IHotelService
    from modules.hotels.repository import HotelRepository
    from modules.newsletter.repository import SubscriberRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container. Pass ``database`` to bypass the Motor
    client (tests, scripts).
    """

    def __init__(self, settings: Settings, database: Any = None) -> None:
        self.settings = settings
        self._client: "Optional[AsyncIOMotorClient]" = None
        self._database: Any = database
        self._password_hasher: "PasswordHasher | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._hotel_repository: "HotelRepository | None" = None
        self._hotel_service: "IHotelService | None" = None
        self._booking_service: "IBookingService | None" = None
        self._contact_repository: "ContactRepository | None" = None
        self._subscriber_repository: "SubscriberRepository | None" = None
        self._indexes_ready = False

    @property
    def database(self) -> Any:
        """Get the MongoDB database, connecting on first use."""
        if self._database is None:
            self._client = create_mongo_client(self.settings)
            self._database = select_database(self._client, self.settings)
        return self._database

    @property
    def password_hasher(self) -> "PasswordHasher":
        if self._password_hasher is None:
            from modules.auth.password import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_issuer(self) -> "TokenIssuer":
        """Get the token issuer. Raises ConfigurationError without a secret."""
        if self._token_issuer is None:
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                expires_in=timedelta(days=self.settings.jwt_expires_days),
            )
        return self._token_issuer

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_issuer,
            )
        return self._auth_service

    @property
    def hotel_repository(self) -> "HotelRepository":
        if self._hotel_repository is None:
            from modules.hotels.repository import HotelRepository
            self._hotel_repository = HotelRepository(self.database)
        return self._hotel_repository

    @property
    def hotels(self) -> "IHotelService":
        """Get the hotel service instance."""
        if self._hotel_service is None:
            from modules.hotels.service import HotelService
            self._hotel_service = HotelService(self.hotel_repository)
        return self._hotel_service

    @property
    def bookings(self) -> "IBookingService":
        """Get the booking service instance."""
        if self._booking_service is None:
            from modules.bookings.repository import BookingRepository
            from modules.bookings.service import BookingService
            self._booking_service = BookingService(
                bookings=BookingRepository(self.database),
                hotels=self.hotel_repository,
            )
        return self._booking_service

    @property
    def contact_repository(self) -> "ContactRepository":
        if self._contact_repository is None:
            from modules.contact.repository import ContactRepository
            self._contact_repository = ContactRepository(self.database)
        return self._contact_repository

    @property
    def subscriber_repository(self) -> "SubscriberRepository":
        if self._subscriber_repository is None:
            from modules.newsletter.repository import SubscriberRepository
            self._subscriber_repository = SubscriberRepository(self.database)
        return self._subscriber_repository

    @property
    def indexes_ready(self) -> bool:
        return self._indexes_ready

    async def ensure_indexes(self) -> None:
        """
        Provision the MongoDB indexes once per process.

        A failed attempt leaves the flag unset, so the next call retries.
        The unique email indexes are the duplicate guard for registration
        and newsletter signups.

        Raises:
            PyMongoError: If the database is unreachable
        """
        if self._indexes_ready:
            return
        await provision_indexes(self.database)
        self._indexes_ready = True

    def close(self) -> None:
        """Close the MongoDB client if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the container built at startup."""
    return request.app.state.container


async def get_indexed_container(
    container: ServiceContainer = Depends(get_container),
) -> ServiceContainer:
    """
    FastAPI dependency for a container whose indexes are in place.

    Routes that rely on the unique email indexes depend on this, so a
    database that was down at startup gets its indexes on the first
    request after it recovers.
    """
    try:
        await container.ensure_indexes()
    except PyMongoError as e:
        logger.error(f"MongoDB indexes unavailable: {e}")
        raise InternalError("Database unavailable", cause=e) from e
    return container


def get_database(container: ServiceContainer = Depends(get_container)) -> Any:
    """FastAPI dependency for the MongoDB database."""
    return container.database


def get_token_issuer(container: ServiceContainer = Depends(get_container)) -> "TokenIssuer":
    """FastAPI dependency for the token issuer."""
    return container.token_issuer


def get_auth_service(
    container: ServiceContainer = Depends(get_indexed_container),
) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_hotel_repository(container: ServiceContainer = Depends(get_container)) -> "HotelRepository":
    """FastAPI dependency for hotel repository."""
    return container.hotel_repository


def get_hotel_service(container: ServiceContainer = Depends(get_container)) -> "IHotelService":
    """FastAPI dependency for hotel service."""
    return container.hotels


def get_booking_service(container: ServiceContainer = Depends(get_container)) -> "IBookingService":
    """FastAPI dependency for booking service."""
    return container.bookings


def get_contact_repository(
    container: ServiceContainer = Depends(get_container),
) -> "ContactRepository":
    """FastAPI dependency for contact repository."""
    return container.contact_repository


def get_subscriber_repository(
    container: ServiceContainer = Depends(get_indexed_container),
) -> "SubscriberRepository":
    """FastAPI dependency for newsletter subscriber repository."""
    return container.subscriber_repository
