"""
Authentication service implementation.

Orchestrates registration and login: uniqueness checks, password hashing
and verification, and token issuance. Request shape is validated before
the service is called (see ``models.RegisterRequest``/``LoginRequest``).
"""

import asyncio
import logging

from shared.exceptions import HotelBookingError, InternalError

from .exceptions import DuplicateEmailError, InvalidCredentialsError, UserNotFoundError
from .interfaces import IAuthService, IUserRepository
from .models import AuthData, LoginRequest, PublicUser, RegisterRequest
from .password import PasswordHasher
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are passed in explicitly so tests can substitute
    an in-memory repository or a cheap hasher.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> AuthData:
        """
        Register a new user.

        Steps run strictly in order: uniqueness check, hash, insert, issue
        token. A duplicate detected by the unique index at insert time is
        reported exactly like one found by the lookup.
        """
        logger.info(f"Registration attempt: {request.email}")

        try:
            existing = await self._users.find_by_email(request.email)
            if existing is not None:
                logger.info(f"Email already registered: {request.email}")
                raise DuplicateEmailError()

            # bcrypt is CPU-bound; keep it off the event loop
            digest = await asyncio.to_thread(self._hasher.hash, request.password)
            user = await self._users.create(
                name=request.name,
                email=request.email,
                password_digest=digest,
            )
            token = self._tokens.issue(user.id)
        except DuplicateEmailError:
            logger.info(f"Registration rejected, duplicate email: {request.email}")
            raise
        except HotelBookingError:
            raise
        except Exception as e:
            logger.exception(f"Registration error for {request.email}")
            raise InternalError("Error registering user", cause=e) from e

        logger.info(f"User registered: {user.id}")
        return AuthData(user=user.to_public(), token=token)

    async def login(self, request: LoginRequest) -> AuthData:
        """
        Log a user in.

        Unknown email and wrong password raise the same error so callers
        cannot tell which accounts exist.
        """
        logger.info(f"Login attempt: {request.email}")

        try:
            credentials = await self._users.find_credentials_by_email(request.email)
            if credentials is None:
                logger.info(f"Login failed, no such user: {request.email}")
                raise InvalidCredentialsError()

            matches = await asyncio.to_thread(
                self._hasher.verify, request.password, credentials.password_digest
            )
            if not matches:
                logger.info(f"Login failed, wrong password: {request.email}")
                raise InvalidCredentialsError()

            token = self._tokens.issue(credentials.id)
        except HotelBookingError:
            raise
        except Exception as e:
            logger.exception(f"Login error for {request.email}")
            raise InternalError("Error logging in", cause=e) from e

        logger.info(f"Login successful: {credentials.id}")
        return AuthData(user=credentials.to_public(), token=token)

    async def get_user(self, user_id: str) -> PublicUser:
        """Get a user's public profile by ID."""
        try:
            user = await self._users.get_by_id(user_id)
        except Exception as e:
            logger.exception(f"Error loading user {user_id}")
            raise InternalError("Error loading user", cause=e) from e

        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_public()
