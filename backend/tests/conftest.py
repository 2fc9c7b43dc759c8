"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container
from modules.auth.password import PasswordHasher
from modules.auth.tokens import TokenIssuer
from shared.config import Settings

from tests.fakes import InMemoryDatabase


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

# Lowest work factor bcrypt accepts, keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    user_id: str = "64b7f0c2a1b2c3d4e5f60718",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "environment": "test",
        "bcrypt_rounds": TEST_BCRYPT_ROUNDS,
        "mongodb_uri": "mongodb://localhost:27017/hotel_booking_test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def container(settings: Settings, database: InMemoryDatabase) -> ServiceContainer:
    """Service container wired to the in-memory database."""
    return ServiceContainer(settings, database=database)


@pytest.fixture
def app(settings: Settings, container: ServiceContainer):
    """Create a fresh app for each test, bypassing the lifespan."""
    application = create_app(settings)
    application.dependency_overrides[get_container] = lambda: container
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "64b7f0c2a1b2c3d4e5f60718"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
