"""Tests for application startup and the service container."""

import pytest
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.service import AuthService
from shared.exceptions import ConfigurationError

from tests.conftest import make_settings
from tests.fakes import InMemoryDatabase


class TestServiceContainer:
    def test_token_issuer_requires_secret(self):
        container = ServiceContainer(make_settings(jwt_secret=""), database=InMemoryDatabase())
        with pytest.raises(ConfigurationError):
            container.token_issuer

    def test_services_are_cached(self):
        container = ServiceContainer(make_settings(), database=InMemoryDatabase())
        assert isinstance(container.auth, AuthService)
        assert container.auth is container.auth
        assert container.hotels is container.hotels

    def test_hasher_uses_configured_rounds(self):
        container = ServiceContainer(make_settings(bcrypt_rounds=5), database=InMemoryDatabase())
        assert container.password_hasher.rounds == 5

    def test_uses_given_database(self):
        db = InMemoryDatabase()
        container = ServiceContainer(make_settings(), database=db)
        assert container.database is db
        container.close()


class TestLifespan:
    def test_startup_fails_without_secret(self):
        """A missing signing secret stops the server from starting."""
        app = create_app(make_settings(jwt_secret=""))
        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass

    @patch("api.dependencies.provision_indexes", new_callable=AsyncMock)
    @patch("api.app.ServiceContainer.database", new=InMemoryDatabase())
    def test_startup_builds_container(self, mock_indexes):
        app = create_app(make_settings())
        with TestClient(app) as client:
            assert isinstance(app.state.container, ServiceContainer)
            mock_indexes.assert_awaited_once()
            assert client.get("/").status_code == 200

    @patch(
        "api.dependencies.provision_indexes",
        new_callable=AsyncMock,
        side_effect=ServerSelectionTimeoutError("connection refused"),
    )
    @patch("api.app.ServiceContainer.database", new=InMemoryDatabase())
    def test_startup_survives_unreachable_database(self, mock_indexes):
        app = create_app(make_settings())
        with TestClient(app) as client:
            assert client.get("/").status_code == 200


class TestCors:
    def test_allows_frontend_origin(self, client):
        response = client.options(
            "/api/hotels",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_allows_preview_deployments(self, client):
        response = client.get("/", headers={"Origin": "https://hotelproj-git-main.vercel.app"})
        assert response.headers["access-control-allow-origin"] == "https://hotelproj-git-main.vercel.app"

    def test_rejects_unknown_origin(self, client):
        response = client.get("/", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in response.headers
