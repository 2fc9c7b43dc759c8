"""Tests for the error envelope handlers."""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_container
from api.middleware.errors import REDACTED_ERROR, format_validation_errors

from tests.conftest import make_settings


def _app_with_failing_route(settings, container):
    application = create_app(settings)
    application.dependency_overrides[get_container] = lambda: container

    router = APIRouter()

    @router.get("/api/boom")
    async def boom():
        raise RuntimeError("disk on fire")

    application.include_router(router)
    return application


class TestNotFound:
    def test_unknown_route(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}


class TestUnexpectedErrors:
    def test_error_detail_outside_production(self, settings, container):
        client = TestClient(_app_with_failing_route(settings, container), raise_server_exceptions=False)

        response = client.get("/api/boom")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Something went wrong!",
            "error": "disk on fire",
        }

    def test_error_detail_redacted_in_production(self, container):
        """Production responses never leak exception text."""
        settings = make_settings(environment="production")
        client = TestClient(_app_with_failing_route(settings, container), raise_server_exceptions=False)

        response = client.get("/api/boom")

        assert response.status_code == 500
        assert response.json()["error"] == REDACTED_ERROR
        assert "disk on fire" not in response.text


class TestFormatValidationErrors:
    def test_strips_location_prefix(self):
        errors = format_validation_errors(
            [{"loc": ("body", "email"), "msg": "Value error, Please provide a valid email", "type": "value_error"}]
        )
        assert errors[0].field == "email"
        assert errors[0].message == "Please provide a valid email"

    def test_missing_field(self):
        errors = format_validation_errors([{"loc": ("body", "name"), "msg": "Field required", "type": "missing"}])
        assert errors[0].message == "name is required"

    def test_nested_field(self):
        errors = format_validation_errors(
            [{"loc": ("body", "amenities", 0), "msg": "Input should be a valid string", "type": "string_type"}]
        )
        assert errors[0].field == "amenities.0"

    def test_whole_body(self):
        errors = format_validation_errors([{"loc": ("body",), "msg": "Field required", "type": "missing"}])
        assert errors[0].field == "body"

    def test_json_decode_error_reported_on_body(self):
        """The byte offset of a JSON syntax error is not a field name."""
        errors = format_validation_errors(
            [{"loc": ("body", 1), "msg": "JSON decode error", "type": "json_invalid"}]
        )
        assert errors[0].field == "body"
        assert errors[0].message == "JSON decode error"


class TestMalformedJson:
    def test_malformed_body(self, client, database):
        response = client.post(
            "/api/auth/register",
            content=b"{bad json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": [{"field": "body", "message": "JSON decode error"}],
        }
        assert database["users"].docs == []
