"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    HotelBookingError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ConfigurationError,
)


class TestHotelBookingError:
    def test_message(self):
        """HotelBookingError should store message."""
        error = HotelBookingError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """HotelBookingError should default code to class name."""
        error = HotelBookingError("Test error")
        assert error.code == "HotelBookingError"

    def test_custom_code(self):
        error = HotelBookingError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_default_details(self):
        error = HotelBookingError("Test error")
        assert error.details == {}

    def test_default_status_code(self):
        """Unclassified errors render as 500."""
        assert HotelBookingError("Test error").status_code == 500

    def test_to_dict(self):
        """HotelBookingError should convert to dict."""
        error = HotelBookingError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error_class,status_code",
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 400),
            (AuthenticationError, 401),
            (AuthorizationError, 403),
            (InternalError, 500),
        ],
    )
    def test_status_code(self, error_class, status_code):
        """Each base class declares the HTTP status it renders as."""
        error = error_class("Something")
        assert error.status_code == status_code
        assert isinstance(error, HotelBookingError)


class TestValidationError:
    def test_to_dict(self):
        """Domain validation failures carry a message only."""
        error = ValidationError("Booking is already cancelled", code="BOOKING_ALREADY_CANCELLED")
        assert error.to_dict() == {
            "error": "BOOKING_ALREADY_CANCELLED",
            "message": "Booking is already cancelled",
            "details": {},
        }


class TestInternalError:
    def test_default_code(self):
        assert InternalError("Boom").code == "INTERNAL_ERROR"

    def test_keeps_cause(self):
        """The wrapped exception stays available for logging."""
        cause = RuntimeError("connection reset")
        error = InternalError("Error registering user", cause=cause)
        assert error.cause is cause
        assert error.message == "Error registering user"


class TestConfigurationError:
    def test_records_setting(self):
        error = ConfigurationError("JWT secret missing", setting="JWT_SECRET")
        assert error.code == "CONFIGURATION_ERROR"
        assert error.details == {"setting": "JWT_SECRET"}

    def test_without_setting(self):
        assert ConfigurationError("Missing config").details == {}
