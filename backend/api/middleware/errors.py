"""
Exception handlers.

Render every failure into the standard response envelope:

- request validation  -> 400 ``{success, errors: [{field, message}]}``
- domain errors       -> their status with ``{success, message}``
- unexpected failures -> 500 ``{success, message, error}``; ``error`` is
  redacted in production
"""

import logging
from typing import Any, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config import Settings
from shared.exceptions import (
    AuthenticationError,
    HotelBookingError,
    InternalError,
)
from shared.models import ErrorResponse, FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)

REDACTED_ERROR = "Internal server error"
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}
_VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic errors into ``{field, message}`` pairs."""
    formatted = []
    for err in errors:
        # Malformed JSON is located by byte offset, not by field
        if err.get("type") == "json_invalid":
            loc = []
        else:
            loc = [str(part) for part in err.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(loc) or "body"
        message = str(err.get("msg", "Invalid value"))
        if err.get("type") == "missing":
            message = f"{field} is required"
        elif message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        formatted.append(FieldError(field=field, message=message))
    return formatted


def error_detail(settings: Settings, exc: Optional[BaseException], fallback: str) -> str:
    """What to put in the ``error`` field of a 500 response."""
    if settings.is_production:
        return REDACTED_ERROR
    return str(exc) if exc is not None else fallback


def _envelope(status_code: int, body: Any, headers: Optional[dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing handlers to ``app``."""

    def settings_for(request: Request) -> Settings:
        return request.app.state.settings

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.info(f"Validation errors on {request.url.path}: {[e.field for e in errors]}")
        return _envelope(status.HTTP_400_BAD_REQUEST, ValidationErrorResponse(errors=errors))

    @app.exception_handler(HotelBookingError)
    async def handle_domain_error(request: Request, exc: HotelBookingError):
        if exc.status_code >= 500:
            cause = exc.cause if isinstance(exc, InternalError) else exc
            if not isinstance(exc, InternalError):
                logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
            return _envelope(
                exc.status_code,
                ErrorResponse(
                    message=exc.message,
                    error=error_detail(settings_for(request), cause, exc.message),
                ),
            )

        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        return _envelope(exc.status_code, ErrorResponse(message=exc.message), headers)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = "Route not found"
        else:
            message = str(exc.detail)
        return _envelope(
            exc.status_code,
            ErrorResponse(message=message),
            getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                message="Something went wrong!",
                error=error_detail(settings_for(request), exc, "Unexpected error"),
            ),
        )
