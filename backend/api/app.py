"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from shared.config import Settings, configure_logging, get_settings

from .dependencies import ServiceContainer
from .middleware.errors import register_exception_handlers
from .routes import health, seed
from modules.auth.routes import router as auth_router
from modules.bookings.routes import router as bookings_router
from modules.contact.routes import router as contact_router
from modules.hotels.routes import router as hotels_router
from modules.newsletter.routes import router as newsletter_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the service container, fails fast on a missing signing secret,
    and provisions indexes. An unreachable database is logged, not fatal.
    """
    # Startup
    settings: Settings = app.state.settings
    container = ServiceContainer(settings)
    container.token_issuer  # raises ConfigurationError without JWT_SECRET
    app.state.container = container

    try:
        await container.ensure_indexes()
    except PyMongoError as e:
        logger.error(
            f"MongoDB unavailable at startup ({e}). "
            "Indexes will be provisioned on the first request that needs them."
        )

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    container.close()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Hotel booking REST API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_origin_regex=settings.cors_origin_regex or None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(hotels_router, prefix="/api/hotels", tags=["hotels"])
    app.include_router(bookings_router, prefix="/api/bookings", tags=["bookings"])
    app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
    app.include_router(newsletter_router, prefix="/api/newsletter", tags=["newsletter"])
    app.include_router(seed.router, prefix="/api/seed", tags=["seed"])

    return app


# Application instance for uvicorn
app = create_app()
