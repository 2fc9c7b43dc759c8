"""
Centralized configuration for the hotel booking backend.

All settings are loaded from environment variables with sensible defaults.
The signing secret has no default: the token issuer refuses to start without it.
"""

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Hotel Booking API"
    app_version: str = "0.1.0"
    environment: str = "development"  # development | production | test
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "https://hotelproj-frontend.vercel.app",
    ]
    cors_origin_regex: str = (
        r"^(http://localhost:\d+|http://127\.0\.0\.1:\d+|https://.*\.vercel\.app)$"
    )
    frontend_url: str = ""

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017/hotel_booking"
    mongodb_database: str = "hotel_booking"
    mongodb_timeout_ms: int = 5000

    # Auth
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 30
    bcrypt_rounds: int = 10

    @property
    def is_production(self) -> bool:
        """Whether error details must be withheld from clients."""
        return self.environment.lower() == "production"

    @property
    def allowed_origins(self) -> list[str]:
        """Configured CORS origins plus the frontend URL, if any."""
        origins = list(self.cors_origins)
        if self.frontend_url and self.frontend_url not in origins:
            origins.append(self.frontend_url)
        return origins


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set up root logging for the API process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
