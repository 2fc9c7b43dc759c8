"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from modules.hotels.repository import HotelRepository
from shared.database import ping

from ..dependencies import get_database, get_hotel_repository

router = APIRouter()


class RootResponse(BaseModel):
    """Root endpoint response model."""

    message: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    database: str
    hotel_count: int
    environment: str


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    """Confirm the API is up."""
    return RootResponse(message="Hotel Booking API is running!")


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    db: Any = Depends(get_database),
    hotels: HotelRepository = Depends(get_hotel_repository),
) -> HealthResponse:
    """
    Health check endpoint.

    Reports database connectivity and the number of hotels.
    """
    connected = await ping(db)
    return HealthResponse(
        status="ok",
        database="connected" if connected else "disconnected",
        hotel_count=await hotels.count() if connected else 0,
        environment=request.app.state.settings.environment,
    )
