"""
Sample data endpoints.

Populate or clear the hotels collection during development.
"""

from fastapi import APIRouter, Depends, status

from modules.hotels.interfaces import IHotelService
from modules.hotels.models import (
    ClearData,
    ClearResponse,
    SeedData,
    SeededHotel,
    SeedResponse,
)

from ..dependencies import get_hotel_service

router = APIRouter()


@router.post("/hotels", response_model=SeedResponse, status_code=status.HTTP_201_CREATED)
async def seed_hotels(
    service: IHotelService = Depends(get_hotel_service),
) -> SeedResponse:
    """Insert the sample hotels. Refuses if any hotels exist."""
    hotels = await service.seed_hotels()
    return SeedResponse(
        message="Database seeded successfully",
        data=SeedData(
            count=len(hotels),
            hotels=[SeededHotel(id=h.id, name=h.name, city=h.city) for h in hotels],
        ),
    )


@router.delete("/hotels", response_model=ClearResponse)
async def clear_hotels(
    service: IHotelService = Depends(get_hotel_service),
) -> ClearResponse:
    """Delete every hotel."""
    deleted = await service.clear_hotels()
    return ClearResponse(message="All hotels deleted", data=ClearData(deleted_count=deleted))
