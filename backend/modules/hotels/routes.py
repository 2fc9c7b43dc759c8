"""
Hotel API endpoints.

Listing and detail are public; creating, updating and deleting
require authentication and ownership.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_hotel_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, SuccessResponse

from .interfaces import IHotelService
from .models import (
    CreateHotelRequest,
    HotelData,
    HotelFilters,
    HotelListData,
    HotelListResponse,
    HotelResponse,
    UpdateHotelRequest,
)

router = APIRouter()


@router.get("", response_model=HotelListResponse)
async def list_hotels(
    city: Optional[str] = Query(default=None, description="Exact city, case-insensitive"),
    min_price: Optional[float] = Query(default=None, ge=0),
    max_price: Optional[float] = Query(default=None, ge=0),
    service: IHotelService = Depends(get_hotel_service),
) -> HotelListResponse:
    """List hotels, optionally filtered by city and price range."""
    filters = HotelFilters(city=city, min_price=min_price, max_price=max_price)
    hotels = await service.list_hotels(filters)
    return HotelListResponse(
        message="Hotels retrieved successfully",
        data=HotelListData(hotels=hotels, count=len(hotels)),
    )


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(
    hotel_id: str,
    service: IHotelService = Depends(get_hotel_service),
) -> HotelResponse:
    """Get a single hotel."""
    hotel = await service.get_hotel(hotel_id)
    return HotelResponse(message="Hotel retrieved successfully", data=HotelData(hotel=hotel))


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
async def create_hotel(
    request: CreateHotelRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHotelService = Depends(get_hotel_service),
) -> HotelResponse:
    """List a new hotel owned by the current user."""
    hotel = await service.create_hotel(user.id, request)
    return HotelResponse(message="Hotel created successfully", data=HotelData(hotel=hotel))


@router.put("/{hotel_id}", response_model=HotelResponse)
async def update_hotel(
    hotel_id: str,
    request: UpdateHotelRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHotelService = Depends(get_hotel_service),
) -> HotelResponse:
    """Update a hotel the current user owns."""
    hotel = await service.update_hotel(hotel_id, user.id, request)
    return HotelResponse(message="Hotel updated successfully", data=HotelData(hotel=hotel))


@router.delete("/{hotel_id}", response_model=SuccessResponse[None])
async def delete_hotel(
    hotel_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IHotelService = Depends(get_hotel_service),
) -> SuccessResponse[None]:
    """Delete a hotel the current user owns."""
    await service.delete_hotel(hotel_id, user.id)
    return SuccessResponse[None](message="Hotel deleted successfully")
