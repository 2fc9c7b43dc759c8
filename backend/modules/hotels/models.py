"""
Hotels module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import SuccessResponse
from shared.validators import require_min_length


class CreateHotelRequest(BaseModel):
    """Request to list a new hotel."""

    name: str = Field(..., max_length=200, description="Hotel name")
    city: str = Field(..., max_length=100, description="City the hotel is in")
    address: str = Field(..., max_length=500, description="Street address")
    description: str = Field(default="", max_length=5000)
    price: float = Field(..., gt=0, description="Price per room per night")
    star_rating: int = Field(default=3, ge=1, le=5, description="Star rating (1-5)")
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_min_length(v, 2, "Hotel name must be at least 2 characters long")

    @field_validator("city", "address")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        return require_min_length(v, 1, "This field is required")


class UpdateHotelRequest(BaseModel):
    """Partial hotel update. Only provided fields are changed."""

    name: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = Field(None, max_length=5000)
    price: Optional[float] = Field(None, gt=0)
    star_rating: Optional[int] = Field(None, ge=1, le=5)
    amenities: Optional[list[str]] = None
    images: Optional[list[str]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return require_min_length(v, 2, "Hotel name must be at least 2 characters long")


class HotelFilters(BaseModel):
    """Listing filters. All optional; city matches exactly, ignoring case."""

    city: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)


class Hotel(BaseModel):
    """A stored hotel."""

    id: str
    name: str
    city: str
    address: str
    description: str = ""
    price: float
    star_rating: int = 3
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    owner: Optional[str] = Field(None, description="ID of the user who listed the hotel")
    created_at: Optional[datetime] = None


class HotelData(BaseModel):
    hotel: Hotel


class HotelListData(BaseModel):
    hotels: list[Hotel]
    count: int


class SeededHotel(BaseModel):
    id: str
    name: str
    city: str


class SeedData(BaseModel):
    count: int
    hotels: list[SeededHotel]


class ClearData(BaseModel):
    deleted_count: int


HotelResponse = SuccessResponse[HotelData]
HotelListResponse = SuccessResponse[HotelListData]
SeedResponse = SuccessResponse[SeedData]
ClearResponse = SuccessResponse[ClearData]
