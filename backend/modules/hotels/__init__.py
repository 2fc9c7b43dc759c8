"""
Hotels module.

Hotel inventory: listing, detail, owner-managed CRUD and sample-data seeding.
"""

from .interfaces import IHotelService
from .models import Hotel, HotelFilters, CreateHotelRequest, UpdateHotelRequest
from .repository import HotelRepository
from .service import HotelService
from .exceptions import HotelNotFoundError, HotelAccessDeniedError, HotelsAlreadySeededError

__all__ = [
    "IHotelService",
    "Hotel",
    "HotelFilters",
    "CreateHotelRequest",
    "UpdateHotelRequest",
    "HotelRepository",
    "HotelService",
    "HotelNotFoundError",
    "HotelAccessDeniedError",
    "HotelsAlreadySeededError",
]
