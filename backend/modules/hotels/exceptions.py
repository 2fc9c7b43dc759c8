"""
Hotels module exceptions.
"""

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class HotelNotFoundError(NotFoundError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: str):
        super().__init__(
            "Hotel not found",
            code="HOTEL_NOT_FOUND",
            details={"hotel_id": hotel_id},
        )


class HotelAccessDeniedError(AuthorizationError):
    """Raised when a user tries to modify a hotel they don't own."""

    def __init__(self, hotel_id: str, user_id: str):
        super().__init__(
            "Not authorized to modify this hotel",
            code="HOTEL_ACCESS_DENIED",
            details={"hotel_id": hotel_id, "user_id": user_id},
        )


class HotelsAlreadySeededError(ConflictError):
    """Raised when seeding a collection that already holds hotels."""

    def __init__(self, count: int):
        super().__init__(
            f"Database already has {count} hotels. "
            "Clear database first if you want to reseed.",
            code="HOTELS_ALREADY_SEEDED",
            details={"count": count},
        )
