"""Services for the BookTable system."""

from booktable.services.booking_service import BookingService
from booktable.services.restaurant_service import (
    InMemoryRestaurantRepository,
    RestaurantRepository,
)
from booktable.services.user_service import UserService

__all__ = [
    "BookingService",
    "InMemoryRestaurantRepository",
    "RestaurantRepository",
    "UserService",
]
