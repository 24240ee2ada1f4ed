"""Application state shared by the HTTP handlers."""

import logging

from booktable.config import Config, get_config
from booktable.data import demo_bookings, demo_restaurants, demo_users
from booktable.services.booking_service import BookingService
from booktable.services.restaurant_service import (
    InMemoryRestaurantRepository,
    RestaurantRepository,
)
from booktable.services.user_service import UserService

logger = logging.getLogger(__name__)


class AppState:
    """Services for one running application.

    Created once at startup and handed to request handlers, so nothing reads
    the catalog from module-level globals.
    """

    def __init__(
        self,
        config: Config,
        restaurants: RestaurantRepository,
        bookings: BookingService,
        users: UserService,
    ) -> None:
        self.config = config
        self.restaurants = restaurants
        self.bookings = bookings
        self.users = users

    @classmethod
    def create(cls, config: Config | None = None) -> "AppState":
        """Build the in-memory services, seeded with demo data when enabled."""
        config = config or get_config()
        seed = config.seed_demo_data

        restaurants = InMemoryRestaurantRepository(
            demo_restaurants() if seed else [], config=config
        )
        bookings = BookingService(
            restaurants, demo_bookings() if seed else [], config=config
        )
        users = UserService(demo_users() if seed else [])

        logger.info(f"Application state ready (demo data: {'on' if seed else 'off'})")
        return cls(config=config, restaurants=restaurants, bookings=bookings, users=users)
