"""Demo data for BookTable."""

from booktable.data.seed import demo_bookings, demo_restaurants, demo_users

__all__ = ["demo_bookings", "demo_restaurants", "demo_users"]
