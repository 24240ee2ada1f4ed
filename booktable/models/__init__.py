"""Data models for the BookTable system."""

from booktable.models.booking import (
    Booking,
    BookingAnalytics,
    BookingRequest,
    BookingStatus,
)
from booktable.models.restaurant import (
    Address,
    BusinessHours,
    Contact,
    DayHours,
    PriceRange,
    Restaurant,
    Review,
    Table,
)
from booktable.models.search import SearchQuery
from booktable.models.user import User, UserRole

__all__ = [
    "Address",
    "Booking",
    "BookingAnalytics",
    "BookingRequest",
    "BookingStatus",
    "BusinessHours",
    "Contact",
    "DayHours",
    "PriceRange",
    "Restaurant",
    "Review",
    "SearchQuery",
    "Table",
    "User",
    "UserRole",
]
