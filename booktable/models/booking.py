"""Data models for table bookings."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booktable.timeofday import normalize


class BookingStatus(str, Enum):
    """Status of a booking.

    New bookings start out confirmed. PENDING only arrives with imported
    booking data and can still be cancelled.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingRequest(BaseModel):
    """A customer's request to book a table."""

    model_config = ConfigDict(frozen=True)

    restaurant_id: str = Field(..., description="Restaurant to book")
    user_id: str = Field(..., description="Customer making the booking")
    user_name: str = Field("", description="Name for the booking")
    date: date
    time: str = Field(..., description="Slot time (HH:MM)")
    party_size: int = Field(..., gt=0, description="Number of people")
    table_id: str | None = Field(None, description="Specific table, if chosen")

    @field_validator("time")
    @classmethod
    def normalize_time(cls, value: str) -> str:
        return normalize(value)


class Booking(BaseModel):
    """A booked table."""

    model_config = ConfigDict(frozen=True)

    id: str
    restaurant_id: str
    restaurant_name: str
    user_id: str
    user_name: str = ""
    date: date
    time: str
    party_size: int = Field(..., gt=0)
    table_id: str
    status: BookingStatus = BookingStatus.CONFIRMED
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        """Whether the booking still holds its table."""
        return self.status != BookingStatus.CANCELLED


class BookingAnalytics(BaseModel):
    """Aggregate booking figures for the admin dashboard."""

    total_bookings: int = 0
    confirmed_bookings: int = 0
    cancelled_bookings: int = 0
    completed_bookings: int = 0
    bookings_by_day: dict[str, int] = Field(default_factory=dict)
    bookings_by_restaurant: dict[str, int] = Field(default_factory=dict)
