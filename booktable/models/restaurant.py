"""Restaurant data models."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from booktable.timeofday import normalize, to_minutes

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class PriceRange(str, Enum):
    """Price tier of a restaurant, cheapest first."""

    BUDGET = "€"
    MODERATE = "€€"
    EXPENSIVE = "€€€"
    LUXURY = "€€€€"


class Address(BaseModel):
    """Postal address of a restaurant."""

    model_config = ConfigDict(frozen=True)

    street: str = Field("", description="Street and number")
    city: str = Field(..., description="City")
    state: str = Field(..., description="State or region")
    zip_code: str = Field(..., description="Postal code")
    country: str = Field("", description="Country")
    latitude: float | None = Field(None, description="Latitude")
    longitude: float | None = Field(None, description="Longitude")


class Contact(BaseModel):
    """Contact details of a restaurant."""

    model_config = ConfigDict(frozen=True)

    phone: str = Field("", description="Phone number")
    email: str = Field("", description="Contact email")
    website: str | None = Field(None, description="Website URL")


class DayHours(BaseModel):
    """Opening hours for a single weekday.

    A day marked open with a missing opening or closing time is accepted so
    that imperfect catalog data can still be loaded; availability checks
    treat such a day as closed.
    """

    model_config = ConfigDict(frozen=True)

    open: bool = Field(False, description="Whether the restaurant opens that day")
    opening_time: str | None = Field(None, description="Opening time (HH:MM)")
    closing_time: str | None = Field(None, description="Closing time (HH:MM)")

    @field_validator("opening_time", "closing_time")
    @classmethod
    def normalize_time(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize(value)

    @model_validator(mode="after")
    def check_order(self) -> "DayHours":
        if self.open and self.opening_time and self.closing_time:
            if to_minutes(self.opening_time) >= to_minutes(self.closing_time):
                raise ValueError(
                    f"Opening time {self.opening_time} must be before closing time {self.closing_time}"
                )
        return self

    @property
    def is_complete(self) -> bool:
        """True when the day is open and both times are known."""
        return bool(self.open and self.opening_time and self.closing_time)


class BusinessHours(BaseModel):
    """Weekly operating hours."""

    model_config = ConfigDict(frozen=True)

    monday: DayHours = Field(default_factory=DayHours)
    tuesday: DayHours = Field(default_factory=DayHours)
    wednesday: DayHours = Field(default_factory=DayHours)
    thursday: DayHours = Field(default_factory=DayHours)
    friday: DayHours = Field(default_factory=DayHours)
    saturday: DayHours = Field(default_factory=DayHours)
    sunday: DayHours = Field(default_factory=DayHours)

    def for_date(self, day: date) -> DayHours:
        """Get the hours that apply on a calendar date."""
        return getattr(self, WEEKDAYS[day.weekday()])


class Table(BaseModel):
    """A table and its seating capacity."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Table identifier")
    name: str = Field("", description="Display name")
    size: int = Field(..., gt=0, description="Number of seats")


class Review(BaseModel):
    """A customer review."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    user_name: str
    rating: float = Field(..., ge=0, le=5)
    comment: str = ""
    date: datetime


class Restaurant(BaseModel):
    """Restaurant information."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Restaurant identifier")
    name: str = Field(..., description="Restaurant name")
    description: str = Field("", description="Short description")
    cuisine_type: str = Field(..., description="Type of cuisine")
    price_range: PriceRange = Field(PriceRange.MODERATE, description="Price tier")
    address: Address
    contact: Contact = Field(default_factory=Contact)
    hours: BusinessHours = Field(default_factory=BusinessHours)
    images: list[str] = Field(default_factory=list)
    rating: float = Field(0.0, ge=0, le=5, description="Average rating")
    reviews: list[Review] = Field(default_factory=list)
    tables: list[Table] = Field(default_factory=list)
    booked_today: int = Field(0, ge=0, description="Bookings made today")
    approved: bool = Field(False, description="Visible in search once approved")
    manager_id: str | None = Field(None, description="Owning restaurant manager")
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_table_ids(self) -> "Restaurant":
        # Bookings hold a table by id
        seen = set()
        for table in self.tables:
            if table.id in seen:
                raise ValueError(f"Duplicate table id '{table.id}'")
            seen.add(table.id)
        return self

    def largest_table(self) -> int:
        """Get the seat count of the biggest table, 0 if there are none."""
        return max((table.size for table in self.tables), default=0)
