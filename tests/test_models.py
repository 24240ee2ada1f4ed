"""Tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from booktable.models import (
    Address,
    Booking,
    BookingRequest,
    BookingStatus,
    BusinessHours,
    DayHours,
    PriceRange,
    Restaurant,
    SearchQuery,
    Table,
    User,
    UserRole,
)

from tests.conftest import MONDAY, SUNDAY


class TestRestaurant:
    """Tests for the Restaurant model."""

    def test_create_restaurant(self):
        """Test creating a restaurant."""
        restaurant = Restaurant(
            id="r1",
            name="Test Restaurant",
            cuisine_type="Italian",
            address=Address(city="Springfield", state="IL", zip_code="62701"),
            tables=[Table(id="t1", size=4)],
        )

        assert restaurant.name == "Test Restaurant"
        assert restaurant.price_range == PriceRange.MODERATE
        assert restaurant.approved is False
        assert restaurant.largest_table() == 4
        assert restaurant.created_at is not None

    def test_restaurant_immutable(self, make_restaurant):
        """Test that restaurant is frozen/immutable."""
        restaurant = make_restaurant()

        with pytest.raises((ValidationError, AttributeError)):
            restaurant.name = "New Name"

    def test_largest_table_without_tables(self, make_restaurant):
        """Test largest_table with no tables."""
        assert make_restaurant(tables=[]).largest_table() == 0

    def test_duplicate_table_ids(self):
        """Test that two tables sharing an id are rejected."""
        with pytest.raises(ValidationError, match="Duplicate table id 't'"):
            Restaurant(
                id="r1",
                name="Test",
                cuisine_type="Thai",
                address=Address(city="A", state="B", zip_code="1"),
                tables=[Table(id="t", size=4), Table(id="t", size=4)],
            )

    def test_invalid_price_range(self):
        """Test that unknown price tiers are rejected."""
        with pytest.raises(ValidationError):
            Restaurant(
                id="r1",
                name="Test",
                cuisine_type="Thai",
                price_range="€€€€€",
                address=Address(city="A", state="B", zip_code="1"),
            )


class TestTable:
    """Tests for the Table model."""

    def test_invalid_size(self):
        """Test that a table needs at least one seat."""
        with pytest.raises(ValidationError):
            Table(id="t1", size=0)


class TestDayHours:
    """Tests for the DayHours model."""

    def test_times_are_normalized(self):
        """Test that single-digit hours are zero-padded."""
        hours = DayHours(open=True, opening_time="9:00", closing_time="17:30")

        assert hours.opening_time == "09:00"
        assert hours.is_complete is True

    def test_opening_after_closing(self):
        """Test that opening must be before closing."""
        with pytest.raises(ValidationError):
            DayHours(open=True, opening_time="22:00", closing_time="18:00")

    def test_opening_equals_closing(self):
        """Test that an empty opening range is rejected."""
        with pytest.raises(ValidationError):
            DayHours(open=True, opening_time="18:00", closing_time="18:00")

    def test_open_without_times_allowed(self):
        """Test that incomplete hours load but are not complete."""
        hours = DayHours(open=True, opening_time="18:00")

        assert hours.is_complete is False

    def test_invalid_time(self):
        """Test that malformed times are rejected."""
        with pytest.raises(ValidationError):
            DayHours(open=True, opening_time="25:00", closing_time="26:00")


class TestBusinessHours:
    """Tests for the BusinessHours model."""

    def test_for_date(self):
        """Test picking the weekday for a date."""
        monday = DayHours(open=True, opening_time="10:00", closing_time="14:00")
        hours = BusinessHours(monday=monday)

        assert hours.for_date(MONDAY) == monday
        assert hours.for_date(SUNDAY).open is False


class TestSearchQuery:
    """Tests for the SearchQuery model."""

    def test_create_query(self):
        """Test creating a search query."""
        query = SearchQuery(date=MONDAY, time="7:30", party_size=4, location="  SF ")

        assert query.time == "07:30"
        assert query.location == "SF"
        assert query.cuisine is None

    def test_blank_filters_become_none(self):
        """Test that whitespace-only filters are dropped."""
        query = SearchQuery(date=MONDAY, time="19:00", party_size=2, cuisine="   ")

        assert query.cuisine is None

    def test_invalid_party_size(self):
        """Test that invalid party size raises validation error."""
        with pytest.raises(ValidationError):
            SearchQuery(date=MONDAY, time="19:00", party_size=0)

    def test_invalid_time(self):
        """Test that invalid times raise validation error."""
        with pytest.raises(ValidationError):
            SearchQuery(date=MONDAY, time="7pm", party_size=2)


class TestBooking:
    """Tests for booking models."""

    def test_request_normalizes_time(self):
        """Test that booking request times are normalized."""
        request = BookingRequest(
            restaurant_id="r1", user_id="u1", date=MONDAY, time="9:30", party_size=2
        )

        assert request.time == "09:30"
        assert request.table_id is None

    def test_is_active(self):
        """Test that only cancelled bookings release the table."""
        booking = Booking(
            id="b1",
            restaurant_id="r1",
            restaurant_name="Test",
            user_id="u1",
            date=date(2024, 6, 10),
            time="19:00",
            party_size=2,
            table_id="t1",
        )

        assert booking.status == BookingStatus.CONFIRMED
        assert booking.is_active is True
        assert booking.model_copy(update={"status": BookingStatus.CANCELLED}).is_active is False
        assert booking.model_copy(update={"status": BookingStatus.COMPLETED}).is_active is True

    def test_status_values(self):
        """Test that all expected status values exist."""
        assert BookingStatus.PENDING == "pending"
        assert BookingStatus.CONFIRMED == "confirmed"
        assert BookingStatus.CANCELLED == "cancelled"
        assert BookingStatus.COMPLETED == "completed"


class TestUser:
    """Tests for the User model."""

    def test_full_name_and_role(self):
        """Test user defaults."""
        user = User(id="u1", email="a@b.com", first_name="Ada", last_name="Lovelace")

        assert user.full_name == "Ada Lovelace"
        assert user.role == UserRole.CUSTOMER
        assert UserRole.RESTAURANT_MANAGER == "restaurantManager"
