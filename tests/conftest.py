"""Shared fixtures for BookTable tests."""

from datetime import date

import pytest

from booktable.config import Config
from booktable.models import Address, BusinessHours, DayHours, Restaurant, Table

# 2024-06-10 is a Monday
MONDAY = date(2024, 6, 10)
TUESDAY = date(2024, 6, 11)
SUNDAY = date(2024, 6, 9)


def build_restaurant(
    restaurant_id: str = "r1",
    *,
    monday: DayHours | None = None,
    tables: list[int] | None = None,
    approved: bool = True,
    cuisine_type: str = "Italian",
    city: str = "San Francisco",
    state: str = "CA",
    zip_code: str = "94102",
) -> Restaurant:
    """Build a restaurant that is only open on Mondays (18:00-22:00 by default)."""
    if monday is None:
        monday = DayHours(open=True, opening_time="18:00", closing_time="22:00")
    sizes = [4] if tables is None else tables

    return Restaurant(
        id=restaurant_id,
        name=f"Restaurant {restaurant_id}",
        cuisine_type=cuisine_type,
        address=Address(city=city, state=state, zip_code=zip_code),
        hours=BusinessHours(monday=monday),
        tables=[
            Table(id=f"{restaurant_id}-t{i}", name=f"Table {i}", size=size)
            for i, size in enumerate(sizes, start=1)
        ],
        approved=approved,
    )


@pytest.fixture
def make_restaurant():
    """Factory for test restaurants."""
    return build_restaurant


@pytest.fixture
def config():
    """Config with demo data and no artificial latency."""
    return Config(simulated_latency_ms=0, seed_demo_data=True)
