"""Availability engine: restaurant search and bookable time slots.

Everything here is a pure function of its arguments. The catalog is passed in
explicitly and never modified, so callers can re-run a search on every input
change without coordinating with earlier calls.
"""

import logging
from collections.abc import Iterable
from datetime import date

from booktable.models import DayHours, Restaurant, SearchQuery
from booktable.timeofday import format_minutes, to_minutes

logger = logging.getLogger(__name__)

GRACE_MINUTES = 30
SLOT_INTERVAL_MINUTES = 30
NEARBY_OFFSETS = (-30, -15, 0, 15, 30)
SERVICE_WINDOW_START = "11:00"
SERVICE_WINDOW_END = "22:00"


def _opening_range(hours: DayHours) -> tuple[int, int] | None:
    """Opening and closing minutes for a day, or None when closed or incomplete."""
    if not hours.is_complete:
        return None
    try:
        return to_minutes(hours.opening_time), to_minutes(hours.closing_time)
    except ValueError:
        return None


def is_open_at(
    restaurant: Restaurant,
    day: date,
    time: str,
    grace_minutes: int = GRACE_MINUTES,
) -> bool:
    """Check whether a time falls within a restaurant's hours, give or take the grace window."""
    opening = _opening_range(restaurant.hours.for_date(day))
    if opening is None:
        return False

    try:
        requested = to_minutes(time)
    except ValueError:
        return False

    open_at, close_at = opening
    return open_at - grace_minutes <= requested <= close_at + grace_minutes


def can_seat(restaurant: Restaurant, party_size: int) -> bool:
    """True if at least one table is big enough for the party."""
    return any(table.size >= party_size for table in restaurant.tables)


def matches_location(restaurant: Restaurant, location: str | None) -> bool:
    """Match free text against city, state or zip code. Empty text matches everything."""
    if not location:
        return True

    needle = location.lower()
    address = restaurant.address
    return (
        needle in address.city.lower()
        or needle in address.state.lower()
        or location in address.zip_code
    )


def matches_cuisine(restaurant: Restaurant, cuisine: str | None) -> bool:
    """Case-insensitive exact cuisine match. Empty cuisine matches everything."""
    if not cuisine:
        return True
    return restaurant.cuisine_type.lower() == cuisine.lower()


def search_restaurants(
    catalog: Iterable[Restaurant] | None,
    query: SearchQuery,
    grace_minutes: int = GRACE_MINUTES,
) -> list[Restaurant]:
    """Find the restaurants that can take a party at the requested date and time.

    Args:
        catalog: Restaurants to search, in display order
        query: Date, time, party size and optional location/cuisine filters
        grace_minutes: Tolerance around opening and closing times

    Returns:
        The matching restaurants, in catalog order
    """
    matches = [
        restaurant
        for restaurant in catalog or ()
        if restaurant.approved
        and is_open_at(restaurant, query.date, query.time, grace_minutes)
        and can_seat(restaurant, query.party_size)
        and matches_location(restaurant, query.location)
        and matches_cuisine(restaurant, query.cuisine)
    ]

    logger.debug(
        f"Search {query.date} {query.time} party={query.party_size} "
        f"location={query.location!r} cuisine={query.cuisine!r}: {len(matches)} matches"
    )
    return matches


def generate_bookable_slots(
    restaurant: Restaurant,
    day: date,
    interval_minutes: int = SLOT_INTERVAL_MINUTES,
) -> list[str]:
    """List the slot times a restaurant offers on a date.

    Slots sit on the interval grid (":00" and ":30" by default), start no
    earlier than opening and strictly before closing.

    Args:
        restaurant: Restaurant whose hours to use
        day: Calendar date
        interval_minutes: Spacing between slots

    Returns:
        Ascending "HH:MM" strings, empty when the restaurant is closed
    """
    opening = _opening_range(restaurant.hours.for_date(day))
    if opening is None:
        return []

    open_at, close_at = opening
    # First grid point at or after opening
    start = -(-open_at // interval_minutes) * interval_minutes
    return [
        format_minutes(minutes)
        for minutes in range(start, close_at, interval_minutes)
    ]


def generate_nearby_slots(
    requested_time: str,
    window_start: str = SERVICE_WINDOW_START,
    window_end: str = SERVICE_WINDOW_END,
) -> list[str]:
    """Suggest quick-option times around a requested time.

    These ignore the restaurant's real hours and are only a display hint.
    Slots from generate_bookable_slots are the ones that can be booked.

    Args:
        requested_time: The time the user asked for
        window_start: Earliest allowed suggestion (inclusive)
        window_end: Suggestions must be before this time

    Returns:
        Ascending "HH:MM" strings within the service window
    """
    try:
        base = to_minutes(requested_time)
        lower, upper = to_minutes(window_start), to_minutes(window_end)
    except ValueError:
        logger.debug(f"Cannot suggest slots around {requested_time!r}")
        return []

    return [
        format_minutes(base + offset)
        for offset in NEARBY_OFFSETS
        if lower <= base + offset < upper
    ]
