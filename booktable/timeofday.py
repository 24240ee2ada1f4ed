"""Helpers for "HH:MM" time-of-day strings."""

import re

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def to_minutes(value: str) -> int:
    """Convert a time-of-day string to minutes after midnight.

    Args:
        value: Time such as "19:00" or "9:30"

    Returns:
        Minutes after midnight (0-1439)

    Raises:
        ValueError: If the value is not a valid 24-hour time
    """
    match = _TIME_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Invalid time of day: {value!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time of day: {value!r}")

    return hour * 60 + minute


def format_minutes(minutes: int) -> str:
    """Format minutes after midnight as a zero-padded "HH:MM" string."""
    hour, minute = divmod(minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def normalize(value: str) -> str:
    """Return the canonical "HH:MM" form of a time-of-day string."""
    return format_minutes(to_minutes(value))
