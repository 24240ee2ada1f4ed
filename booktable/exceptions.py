"""Errors raised by BookTable services."""


class BookTableError(Exception):
    """Base class for BookTable service errors."""


class CatalogUnavailableError(BookTableError, ConnectionError):
    """The restaurant catalog could not be reached."""


class RestaurantNotFoundError(BookTableError, LookupError):
    """No restaurant with the given id."""


class BookingNotFoundError(BookTableError, LookupError):
    """No booking with the given id."""


class SlotUnavailableError(BookTableError, ValueError):
    """The requested time or party size cannot be served."""


class BookingConflictError(BookTableError):
    """The table is already booked for that date and time."""


class AuthenticationError(BookTableError):
    """Login failed."""


class UserNotFoundError(BookTableError, LookupError):
    """No user with the given id."""


class BookingNotCancellableError(BookTableError):
    """The booking is already cancelled or completed."""
