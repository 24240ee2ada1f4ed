"""Booking management with table assignment and double-booking checks."""

import asyncio
import logging
import uuid
from collections import Counter

from booktable.availability import generate_bookable_slots
from booktable.config import Config, get_config
from booktable.exceptions import (
    BookingConflictError,
    BookingNotCancellableError,
    BookingNotFoundError,
    SlotUnavailableError,
)
from booktable.models import (
    Booking,
    BookingAnalytics,
    BookingRequest,
    BookingStatus,
    Restaurant,
    Table,
)
from booktable.services.restaurant_service import RestaurantRepository

logger = logging.getLogger(__name__)

CANCELLABLE_STATUSES = {BookingStatus.PENDING, BookingStatus.CONFIRMED}


class BookingService:
    """Creates, cancels and reports on bookings.

    At most one non-cancelled booking may hold a given (table, date, time).
    The check and the insert run under a lock so two concurrent requests
    cannot both claim the same table.
    """

    def __init__(
        self,
        restaurants: RestaurantRepository,
        bookings: list[Booking] | None = None,
        config: Config | None = None,
    ) -> None:
        """Initialize the booking service.

        Args:
            restaurants: Repository used to look up the booked restaurant
            bookings: Existing bookings
            config: Application config (defaults to the global config)
        """
        self.config = config or get_config()
        self.restaurants = restaurants
        self._bookings: list[Booking] = list(bookings or [])
        self._lock = asyncio.Lock()
        logger.info(f"Initialized booking service with {len(self._bookings)} bookings")

    @staticmethod
    def generate_booking_id() -> str:
        """Generate a unique booking identifier."""
        return f"booking-{uuid.uuid4().hex[:8]}"

    def _taken_tables(self, restaurant_id: str, request: BookingRequest) -> set[str]:
        return {
            booking.table_id
            for booking in self._bookings
            if booking.is_active
            and booking.restaurant_id == restaurant_id
            and booking.date == request.date
            and booking.time == request.time
        }

    @staticmethod
    def _pick_table(
        restaurant: Restaurant, request: BookingRequest, taken: set[str]
    ) -> Table:
        """Choose the table for a request.

        A requested table must exist, seat the party and be free. Otherwise the
        smallest free table that fits is used.
        """
        if request.table_id is not None:
            table = next((t for t in restaurant.tables if t.id == request.table_id), None)
            if table is None:
                raise SlotUnavailableError(
                    f"Table '{request.table_id}' does not belong to {restaurant.name}"
                )
            if table.size < request.party_size:
                raise SlotUnavailableError(
                    f"Table '{table.id}' seats {table.size}, party is {request.party_size}"
                )
            if table.id in taken:
                raise BookingConflictError(
                    f"Table '{table.id}' is already booked on {request.date} at {request.time}"
                )
            return table

        fitting = sorted(
            (t for t in restaurant.tables if t.size >= request.party_size),
            key=lambda t: t.size,
        )
        if not fitting:
            raise SlotUnavailableError(
                f"{restaurant.name} has no table for {request.party_size} people"
            )

        for table in fitting:
            if table.id not in taken:
                return table

        raise BookingConflictError(
            f"No table for {request.party_size} left at {restaurant.name} "
            f"on {request.date} at {request.time}"
        )

    async def create_booking(self, request: BookingRequest) -> Booking:
        """Book a table.

        Args:
            request: Restaurant, customer, date, time and party size

        Returns:
            The confirmed booking

        Raises:
            RestaurantNotFoundError: If the restaurant does not exist
            SlotUnavailableError: If the restaurant cannot take the party at that time
            BookingConflictError: If every fitting table is already booked
        """
        restaurant = await self.restaurants.get_restaurant(request.restaurant_id)

        if not restaurant.approved:
            raise SlotUnavailableError(f"{restaurant.name} is not accepting bookings yet")

        if request.party_size > restaurant.largest_table():
            raise SlotUnavailableError(
                f"{restaurant.name} has no table for {request.party_size} people"
            )

        slots = generate_bookable_slots(
            restaurant, request.date, interval_minutes=self.config.slot_interval_minutes
        )
        if request.time not in slots:
            raise SlotUnavailableError(
                f"{restaurant.name} has no {request.time} slot on {request.date}"
            )

        async with self._lock:
            taken = self._taken_tables(restaurant.id, request)
            table = self._pick_table(restaurant, request, taken)

            booking = Booking(
                id=self.generate_booking_id(),
                restaurant_id=restaurant.id,
                restaurant_name=restaurant.name,
                user_id=request.user_id,
                user_name=request.user_name,
                date=request.date,
                time=request.time,
                party_size=request.party_size,
                table_id=table.id,
                status=BookingStatus.CONFIRMED,
            )
            self._bookings.append(booking)

        logger.info(
            f"Created booking {booking.id}: {restaurant.name} table {table.id} "
            f"on {booking.date} at {booking.time} for {booking.party_size}"
        )
        return booking

    def _index_of(self, booking_id: str) -> int:
        for index, booking in enumerate(self._bookings):
            if booking.id == booking_id:
                return index
        raise BookingNotFoundError(f"Booking '{booking_id}' not found")

    async def get_booking(self, booking_id: str) -> Booking:
        """Get a booking by id.

        Raises:
            BookingNotFoundError: If no booking has that id
        """
        return self._bookings[self._index_of(booking_id)]

    async def cancel_booking(self, booking_id: str) -> Booking:
        """Cancel a pending or confirmed booking, freeing its table.

        Raises:
            BookingNotFoundError: If no booking has that id
            BookingNotCancellableError: If the booking is already cancelled or completed
        """
        async with self._lock:
            index = self._index_of(booking_id)
            current = self._bookings[index]
            if current.status not in CANCELLABLE_STATUSES:
                raise BookingNotCancellableError(
                    f"Booking '{booking_id}' is {current.status.value} and cannot be cancelled"
                )
            cancelled = current.model_copy(
                update={"status": BookingStatus.CANCELLED}
            )
            self._bookings[index] = cancelled

        logger.info(f"Cancelled booking {booking_id}")
        return cancelled

    async def list_user_bookings(self, user_id: str) -> list[Booking]:
        """Get a customer's bookings."""
        return [b for b in self._bookings if b.user_id == user_id]

    async def list_restaurant_bookings(self, restaurant_id: str) -> list[Booking]:
        """Get a restaurant's bookings."""
        return [b for b in self._bookings if b.restaurant_id == restaurant_id]

    async def get_analytics(self) -> BookingAnalytics:
        """Summarize all bookings for the admin dashboard."""
        statuses = Counter(b.status for b in self._bookings)
        by_day = Counter(b.date.isoformat() for b in self._bookings)
        by_restaurant = Counter(b.restaurant_name for b in self._bookings)

        return BookingAnalytics(
            total_bookings=len(self._bookings),
            confirmed_bookings=statuses[BookingStatus.CONFIRMED],
            cancelled_bookings=statuses[BookingStatus.CANCELLED],
            completed_bookings=statuses[BookingStatus.COMPLETED],
            bookings_by_day=dict(by_day),
            bookings_by_restaurant=dict(by_restaurant),
        )
