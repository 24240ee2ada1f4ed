"""Demo catalog, users and bookings loaded at startup."""

from datetime import date, datetime

from booktable.models import (
    Address,
    Booking,
    BookingStatus,
    BusinessHours,
    Contact,
    DayHours,
    PriceRange,
    Restaurant,
    Review,
    Table,
    User,
    UserRole,
)

CLOSED = DayHours(open=False)


def _open(opening: str, closing: str) -> DayHours:
    return DayHours(open=True, opening_time=opening, closing_time=closing)


def demo_restaurants() -> list[Restaurant]:
    """Build the demo catalog."""
    return [
        Restaurant(
            id="restaurant1",
            name="Bella Italia",
            description="Family-run trattoria with handmade pasta.",
            cuisine_type="Italian",
            price_range=PriceRange.MODERATE,
            address=Address(
                street="123 Main St",
                city="San Francisco",
                state="CA",
                zip_code="94102",
                country="USA",
            ),
            contact=Contact(phone="(415) 555-1234", email="info@bellaitalia.com"),
            hours=BusinessHours(
                monday=CLOSED,
                tuesday=_open("11:00", "22:00"),
                wednesday=_open("11:00", "22:00"),
                thursday=_open("11:00", "22:00"),
                friday=_open("11:00", "23:00"),
                saturday=_open("12:00", "23:00"),
                sunday=_open("12:00", "21:00"),
            ),
            rating=4.5,
            reviews=[
                Review(
                    id="review1",
                    user_id="user1",
                    user_name="John Doe",
                    rating=5,
                    comment="Best carbonara in town.",
                    date=datetime(2024, 3, 2),
                ),
            ],
            tables=[
                Table(id="table1", name="Window 1", size=2),
                Table(id="table2", name="Window 2", size=2),
                Table(id="table3", name="Booth", size=4),
                Table(id="table4", name="Family", size=8),
            ],
            booked_today=12,
            approved=True,
            manager_id="manager1",
            created_at=datetime(2022, 11, 5),
        ),
        Restaurant(
            id="restaurant2",
            name="Sushi Delight",
            description="Omakase and classic rolls.",
            cuisine_type="Japanese",
            price_range=PriceRange.EXPENSIVE,
            address=Address(
                street="456 Market St",
                city="San Francisco",
                state="CA",
                zip_code="94105",
                country="USA",
            ),
            contact=Contact(phone="(415) 555-5678", email="hello@sushidelight.com"),
            hours=BusinessHours(
                monday=_open("17:00", "22:00"),
                tuesday=_open("17:00", "22:00"),
                wednesday=_open("17:00", "22:00"),
                thursday=_open("17:00", "22:00"),
                friday=_open("17:00", "23:00"),
                saturday=_open("17:00", "23:00"),
                sunday=CLOSED,
            ),
            rating=4.8,
            tables=[
                Table(id="table5", name="Counter", size=2),
                Table(id="table6", name="Tatami", size=6),
            ],
            booked_today=8,
            approved=True,
            manager_id="manager2",
            created_at=datetime(2022, 10, 15),
        ),
        Restaurant(
            id="restaurant3",
            name="Bistro Moderne",
            description="Contemporary French bistro.",
            cuisine_type="French",
            price_range=PriceRange.LUXURY,
            address=Address(
                street="789 Broadway",
                city="New York",
                state="NY",
                zip_code="10003",
                country="USA",
            ),
            contact=Contact(
                phone="(212) 555-9012",
                email="contact@bistromoderne.com",
                website="https://bistromoderne.example.com",
            ),
            hours=BusinessHours(
                monday=_open("18:00", "22:00"),
                tuesday=_open("18:00", "22:00"),
                wednesday=_open("18:00", "22:00"),
                thursday=_open("18:00", "22:00"),
                friday=_open("18:00", "23:30"),
                saturday=_open("18:00", "23:30"),
                sunday=CLOSED,
            ),
            rating=4.6,
            tables=[
                Table(id="table7", name="Salon 1", size=4),
                Table(id="table8", name="Salon 2", size=4),
            ],
            booked_today=5,
            approved=True,
            manager_id="manager3",
            created_at=datetime(2023, 1, 2),
        ),
        Restaurant(
            id="restaurant4",
            name="Taco Fiesta",
            description="Street tacos and mezcal.",
            cuisine_type="Mexican",
            price_range=PriceRange.BUDGET,
            address=Address(
                street="12 Mission St",
                city="San Francisco",
                state="CA",
                zip_code="94110",
                country="USA",
            ),
            hours=BusinessHours(
                monday=_open("11:00", "21:00"),
                tuesday=_open("11:00", "21:00"),
                wednesday=_open("11:00", "21:00"),
                thursday=_open("11:00", "21:00"),
                friday=_open("11:00", "22:00"),
                saturday=_open("11:00", "22:00"),
                sunday=_open("11:00", "20:00"),
            ),
            tables=[Table(id="table9", name="Patio", size=4)],
            approved=False,
            manager_id="manager1",
            created_at=datetime(2024, 5, 20),
        ),
    ]


def demo_users() -> list[User]:
    """Build the demo user directory."""
    return [
        User(
            id="user1",
            email="john@example.com",
            first_name="John",
            last_name="Doe",
            created_at=datetime(2023, 1, 15),
        ),
        User(
            id="user2",
            email="sarah@example.com",
            first_name="Sarah",
            last_name="Miller",
            created_at=datetime(2023, 2, 20),
        ),
        User(
            id="manager1",
            email="mario@bellaitalia.com",
            first_name="Mario",
            last_name="Rossi",
            role=UserRole.RESTAURANT_MANAGER,
            created_at=datetime(2022, 11, 5),
        ),
        User(
            id="manager2",
            email="takashi@sushidelight.com",
            first_name="Takashi",
            last_name="Yamamoto",
            role=UserRole.RESTAURANT_MANAGER,
            created_at=datetime(2022, 10, 15),
        ),
        User(
            id="manager3",
            email="pierre@bistromoderne.com",
            first_name="Pierre",
            last_name="Dupont",
            role=UserRole.RESTAURANT_MANAGER,
            created_at=datetime(2023, 1, 2),
        ),
        User(
            id="admin1",
            email="admin@booktable.com",
            first_name="Admin",
            last_name="User",
            role=UserRole.ADMIN,
            created_at=datetime(2022, 1, 1),
        ),
    ]


def demo_bookings() -> list[Booking]:
    """Build the demo booking history."""
    return [
        Booking(
            id="booking1",
            restaurant_id="restaurant1",
            restaurant_name="Bella Italia",
            user_id="user1",
            user_name="John Doe",
            date=date(2024, 6, 14),
            time="19:00",
            party_size=2,
            table_id="table1",
            status=BookingStatus.COMPLETED,
            created_at=datetime(2024, 6, 1),
        ),
        Booking(
            id="booking2",
            restaurant_id="restaurant2",
            restaurant_name="Sushi Delight",
            user_id="user1",
            user_name="John Doe",
            date=date(2024, 7, 5),
            time="20:00",
            party_size=4,
            table_id="table6",
            status=BookingStatus.CANCELLED,
            created_at=datetime(2024, 6, 20),
        ),
        Booking(
            id="booking3",
            restaurant_id="restaurant1",
            restaurant_name="Bella Italia",
            user_id="user2",
            user_name="Sarah Miller",
            date=date(2024, 7, 12),
            time="18:30",
            party_size=4,
            table_id="table3",
            status=BookingStatus.CONFIRMED,
            created_at=datetime(2024, 7, 1),
        ),
    ]
