"""FastAPI server exposing restaurant search, details, bookings and dashboards."""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import Any

import uvicorn
from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from booktable.availability import generate_bookable_slots, generate_nearby_slots
from booktable.config import get_config, setup_logging
from booktable.exceptions import (
    AuthenticationError,
    BookingConflictError,
    BookingNotCancellableError,
    BookingNotFoundError,
    BookTableError,
    CatalogUnavailableError,
    RestaurantNotFoundError,
    SlotUnavailableError,
    UserNotFoundError,
)
from booktable.models import (
    Booking,
    BookingAnalytics,
    BookingRequest,
    Restaurant,
    SearchQuery,
    User,
    UserRole,
)
from booktable.services.restaurant_service import PROTECTED_FIELDS
from booktable.state import AppState
from booktable.validators import InputValidator

logger = logging.getLogger(__name__)

# Status codes for service errors; anything else is a 500
ERROR_STATUS = {
    RestaurantNotFoundError: 404,
    BookingNotFoundError: 404,
    UserNotFoundError: 404,
    SlotUnavailableError: 400,
    BookingConflictError: 409,
    BookingNotCancellableError: 409,
    AuthenticationError: 401,
    CatalogUnavailableError: 503,
}


class SearchResult(BaseModel):
    """A search hit with advisory quick-option times."""

    restaurant: Restaurant
    quick_slots: list[str] = Field(
        default_factory=list,
        description="Suggested times near the request; not checked against opening hours",
    )


class SlotsResponse(BaseModel):
    """Bookable slots for one restaurant and date."""

    restaurant_id: str
    date: date
    slots: list[str]


class LoginRequest(BaseModel):
    email: str
    password: str = ""
    role: UserRole = UserRole.CUSTOMER


class RegisterRequest(BaseModel):
    email: str
    password: str = ""
    first_name: str
    last_name: str


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan manager."""
    config = get_config()
    logger.info(f"Starting BookTable API on {config.server_host}:{config.server_port}")

    # Store services in app state for dependency injection
    if getattr(_app.state, "booktable", None) is None:
        _app.state.booktable = AppState.create(config)

    yield

    logger.info("Shutting down BookTable API")


app = FastAPI(
    title="BookTable API",
    description="Restaurant search and table booking",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development/testing
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookTableError)
async def booktable_error_handler(_request: Request, exc: BookTableError) -> JSONResponse:
    """Translate service errors into JSON responses."""
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        500,
    )

    if isinstance(exc, CatalogUnavailableError):
        logger.error(f"Catalog unavailable: {exc}")
        message = "Restaurant data is temporarily unavailable. Please try again later."
    else:
        logger.info(f"Request failed ({status_code}): {exc}")
        message = str(exc)

    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def get_state(request: Request) -> AppState:
    """Dependency to get the application state.

    Raises:
        HTTPException: If the services are not initialized
    """
    state = getattr(request.app.state, "booktable", None)
    if state is None:
        raise HTTPException(status_code=503, detail="Services not initialized yet")
    return state


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "booktable-api"}


@app.get("/restaurants", response_model=list[Restaurant])
async def list_restaurants(state: AppState = Depends(get_state)):
    """List approved restaurants."""
    return await state.restaurants.fetch_approved()


@app.get("/restaurants/search", response_model=list[SearchResult])
async def search_restaurants(
    date: date = Query(..., description="Requested date (YYYY-MM-DD)"),
    time: str = Query(..., description="Requested time (HH:MM)"),
    party_size: int = Query(..., description="Number of people"),
    location: str | None = Query(None, description="City, state or zip code"),
    cuisine: str | None = Query(None, description="Cuisine type"),
    state: AppState = Depends(get_state),
):
    """Search restaurants that can seat a party at a date and time.

    Each result carries quick-option times around the requested time. Those
    are a display hint only; /restaurants/{id}/slots lists what can be booked.
    """
    is_valid, error = InputValidator.validate_search(
        party_size, location, cuisine, state.config
    )
    if not is_valid:
        return _bad_request(error)

    try:
        query = SearchQuery(
            date=date, time=time, party_size=party_size, location=location, cuisine=cuisine
        )
    except ValidationError as e:
        return _bad_request(f"Invalid search: {e.errors()[0]['msg']}")

    config = state.config
    matches = await state.restaurants.search(query, grace_minutes=config.grace_minutes)
    quick_slots = generate_nearby_slots(
        query.time, config.service_window_start, config.service_window_end
    )

    logger.info(f"Search returned {len(matches)} restaurants")
    return [SearchResult(restaurant=r, quick_slots=quick_slots) for r in matches]


@app.get("/restaurants/{restaurant_id}", response_model=Restaurant)
async def get_restaurant(restaurant_id: str, state: AppState = Depends(get_state)):
    """Get restaurant details."""
    return await state.restaurants.get_restaurant(restaurant_id)


@app.get("/restaurants/{restaurant_id}/slots", response_model=SlotsResponse)
async def get_slots(
    restaurant_id: str,
    date: date = Query(..., description="Date to list slots for (YYYY-MM-DD)"),
    state: AppState = Depends(get_state),
):
    """List the bookable slots of a restaurant on a date."""
    restaurant = await state.restaurants.get_restaurant(restaurant_id)
    slots = generate_bookable_slots(
        restaurant, date, interval_minutes=state.config.slot_interval_minutes
    )
    return SlotsResponse(restaurant_id=restaurant.id, date=date, slots=slots)


@app.get("/restaurants/{restaurant_id}/bookings", response_model=list[Booking])
async def list_restaurant_bookings(restaurant_id: str, state: AppState = Depends(get_state)):
    """List a restaurant's bookings (manager dashboard)."""
    await state.restaurants.get_restaurant(restaurant_id)
    return await state.bookings.list_restaurant_bookings(restaurant_id)


@app.post("/restaurants", response_model=Restaurant, status_code=201)
async def add_restaurant(
    data: dict[str, Any] = Body(...),
    state: AppState = Depends(get_state),
):
    """Register a new restaurant. It stays hidden from search until approved."""
    try:
        return await state.restaurants.add_restaurant(data)
    except ValidationError as e:
        return _bad_request(f"Invalid restaurant: {e.errors()[0]['msg']}")


@app.patch("/restaurants/{restaurant_id}", response_model=Restaurant)
async def update_restaurant(
    restaurant_id: str,
    updates: dict[str, Any] = Body(...),
    state: AppState = Depends(get_state),
):
    """Update a restaurant's details. Approval is only changed by admins."""
    allowed = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}
    try:
        return await state.restaurants.update_restaurant(restaurant_id, allowed)
    except ValidationError as e:
        return _bad_request(f"Invalid restaurant: {e.errors()[0]['msg']}")


@app.get("/managers/{manager_id}/restaurants", response_model=list[Restaurant])
async def list_manager_restaurants(manager_id: str, state: AppState = Depends(get_state)):
    """List the restaurants a manager owns."""
    return await state.restaurants.list_by_manager(manager_id)


@app.get("/admin/restaurants/pending", response_model=list[Restaurant])
async def list_pending_restaurants(state: AppState = Depends(get_state)):
    """List restaurants waiting for approval."""
    return await state.restaurants.list_pending()


@app.post("/admin/restaurants/{restaurant_id}/approve", response_model=Restaurant)
async def approve_restaurant(restaurant_id: str, state: AppState = Depends(get_state)):
    """Approve a restaurant so it shows up in search."""
    return await state.restaurants.approve_restaurant(restaurant_id)


@app.delete("/admin/restaurants/{restaurant_id}", status_code=204)
async def remove_restaurant(restaurant_id: str, state: AppState = Depends(get_state)):
    """Remove a restaurant from the catalog."""
    await state.restaurants.remove_restaurant(restaurant_id)


@app.get("/admin/analytics", response_model=BookingAnalytics)
async def booking_analytics(state: AppState = Depends(get_state)):
    """Booking totals for the admin dashboard."""
    return await state.bookings.get_analytics()


@app.post("/bookings", response_model=Booking, status_code=201)
async def create_booking(booking: BookingRequest, state: AppState = Depends(get_state)):
    """Book a table at one of the restaurant's slots."""
    is_valid, error = InputValidator.validate_party_size(booking.party_size, state.config)
    if not is_valid:
        return _bad_request(error)

    if state.users.get_user(booking.user_id) is None:
        raise UserNotFoundError(f"User '{booking.user_id}' not found")

    return await state.bookings.create_booking(booking)


@app.get("/bookings/{booking_id}", response_model=Booking)
async def get_booking(booking_id: str, state: AppState = Depends(get_state)):
    """Get a booking (confirmation page)."""
    return await state.bookings.get_booking(booking_id)


@app.post("/bookings/{booking_id}/cancel", response_model=Booking)
async def cancel_booking(booking_id: str, state: AppState = Depends(get_state)):
    """Cancel a booking."""
    return await state.bookings.cancel_booking(booking_id)


@app.get("/users/{user_id}/bookings", response_model=list[Booking])
async def list_user_bookings(user_id: str, state: AppState = Depends(get_state)):
    """List a customer's bookings."""
    return await state.bookings.list_user_bookings(user_id)


@app.post("/auth/login", response_model=User)
async def login(credentials: LoginRequest, state: AppState = Depends(get_state)):
    """Log in with an email and role. Passwords are not checked."""
    return await state.users.login(credentials.email, credentials.role, credentials.password)


@app.post("/auth/register", response_model=User, status_code=201)
async def register(details: RegisterRequest, state: AppState = Depends(get_state)):
    """Create a customer account."""
    try:
        return await state.users.register(
            details.email, details.first_name, details.last_name, details.password
        )
    except ValueError as e:
        return _bad_request(str(e))


def run_server():
    """Run the FastAPI server using uvicorn.

    This is the main entry point for the server.
    """
    setup_logging()
    config = get_config()

    uvicorn.run(
        "booktable.server:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,  # Set to True for development
    )


if __name__ == "__main__":
    run_server()
