"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from booktable.server import app
from booktable.state import AppState


@pytest.fixture
def state(config):
    """Fresh demo application state."""
    return AppState.create(config)


@pytest.fixture
def client(state):
    """Test client bound to a fresh application state."""
    app.state.booktable = state
    with TestClient(app) as client:
        yield client
    app.state.booktable = None


class TestRestaurantEndpoints:
    """Tests for search and restaurant details."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_restaurants_only_approved(self, client):
        """Test that the public list hides pending restaurants."""
        response = client.get("/restaurants")

        ids = [r["id"] for r in response.json()]
        assert ids == ["restaurant1", "restaurant2", "restaurant3"]

    def test_search(self, client):
        """Test a Monday evening search."""
        response = client.get(
            "/restaurants/search",
            params={"date": "2024-06-10", "time": "19:00", "party_size": 2},
        )

        assert response.status_code == 200
        results = response.json()
        assert [r["restaurant"]["name"] for r in results] == ["Sushi Delight", "Bistro Moderne"]
        assert results[0]["quick_slots"] == ["18:30", "18:45", "19:00", "19:15", "19:30"]

    def test_search_filters(self, client):
        """Test location and cuisine filters."""
        base = {"date": "2024-06-10", "time": "19:00", "party_size": 2}

        by_city = client.get("/restaurants/search", params={**base, "location": "new york"})
        by_cuisine = client.get("/restaurants/search", params={**base, "cuisine": "japanese"})

        assert [r["restaurant"]["id"] for r in by_city.json()] == ["restaurant3"]
        assert [r["restaurant"]["id"] for r in by_cuisine.json()] == ["restaurant2"]

    def test_search_invalid_party_size(self, client):
        """Test that out-of-range party sizes are rejected."""
        response = client.get(
            "/restaurants/search",
            params={"date": "2024-06-10", "time": "19:00", "party_size": 20},
        )

        assert response.status_code == 400
        assert "Party size" in response.json()["error"]

    def test_search_invalid_time(self, client):
        """Test that unparseable times are rejected."""
        response = client.get(
            "/restaurants/search",
            params={"date": "2024-06-10", "time": "dinner", "party_size": 2},
        )

        assert response.status_code == 400

    def test_search_catalog_offline(self, client, state):
        """Test the response when the catalog cannot be reached."""
        state.restaurants.online = False

        response = client.get(
            "/restaurants/search",
            params={"date": "2024-06-10", "time": "19:00", "party_size": 2},
        )

        assert response.status_code == 503
        assert "unavailable" in response.json()["error"]

    def test_get_restaurant(self, client):
        """Test restaurant details."""
        response = client.get("/restaurants/restaurant2")

        assert response.status_code == 200
        assert response.json()["name"] == "Sushi Delight"

    def test_get_restaurant_not_found(self, client):
        """Test an unknown restaurant."""
        response = client.get("/restaurants/nope")

        assert response.status_code == 404
        assert "not found" in response.json()["error"]

    def test_slots(self, client):
        """Test the bookable slots of a restaurant."""
        response = client.get("/restaurants/restaurant3/slots", params={"date": "2024-06-10"})

        assert response.status_code == 200
        assert response.json()["slots"] == [
            "18:00",
            "18:30",
            "19:00",
            "19:30",
            "20:00",
            "20:30",
            "21:00",
            "21:30",
        ]

    def test_slots_closed_day(self, client):
        """Test a day the restaurant is closed."""
        response = client.get("/restaurants/restaurant1/slots", params={"date": "2024-06-10"})

        assert response.json()["slots"] == []


class TestManagementEndpoints:
    """Tests for manager and admin endpoints."""

    def test_add_approve_and_search(self, client):
        """Test that a new restaurant shows up in search after approval."""
        created = client.post(
            "/restaurants",
            json={
                "name": "Noodle Bar",
                "cuisine_type": "Chinese",
                "address": {"city": "Austin", "state": "TX", "zip_code": "73301"},
                "hours": {"monday": {"open": True, "opening_time": "11:00", "closing_time": "21:00"}},
                "tables": [{"id": "nb1", "size": 4}],
                "manager_id": "manager9",
            },
        )
        assert created.status_code == 201
        restaurant_id = created.json()["id"]

        params = {"date": "2024-06-10", "time": "12:00", "party_size": 2, "location": "austin"}
        assert client.get("/restaurants/search", params=params).json() == []

        pending = client.get("/admin/restaurants/pending").json()
        assert restaurant_id in [r["id"] for r in pending]

        approved = client.post(f"/admin/restaurants/{restaurant_id}/approve")
        assert approved.json()["approved"] is True

        results = client.get("/restaurants/search", params=params).json()
        assert [r["restaurant"]["id"] for r in results] == [restaurant_id]

    def test_add_invalid_restaurant(self, client):
        """Test that invalid restaurant data is rejected."""
        response = client.post("/restaurants", json={"name": "No address"})

        assert response.status_code == 400

    def test_duplicate_table_ids(self, client):
        """Test that tables sharing an id are rejected on create and update."""
        tables = [{"id": "nb1", "size": 4}, {"id": "nb1", "size": 4}]

        created = client.post(
            "/restaurants",
            json={
                "name": "Noodle Bar",
                "cuisine_type": "Chinese",
                "address": {"city": "Austin", "state": "TX", "zip_code": "73301"},
                "tables": tables,
            },
        )
        updated = client.patch("/restaurants/restaurant2", json={"tables": tables})

        assert created.status_code == 400
        assert "Duplicate table id" in created.json()["error"]
        assert updated.status_code == 400
        assert [t["id"] for t in client.get("/restaurants/restaurant2").json()["tables"]] == [
            "table5",
            "table6",
        ]

    def test_update_cannot_approve(self, client):
        """Test that managers cannot approve their own restaurant."""
        response = client.patch(
            "/restaurants/restaurant4", json={"approved": True, "description": "Updated"}
        )

        assert response.status_code == 200
        assert response.json()["approved"] is False
        assert response.json()["description"] == "Updated"

    def test_remove_restaurant(self, client):
        """Test removing a restaurant."""
        assert client.delete("/admin/restaurants/restaurant4").status_code == 204
        assert client.get("/restaurants/restaurant4").status_code == 404

    def test_manager_restaurants(self, client):
        """Test listing a manager's restaurants."""
        response = client.get("/managers/manager2/restaurants")

        assert [r["id"] for r in response.json()] == ["restaurant2"]

    def test_analytics(self, client):
        """Test the admin analytics."""
        response = client.get("/admin/analytics")

        assert response.status_code == 200
        assert response.json()["total_bookings"] == 3


class TestBookingEndpoints:
    """Tests for booking endpoints."""

    booking = {
        "restaurant_id": "restaurant2",
        "user_id": "user2",
        "user_name": "Sarah Miller",
        "date": "2024-06-10",
        "time": "19:00",
        "party_size": 6,
    }

    def test_create_and_conflict(self, client):
        """Test that the only six-seat table cannot be booked twice."""
        first = client.post("/bookings", json=self.booking)
        second = client.post("/bookings", json=self.booking)

        assert first.status_code == 201
        assert first.json()["table_id"] == "table6"
        assert first.json()["status"] == "confirmed"
        assert second.status_code == 409

    def test_cancel_and_rebook(self, client):
        """Test that cancelling frees the slot."""
        booking_id = client.post("/bookings", json=self.booking).json()["id"]

        cancelled = client.post(f"/bookings/{booking_id}/cancel")
        rebooked = client.post("/bookings", json=self.booking)

        assert cancelled.json()["status"] == "cancelled"
        assert rebooked.status_code == 201

    def test_booking_outside_hours(self, client):
        """Test booking a time the restaurant has no slot for."""
        response = client.post("/bookings", json={**self.booking, "time": "16:00"})

        assert response.status_code == 400

    def test_invalid_booking_body(self, client):
        """Test request validation."""
        response = client.post("/bookings", json={**self.booking, "party_size": 0})

        assert response.status_code == 422

    def test_get_and_list_bookings(self, client):
        """Test the confirmation and history views."""
        booking_id = client.post("/bookings", json=self.booking).json()["id"]

        assert client.get(f"/bookings/{booking_id}").json()["id"] == booking_id
        user_bookings = client.get("/users/user2/bookings").json()
        assert booking_id in [b["id"] for b in user_bookings]
        restaurant_bookings = client.get("/restaurants/restaurant2/bookings").json()
        assert booking_id in [b["id"] for b in restaurant_bookings]

    def test_party_above_limit(self, client, state):
        """Test that bookings use the same party size limit as search."""
        response = client.post("/bookings", json={**self.booking, "party_size": 20})

        assert response.status_code == 400
        assert "between 1 and 12" in response.json()["error"]

        state.config = state.config.model_copy(update={"max_party_size": 4})
        response = client.post("/bookings", json=self.booking)

        assert response.status_code == 400
        assert "between 1 and 4" in response.json()["error"]

    def test_unknown_user(self, client):
        """Test booking for a user that does not exist."""
        response = client.post("/bookings", json={**self.booking, "user_id": "nobody"})

        assert response.status_code == 404
        assert client.get("/users/nobody/bookings").json() == []

    def test_cancel_completed_booking(self, client):
        """Test that completed and cancelled bookings cannot be cancelled."""
        completed = client.post("/bookings/booking1/cancel")
        cancelled = client.post("/bookings/booking2/cancel")

        assert completed.status_code == 409
        assert "completed" in completed.json()["error"]
        assert cancelled.status_code == 409
        assert client.get("/bookings/booking1").json()["status"] == "completed"

    def test_unknown_booking(self, client):
        """Test an unknown booking."""
        assert client.post("/bookings/missing/cancel").status_code == 404


class TestAuthEndpoints:
    """Tests for login and registration."""

    def test_login(self, client):
        """Test logging in as an admin."""
        response = client.post(
            "/auth/login",
            json={"email": "admin@booktable.com", "password": "x", "role": "admin"},
        )

        assert response.status_code == 200
        assert response.json()["id"] == "admin1"

    def test_login_failure(self, client):
        """Test an unknown user."""
        response = client.post(
            "/auth/login", json={"email": "who@example.com", "role": "customer"}
        )

        assert response.status_code == 401

    def test_register(self, client):
        """Test registration and duplicate emails."""
        details = {"email": "kim@example.com", "first_name": "Kim", "last_name": "Lee"}

        assert client.post("/auth/register", json=details).status_code == 201
        assert client.post("/auth/register", json=details).status_code == 400
