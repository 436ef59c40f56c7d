"""
End-to-End Integration Tests for Flight Booking.

These tests run the complete stack against the bundled dataset:
- JsonRouteDataProvider (JSON -> validated frames -> Route objects)
- InMemoryRouteRepository (load-once store)
- Direct, connection and booking services
- FlightBookingApp (public API)
- FastAPI app with its startup lifespan

Requirements:
- data/flights.json must exist
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.flights_api import create_app
from src.flight_booking.application import FlightBookingApp
from src.flight_booking.config import Config
from src.flight_booking.exceptions import CapacityExceededError, NoDirectFlightsError

DATA_PATH = Path(__file__).resolve().parents[2] / "data" / "flights.json"


@pytest.fixture
def engine() -> FlightBookingApp:
    if not DATA_PATH.exists():
        pytest.skip(f"Dataset not available: {DATA_PATH}")
    return FlightBookingApp(data_path=DATA_PATH)


# =============================================================================
# PUBLIC API
# =============================================================================


class TestFlightBookingAppIntegration:
    """FlightBookingApp over the bundled dataset."""

    def test_loads_dataset(self, engine):
        assert engine.is_ready
        assert [r.route_id for r in engine.list_routes()] == ["R1", "R2", "R3", "R4", "R5"]
        assert engine.flight_count == 8

    def test_direct_flights_skip_sold_out(self, engine):
        flights = engine.find_direct_flights("Prague", "Berlin")
        assert [f.flight_id for f in flights] == ["F101", "F103"]

    def test_direct_flights_with_departure_hint(self, engine):
        flights = engine.find_direct_flights(
            "Prague", "Berlin", departure_time="2024-06-02T12:00:00Z"
        )
        assert [f.flight_id for f in flights] == ["F103"]

    def test_no_direct_flights(self, engine):
        with pytest.raises(NoDirectFlightsError):
            engine.find_direct_flights("Prague", "London")

    def test_connections_prague_london(self, engine):
        results = engine.find_connecting_flights("Prague", "London")

        assert [
            (r.departure_flight.flight_id, r.arrival_flight.flight_id, r.layover_time)
            for r in results
        ] == [
            ("F101", "F201", "110 minutes"),
            ("F103", "F202", "650 minutes"),
            ("F301", "F401", "95 minutes"),
        ]
        assert [r.layover_point for r in results] == ["Berlin", "Berlin", "Vienna"]

    def test_book_until_sold_out(self, engine):
        confirmation = engine.book("Jane Doe", "F103", 5)

        assert confirmation.total_price == 650.0
        assert confirmation.departure == "Prague"
        assert confirmation.arrival == "Berlin"
        with pytest.raises(CapacityExceededError):
            engine.book("John Doe", "F103", 1)
        assert [f.flight_id for f in engine.find_direct_flights("Prague", "Berlin")] == ["F101"]


# =============================================================================
# HTTP APP WITH STARTUP LOADING
# =============================================================================


class TestHttpIntegration:
    """The app loads the dataset itself when no engine is injected."""

    @pytest.fixture
    def client(self, monkeypatch):
        if not DATA_PATH.exists():
            pytest.skip(f"Dataset not available: {DATA_PATH}")
        monkeypatch.setattr(Config, "FLIGHT_DATA_PATH", str(DATA_PATH))
        with TestClient(create_app()) as test_client:
            yield test_client

    def test_health_after_startup(self, client):
        assert client.get("/health").json() == {
            "status": "healthy",
            "routes": 5,
            "flights": 8,
        }

    def test_book_then_search(self, client):
        booked = client.post(
            "/book", json={"name": "Jane Doe", "flightId": "F101", "numSeats": 12}
        )
        assert booked.status_code == 200
        assert booked.json()["totalPrice"] == 1440
        assert isinstance(booked.json()["totalPrice"], int)

        response = client.get("/direct-flights/Prague/Berlin")
        assert [f["flight_id"] for f in response.json()] == ["F103"]

    def test_connections_endpoint(self, client):
        response = client.get(
            "/connection-flights/Prague/London",
            params={"departureTime": "2024-06-01T00:00:00Z"},
        )
        assert response.status_code == 200
        assert [c["layoverTime"] for c in response.json()] == [
            "110 minutes",
            "95 minutes",
        ]
