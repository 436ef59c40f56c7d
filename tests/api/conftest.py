"""
Fixtures for FastAPI endpoint tests.

Builds an engine over an in-memory store and serves it through a
TestClient, so no dataset file is read.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.flights_api import create_app
from src.flight_booking.adapters.data_providers.json_provider import parse_route_records
from src.flight_booking.application import FlightBookingApp


@pytest.fixture
def engine(route_records, make_repository) -> FlightBookingApp:
    """Engine over routes R1 (X -> Y, F1) and R2 (Y -> Z, F2)."""
    repo = make_repository(parse_route_records(route_records))
    return FlightBookingApp(repository=repo)


@pytest.fixture
def client(engine):
    with TestClient(create_app(booking_app=engine)) as test_client:
        yield test_client
