"""Fixtures for service tests."""

import pytest


@pytest.fixture
def two_leg_repository(make_flight, make_route, make_repository):
    """
    Store with Route A (X -> Y, F1 arriving 10:00 with 5 seats) and
    Route B (Y -> Z, F2 departing 11:00).
    """
    f1 = make_flight(
        "F1",
        departure_at="2024-01-01T08:00:00Z",
        arrival_at="2024-01-01T10:00:00Z",
        available_seats=5,
        adult=100.0,
        child=50.0,
    )
    f2 = make_flight(
        "F2",
        departure_at="2024-01-01T11:00:00Z",
        arrival_at="2024-01-01T13:00:00Z",
        available_seats=10,
        adult=150.0,
    )
    return make_repository([
        make_route("A", "X", "Y", [f1]),
        make_route("B", "Y", "Z", [f2]),
    ])
