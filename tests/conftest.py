"""Shared fixtures: factories for flights, routes and loaded route stores."""

from typing import Callable, List

import pytest

from src.flight_booking.adapters.repositories.route_repo import InMemoryRouteRepository
from src.flight_booking.schemas.route import Flight, Prices, Route


@pytest.fixture
def make_flight() -> Callable[..., Flight]:
    """Factory for Flight objects with sensible defaults."""

    def _make(
        flight_id: str = "F1",
        departure_at: str = "2024-01-01T08:00:00Z",
        arrival_at: str = "2024-01-01T10:00:00Z",
        available_seats: int = 5,
        adult: float = 100.0,
        child: float = 50.0,
        currency: str = "EUR",
    ) -> Flight:
        return Flight(
            flight_id=flight_id,
            departure_at=departure_at,
            arrival_at=arrival_at,
            available_seats=available_seats,
            prices=Prices(currency=currency, adult=adult, child=child),
        )

    return _make


@pytest.fixture
def make_route() -> Callable[..., Route]:
    """Factory for Route objects."""

    def _make(
        route_id: str,
        departure: str,
        arrival: str,
        flights: List[Flight],
    ) -> Route:
        return Route(
            route_id=route_id,
            departure_destination=departure,
            arrival_destination=arrival,
            itineraries=list(flights),
        )

    return _make


@pytest.fixture
def make_repository() -> Callable[[List[Route]], InMemoryRouteRepository]:
    """Factory for loaded in-memory route stores."""

    def _make(routes: List[Route]) -> InMemoryRouteRepository:
        repo = InMemoryRouteRepository()
        repo.load(routes)
        return repo

    return _make


@pytest.fixture
def route_records() -> list:
    """Route records in the dataset wire format (X -> Y -> Z)."""
    return [
        {
            "route_id": "R1",
            "departureDestination": "X",
            "arrivalDestination": "Y",
            "itineraries": [
                {
                    "flight_id": "F1",
                    "departureAt": "2024-01-01T08:00:00Z",
                    "arrivalAt": "2024-01-01T10:00:00Z",
                    "availableSeats": 5,
                    "prices": {"currency": "EUR", "adult": 100, "child": 50},
                }
            ],
        },
        {
            "route_id": "R2",
            "departureDestination": "Y",
            "arrivalDestination": "Z",
            "itineraries": [
                {
                    "flight_id": "F2",
                    "departureAt": "2024-01-01T11:00:00Z",
                    "arrivalAt": "2024-01-01T13:00:00Z",
                    "availableSeats": 10,
                    "prices": {"currency": "EUR", "adult": 150, "child": 75},
                }
            ],
        },
    ]
