"""
FlightBookingApp - Public API for route queries and bookings.

This module provides the main entry point for the booking engine. It acts
as a Facade/Factory: it owns the route store, wires the services around
it and exposes one method per operation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from src.flight_booking.adapters.data_providers.json_provider import (
    JsonRouteDataProvider,
)
from src.flight_booking.adapters.repositories.route_repo import (
    InMemoryRouteRepository,
)
from src.flight_booking.exceptions import RouteNotFoundError
from src.flight_booking.ports.route_data_provider import RouteDataProvider
from src.flight_booking.ports.route_repository import RouteRepository
from src.flight_booking.schemas.booking import BookingConfirmation
from src.flight_booking.schemas.connection import ConnectionResult
from src.flight_booking.schemas.route import Flight, Route
from src.flight_booking.services.booking_service import BookingService
from src.flight_booking.services.connection_service import ConnectionService
from src.flight_booking.services.direct_flight_service import DirectFlightService

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_DATA_PATH = "data/flights.json"


class FlightBookingApp:
    """
    Public API for the flight booking engine.

    One instance owns one route store for the whole process lifetime.
    The store is loaded in the constructor and never rebuilt.

    Example usage:
        >>> app = FlightBookingApp(data_path="data/flights.json")
        >>> flights = app.find_direct_flights("Prague", "Berlin")
        >>> confirmation = app.book("Jane Doe", flights[0].flight_id, 2)

    Attributes:
        _repository: Loaded route store.
        _direct: Direct-flight matcher.
        _connections: Connecting-flight matcher.
        _booking: Booking operator.
    """

    def __init__(
        self,
        data_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[RouteDataProvider] = None,
        repository: Optional[RouteRepository] = None,
    ) -> None:
        """
        Initialize the engine with optional custom dependencies.

        Args:
            data_path: Path to the JSON dataset. Defaults to data/flights.json.
            data_provider: Custom data provider. If None, uses
                JsonRouteDataProvider on data_path.
            repository: Pre-loaded route store. Takes precedence over the
                provider when given.

        Raises:
            DatasetLoadError: If the dataset cannot be loaded.
        """
        if repository is not None:
            self._repository = repository
        else:
            if data_provider is None:
                data_provider = JsonRouteDataProvider(data_path or DEFAULT_DATA_PATH)
            self._repository = InMemoryRouteRepository.from_provider(data_provider)

        self._direct = DirectFlightService(self._repository)
        self._connections = ConnectionService(self._repository)
        self._booking = BookingService(self._repository)

        logger.info("FlightBookingApp initialized")

    def list_routes(self) -> List[Route]:
        """Return all routes, with their flights, in dataset order."""
        return self._repository.get_all()

    def get_route(self, route_id: str) -> Route:
        """
        Look up a single route.

        Raises:
            RouteNotFoundError: If no route has this id.
        """
        route = self._repository.get_by_id(route_id)
        if route is None:
            raise RouteNotFoundError(route_id)
        return route

    def find_direct_flights(
        self,
        departure: str,
        arrival: str,
        departure_time: Optional[str] = None,
        arrival_time: Optional[str] = None,
    ) -> List[Flight]:
        """
        Search direct flights with available seats.

        Raises:
            NoDirectFlightsError: If nothing matches.
            InvalidTimeHintError: If a hint cannot be parsed.
        """
        return self._direct.find_direct(
            departure, arrival, departure_time=departure_time, arrival_time=arrival_time
        )

    def find_connecting_flights(
        self,
        departure: str,
        arrival: str,
        departure_time: Optional[str] = None,
        arrival_time: Optional[str] = None,
    ) -> List[ConnectionResult]:
        """
        Search one-stop connections. An empty list is a valid answer.

        Raises:
            InvalidTimeHintError: If a hint cannot be parsed.
        """
        return self._connections.find_connections(
            departure, arrival, departure_time=departure_time, arrival_time=arrival_time
        )

    def book(self, name: str, flight_id: str, num_seats: int) -> BookingConfirmation:
        """
        Book seats on a flight.

        Raises:
            FlightNotFoundError: If no flight has this id.
            CapacityExceededError: If not enough seats remain.
            InvalidSeatCountError: If num_seats < 1.
        """
        return self._booking.book(name, flight_id, num_seats)

    @property
    def route_count(self) -> int:
        return len(self._repository.get_all())

    @property
    def flight_count(self) -> int:
        return sum(1 for _ in self._repository.iter_flights())

    @property
    def is_ready(self) -> bool:
        """Check if the engine is ready to handle requests."""
        return self._repository.is_initialized
