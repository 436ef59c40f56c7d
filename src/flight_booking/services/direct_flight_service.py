"""
Direct Flight Service - non-stop flight matching.

Finds flights on routes that link the requested locations directly,
optionally narrowed to a 24-hour window around departure/arrival hints.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, List, Optional

from src.flight_booking.exceptions import NoDirectFlightsError
from src.flight_booking.schemas.search import FlightQuery
from src.flight_booking.time_window import within_day

if TYPE_CHECKING:
    from src.flight_booking.ports.route_repository import RouteRepository
    from src.flight_booking.schemas.route import Flight

logger = logging.getLogger(__name__)


class DirectFlightService:
    """
    Domain service for direct-flight searches.

    A flight qualifies when:
    1. Its route departs from and arrives at the requested locations
       (exact, case-sensitive match)
    2. It has at least one available seat
    3. Its departure is within 24 hours of the departure hint, if given
    4. Its arrival is within 24 hours of the arrival hint, if given

    Attributes:
        _repository: Route store to search.
    """

    def __init__(self, repository: RouteRepository) -> None:
        self._repository = repository

    def find_direct(
        self,
        departure: str,
        arrival: str,
        departure_time: Optional[str] = None,
        arrival_time: Optional[str] = None,
    ) -> List[Flight]:
        """
        Find bookable direct flights between two locations.

        Args:
            departure: Departure location.
            arrival: Arrival location.
            departure_time: Optional date-time hint for departure.
            arrival_time: Optional date-time hint for arrival.

        Returns:
            Matching flights in first-discovery order, without duplicates.

        Raises:
            InvalidTimeHintError: If a hint cannot be parsed.
            NoDirectFlightsError: If no flight matches.
        """
        start_time = time.perf_counter()

        query = FlightQuery(
            departure=departure,
            arrival=arrival,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )
        departure_hint = query.departure_hint
        arrival_hint = query.arrival_hint

        # Keyed by identity; dicts keep first-insertion order
        matches: Dict[int, Flight] = {}

        for route in self._repository.get_all():
            if not route.connects(query.departure, query.arrival):
                continue
            for flight in route.itineraries:
                if not flight.has_seats:
                    continue
                if departure_hint is not None and not within_day(
                    flight.departure_time, departure_hint
                ):
                    continue
                if arrival_hint is not None and not within_day(
                    flight.arrival_time, arrival_hint
                ):
                    continue
                matches.setdefault(id(flight), flight)

        flights = list(matches.values())

        logger.debug(
            "Direct search %s -> %s: %d flights in %.3fms",
            query.departure,
            query.arrival,
            len(flights),
            (time.perf_counter() - start_time) * 1000,
        )

        if not flights:
            raise NoDirectFlightsError(query.departure, query.arrival)

        return flights
