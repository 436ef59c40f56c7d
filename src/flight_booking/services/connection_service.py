"""
Connection Service - one-stop connecting flight matching.

Pairs a flight leaving the requested origin with a flight reaching the
requested destination through a shared layover point.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from src.flight_booking.schemas.connection import ConnectionResult, RouteLeg
from src.flight_booking.schemas.search import FlightQuery
from src.flight_booking.time_window import DAY, format_minutes, minutes_between

if TYPE_CHECKING:
    from src.flight_booking.ports.route_repository import RouteRepository
    from src.flight_booking.schemas.route import Flight, Route

logger = logging.getLogger(__name__)


class ConnectionService:
    """
    Domain service for connecting-flight searches.

    For every route d departing from the origin and every route a
    arriving at the destination, a flight pair (fd on d, fa on a) is a
    connection when:
    1. d arrives where a departs (the layover point)
    2. fd.arrival_at <= fa.departure_at, comparing the raw strings
    3. The layover is strictly shorter than 24 hours
    4. fd departs no later than 24 hours after the departure hint, if given
    5. fa.arrival_at equals the arrival hint exactly, if given

    Seat availability is not checked. Results keep the nested iteration
    order (departing routes, arriving routes, departing flights, arriving
    flights).

    Attributes:
        _repository: Route store to search.
    """

    def __init__(self, repository: RouteRepository) -> None:
        self._repository = repository

    def find_connections(
        self,
        departure: str,
        arrival: str,
        departure_time: Optional[str] = None,
        arrival_time: Optional[str] = None,
    ) -> List[ConnectionResult]:
        """
        Find one-stop connections between two locations.

        Args:
            departure: Requested origin.
            arrival: Requested destination.
            departure_time: Optional date-time; first flight must depart
                no later than 24 hours after it.
            arrival_time: Optional exact arrival timestamp of the second
                flight.

        Returns:
            List of ConnectionResult objects (possibly empty).

        Raises:
            InvalidTimeHintError: If a hint cannot be parsed.
        """
        start_time = time.perf_counter()

        query = FlightQuery(
            departure=departure,
            arrival=arrival,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )
        latest_departure = (
            query.departure_hint + DAY if query.departure_hint is not None else None
        )

        routes = self._repository.get_all()
        departing_routes = [r for r in routes if r.departure_destination == departure]
        arriving_routes = [r for r in routes if r.arrival_destination == arrival]

        results: List[ConnectionResult] = []
        for departing_route in departing_routes:
            for arriving_route in arriving_routes:
                if departing_route.arrival_destination != arriving_route.departure_destination:
                    continue
                for departing_flight in departing_route.itineraries:
                    for arriving_flight in arriving_route.itineraries:
                        layover = self._layover_minutes(
                            departing_flight,
                            arriving_flight,
                            latest_departure,
                            query.arrival_time,
                        )
                        if layover is None:
                            continue
                        results.append(
                            self._build_result(
                                departing_route,
                                departing_flight,
                                arriving_flight,
                                layover,
                                arrival,
                            )
                        )

        logger.debug(
            "Connection search %s -> %s: %d pairs from %d x %d routes in %.3fms",
            departure,
            arrival,
            len(results),
            len(departing_routes),
            len(arriving_routes),
            (time.perf_counter() - start_time) * 1000,
        )

        return results

    @staticmethod
    def _layover_minutes(
        departing_flight: Flight,
        arriving_flight: Flight,
        latest_departure: Optional[pd.Timestamp],
        arrival_time: Optional[str],
    ) -> Optional[float]:
        """
        Check the flight-level conditions for a pair.

        Returns:
            Layover in minutes if the pair connects, else None.
        """
        if departing_flight.arrival_at > arriving_flight.departure_at:
            return None

        gap = arriving_flight.departure_time - departing_flight.arrival_time
        if gap >= DAY:
            return None

        if latest_departure is not None and departing_flight.departure_time > latest_departure:
            return None

        if arrival_time and arriving_flight.arrival_at != arrival_time:
            return None

        return minutes_between(departing_flight.arrival_time, arriving_flight.departure_time)

    @staticmethod
    def _build_result(
        departing_route: Route,
        departing_flight: Flight,
        arriving_flight: Flight,
        layover: float,
        requested_arrival: str,
    ) -> ConnectionResult:
        """
        Assemble a ConnectionResult.

        The second leg ends at the requested destination rather than at
        the arriving route's own arrival field.
        """
        return ConnectionResult(
            departure_flight=departing_flight,
            arrival_flight=arriving_flight,
            layover_time=format_minutes(layover),
            departure_route=RouteLeg(
                departure_destination=departing_route.departure_destination,
                arrival_destination=departing_route.arrival_destination,
            ),
            arrival_route=RouteLeg(
                departure_destination=departing_route.arrival_destination,
                arrival_destination=requested_arrival,
            ),
        )
