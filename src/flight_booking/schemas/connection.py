"""
Connecting-flight result schemas.

Transient objects produced per query by the connection service and
discarded after the response is written.
"""

from dataclasses import dataclass

from src.flight_booking.schemas.route import Flight


@dataclass(frozen=True)
class RouteLeg:
    """A conceptual leg of a connection: one location to another."""

    departure_destination: str
    arrival_destination: str


@dataclass(frozen=True)
class ConnectionResult:
    """
    A departing flight paired with an arriving flight at a shared stop.

    Attributes:
        departure_flight: First flight, leaving the requested origin.
        arrival_flight: Second flight, leaving the layover point.
        layover_time: Gap between the two flights, e.g. "60 minutes".
        departure_route: Origin -> layover point.
        arrival_route: Layover point -> requested destination.
    """

    departure_flight: Flight
    arrival_flight: Flight
    layover_time: str
    departure_route: RouteLeg
    arrival_route: RouteLeg

    @property
    def layover_point(self) -> str:
        return self.departure_route.arrival_destination
