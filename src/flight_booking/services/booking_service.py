"""
Booking Service - seat reservation against the route store.

Locates a flight by id, checks capacity, decrements the seat count in
place and returns a priced confirmation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from src.flight_booking.exceptions import (
    CapacityExceededError,
    FlightNotFoundError,
    InvalidSeatCountError,
)
from src.flight_booking.schemas.booking import BookingConfirmation

if TYPE_CHECKING:
    from src.flight_booking.ports.route_repository import RouteRepository
    from src.flight_booking.schemas.route import Flight, Route

logger = logging.getLogger(__name__)


class BookingService:
    """
    Domain service for booking seats on a flight.

    The scan, capacity check and decrement run under the repository lock,
    so concurrent bookings can never push a seat count below zero.

    Pricing uses the adult fare for every seat; the child fare is kept on
    the flight but not applied.

    Attributes:
        _repository: Route store holding the flights.
    """

    def __init__(self, repository: RouteRepository) -> None:
        self._repository = repository

    def book(self, name: str, flight_id: str, num_seats: int) -> BookingConfirmation:
        """
        Book seats on a flight.

        Args:
            name: Passenger name, echoed in the confirmation.
            flight_id: Id of the flight to book.
            num_seats: Number of seats to reserve (>= 1).

        Returns:
            BookingConfirmation with the total price and flight details.

        Raises:
            InvalidSeatCountError: If num_seats < 1.
            FlightNotFoundError: If no flight has this id.
            CapacityExceededError: If fewer than num_seats seats remain.
        """
        if num_seats < 1:
            raise InvalidSeatCountError(num_seats)

        with self._repository.lock:
            route, flight = self._find_flight(flight_id)

            if flight.available_seats < num_seats:
                logger.warning(
                    "Booking rejected for flight %s: %d seats requested, %d available",
                    flight_id,
                    num_seats,
                    flight.available_seats,
                )
                raise CapacityExceededError(flight_id, num_seats, flight.available_seats)

            flight.available_seats -= num_seats
            remaining = flight.available_seats

        confirmation = BookingConfirmation(
            name=name,
            flight_id=flight_id,
            num_seats=num_seats,
            total_price=num_seats * flight.prices.adult,
            departure=route.departure_destination,
            arrival=route.arrival_destination,
            departure_time=flight.departure_at,
            arrival_time=flight.arrival_at,
        )

        logger.info(
            "Booked %d seats on flight %s (%s -> %s), %d remaining",
            num_seats,
            flight_id,
            route.departure_destination,
            route.arrival_destination,
            remaining,
        )

        return confirmation

    def _find_flight(self, flight_id: str) -> Tuple[Route, Flight]:
        """
        Scan every route for the flight id. The last match wins.

        Raises:
            FlightNotFoundError: If no flight has this id.
        """
        found: Optional[Tuple[Route, Flight]] = None
        for route, flight in self._repository.iter_flights():
            if flight.flight_id == flight_id:
                found = (route, flight)

        if found is None:
            logger.warning("Booking rejected: flight %s not found", flight_id)
            raise FlightNotFoundError(flight_id)

        return found
