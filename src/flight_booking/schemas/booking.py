"""
Booking confirmation schema.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingConfirmation:
    """
    Priced confirmation returned by a successful booking.

    ``departure``/``arrival`` are the owning route's locations and
    ``departure_time``/``arrival_time`` the flight's raw timestamps.
    """

    name: str
    flight_id: str
    num_seats: int
    total_price: float
    departure: str
    arrival: str
    departure_time: str
    arrival_time: str
