"""
Domain services for Flight Booking.

Services implement the matching and booking logic on top of the route
store port.
"""

from src.flight_booking.services.booking_service import BookingService
from src.flight_booking.services.connection_service import ConnectionService
from src.flight_booking.services.direct_flight_service import DirectFlightService

__all__ = ["BookingService", "ConnectionService", "DirectFlightService"]
