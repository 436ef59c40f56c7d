"""
Application layer for Flight Booking.

This layer provides the public API of the booking engine. It acts as a
facade, handling dependency initialization and providing a simple
interface for the HTTP layer.
"""

from src.flight_booking.application.flight_booking_app import FlightBookingApp

__all__ = ["FlightBookingApp"]
