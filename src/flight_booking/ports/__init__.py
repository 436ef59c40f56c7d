"""
Port interfaces for Flight Booking.

Ports define the abstract interfaces that the services use to reach the
dataset and the route store (Ports and Adapters architecture).
"""

from src.flight_booking.ports.route_data_provider import RouteDataProvider
from src.flight_booking.ports.route_repository import RouteRepository

__all__ = [
    "RouteDataProvider",
    "RouteRepository",
]
