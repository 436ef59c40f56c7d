"""
Repository adapters for the route store.
"""

from src.flight_booking.adapters.repositories.route_repo import (
    InMemoryRouteRepository,
)

__all__ = [
    "InMemoryRouteRepository",
]
