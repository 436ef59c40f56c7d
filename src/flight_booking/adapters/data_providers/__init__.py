"""
Data provider adapters for the route dataset.
"""

from src.flight_booking.adapters.data_providers.json_provider import (
    JsonRouteDataProvider,
)

__all__ = ["JsonRouteDataProvider"]
