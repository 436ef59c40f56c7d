"""
Schema definitions for Flight Booking.

Dataclasses for the in-memory domain and Pandera-validated DataFrames
as the dataset loading contract.
"""

from .booking import BookingConfirmation
from .connection import ConnectionResult, RouteLeg
from .route import (
    Flight,
    FlightFrameDataFrame,
    FlightFrameSchema,
    Prices,
    Route,
    RouteDataFrame,
    RouteFrameSchema,
)
from .search import FlightQuery

__all__ = [
    # Domain objects
    "Flight",
    "Prices",
    "Route",
    # Dataset schemas
    "RouteFrameSchema",
    "FlightFrameSchema",
    "RouteDataFrame",
    "FlightFrameDataFrame",
    # Query and results
    "FlightQuery",
    "ConnectionResult",
    "RouteLeg",
    "BookingConfirmation",
]
