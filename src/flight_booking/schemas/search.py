"""
Flight search query schema.

Defines the immutable parameters shared by the direct and connecting
flight matchers.
"""

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from src.flight_booking.time_window import parse_hint


@dataclass(frozen=True)
class FlightQuery:
    """
    Immutable flight search parameters.

    Attributes:
        departure: Requested departure location.
        arrival: Requested arrival location.
        departure_time: Optional departure-time hint, as received.
        arrival_time: Optional arrival-time hint, as received.
    """

    departure: str
    arrival: str
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None

    def __post_init__(self) -> None:
        """Fail fast on hints that cannot be parsed."""
        parse_hint("departureTime", self.departure_time)
        parse_hint("arrivalTime", self.arrival_time)

    @property
    def departure_hint(self) -> Optional[pd.Timestamp]:
        """Parsed departure-time hint, or None when absent."""
        return parse_hint("departureTime", self.departure_time)

    @property
    def arrival_hint(self) -> Optional[pd.Timestamp]:
        """Parsed arrival-time hint, or None when absent."""
        return parse_hint("arrivalTime", self.arrival_time)
