"""
Route and flight schemas.

Defines the in-memory domain objects held by the route store and the
Pandera contracts used to validate the dataset at the loading boundary.
"""

from dataclasses import dataclass, field
from typing import List

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

from src.flight_booking.time_window import parse_timestamp


# =============================================================================
# DATASET CONTRACTS (validated once, at load time)
# =============================================================================


def _parses_as_timestamp(series: pd.Series) -> pd.Series:
    return pd.to_datetime(series, format="ISO8601", errors="coerce", utc=True).notna()


class RouteFrameSchema(pa.DataFrameModel):
    """
    Schema for route rows of the flattened dataset.

    One row per route record, in dataset order. ``route_index`` is the
    record position and links flights back to their route, so duplicate
    route ids stay distinguishable until the store applies last-write-wins.
    """

    route_index: Series[int] = pa.Field(ge=0)
    route_id: Series[str] = pa.Field(nullable=False)
    departure_destination: Series[str] = pa.Field(
        nullable=False,
        description="Departure location (matched case-sensitively)",
    )
    arrival_destination: Series[str] = pa.Field(
        nullable=False,
        description="Arrival location (matched case-sensitively)",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteFrameSchema"


class FlightFrameSchema(pa.DataFrameModel):
    """
    Schema for flight rows of the flattened dataset.

    One row per itinerary entry. Timestamps stay strings (connection
    matching compares the raw values) but must parse as ISO 8601.
    """

    route_index: Series[int] = pa.Field(ge=0)
    flight_id: Series[str] = pa.Field(nullable=False)
    departure_at: Series[str] = pa.Field(nullable=False)
    arrival_at: Series[str] = pa.Field(nullable=False)
    available_seats: Series[int] = pa.Field(
        ge=0,
        description="Remaining seats, never negative",
    )
    currency: Series[str] = pa.Field(nullable=False)
    adult_price: Series[float] = pa.Field(ge=0)
    child_price: Series[float] = pa.Field(ge=0)

    class Config:
        strict = False
        coerce = True
        name = "FlightFrameSchema"

    @pa.check("departure_at", "arrival_at")
    def valid_timestamp(cls, series: Series[str]) -> Series[bool]:
        """Every timestamp must be a parseable ISO 8601 date-time."""
        return _parses_as_timestamp(series)


RouteDataFrame = DataFrame[RouteFrameSchema]
FlightFrameDataFrame = DataFrame[FlightFrameSchema]


# =============================================================================
# DOMAIN OBJECTS
# =============================================================================


@dataclass(frozen=True)
class Prices:
    """
    Price schedule of a flight. Only the adult price is used for booking.

    Whole-number prices are held as int so they echo back unchanged.
    """

    currency: str
    adult: float
    child: float


@dataclass(eq=False)
class Flight:
    """
    A single scheduled flight.

    Compared by identity: the same flight object reached through two
    routes is one flight. ``available_seats`` is the only mutable field
    and is changed exclusively by the booking service.
    """

    flight_id: str
    departure_at: str
    arrival_at: str
    available_seats: int
    prices: Prices

    def __post_init__(self) -> None:
        if self.available_seats < 0:
            raise ValueError(
                f"available_seats must be >= 0, got {self.available_seats}"
            )

    @property
    def departure_time(self) -> pd.Timestamp:
        """Parsed departure timestamp (UTC)."""
        return parse_timestamp(self.departure_at)

    @property
    def arrival_time(self) -> pd.Timestamp:
        """Parsed arrival timestamp (UTC)."""
        return parse_timestamp(self.arrival_at)

    @property
    def has_seats(self) -> bool:
        return self.available_seats > 0


@dataclass(eq=False)
class Route:
    """
    A route between two locations and the flights operating it.

    The itinerary list is fixed after load; flights never move between
    routes.
    """

    route_id: str
    departure_destination: str
    arrival_destination: str
    itineraries: List[Flight] = field(default_factory=list)

    def connects(self, departure: str, arrival: str) -> bool:
        """Check for an exact (case-sensitive) endpoint match."""
        return (
            self.departure_destination == departure
            and self.arrival_destination == arrival
        )
