"""
JSON Data Provider - route records to domain objects.

Reads the static route dataset (an ordered JSON array of route records
with nested itineraries), flattens it into route and flight DataFrames,
validates both against the Pandera contracts and builds Route objects.
"""

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

import pandas as pd
import pandera as pa

from src.flight_booking.exceptions import DatasetLoadError
from src.flight_booking.ports.route_data_provider import RouteDataProvider
from src.flight_booking.schemas.route import (
    Flight,
    FlightFrameDataFrame,
    FlightFrameSchema,
    Prices,
    Route,
    RouteDataFrame,
    RouteFrameSchema,
)

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = [
    "route_index",
    "route_id",
    "departure_destination",
    "arrival_destination",
]

FLIGHT_COLUMNS = [
    "route_index",
    "flight_id",
    "departure_at",
    "arrival_at",
    "available_seats",
    "currency",
    "adult_price",
    "child_price",
]


def _is_whole_number(value: Any) -> bool:
    # bool is an int subclass; a JSON true is not a seat count
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _as_json_number(value: float) -> Union[int, float]:
    """Return whole values as int so they serialize as JSON integers."""
    value = float(value)
    return int(value) if value.is_integer() else value


def flatten_records(
    records: Sequence[Dict[str, Any]],
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Flatten nested route records into one route frame and one flight frame.

    Mapping:
    - route_id / departureDestination / arrivalDestination -> route row
    - itineraries[*] -> flight rows (prices split into three columns)
    - record position -> route_index on both frames

    Args:
        records: Route records in the dataset wire format.

    Returns:
        (routes_df, flights_df), unvalidated.

    Raises:
        KeyError, TypeError: If a record lacks a required field.
        ValueError: If a seat count is not a whole number.
    """
    route_rows: List[Dict[str, Any]] = []
    flight_rows: List[Dict[str, Any]] = []

    for index, record in enumerate(records):
        route_rows.append(
            {
                "route_index": index,
                "route_id": record["route_id"],
                "departure_destination": record["departureDestination"],
                "arrival_destination": record["arrivalDestination"],
            }
        )
        for flight in record["itineraries"]:
            prices = flight["prices"]
            # Checked before the frame exists; schema coercion would truncate
            seats = flight["availableSeats"]
            if not _is_whole_number(seats):
                raise ValueError(
                    f"availableSeats of flight {flight['flight_id']!r} "
                    f"must be a whole number, got {seats!r}"
                )
            flight_rows.append(
                {
                    "route_index": index,
                    "flight_id": flight["flight_id"],
                    "departure_at": flight["departureAt"],
                    "arrival_at": flight["arrivalAt"],
                    "available_seats": seats,
                    "currency": prices["currency"],
                    "adult_price": prices["adult"],
                    "child_price": prices["child"],
                }
            )

    routes_df = pd.DataFrame(route_rows, columns=ROUTE_COLUMNS)
    flights_df = pd.DataFrame(flight_rows, columns=FLIGHT_COLUMNS)
    return routes_df, flights_df


def build_routes(
    routes_df: RouteDataFrame,
    flights_df: FlightFrameDataFrame,
) -> List[Route]:
    """
    Build Route objects from validated frames, keeping dataset order.

    Flights are attached to their route by ``route_index``, so each
    record owns its own flight objects even when route ids repeat.
    """
    flights_by_route: Dict[int, List[Flight]] = defaultdict(list)
    for row in flights_df.to_dict("records"):
        flights_by_route[int(row["route_index"])].append(
            Flight(
                flight_id=str(row["flight_id"]),
                departure_at=str(row["departure_at"]),
                arrival_at=str(row["arrival_at"]),
                available_seats=int(row["available_seats"]),
                prices=Prices(
                    currency=str(row["currency"]),
                    adult=_as_json_number(row["adult_price"]),
                    child=_as_json_number(row["child_price"]),
                ),
            )
        )

    return [
        Route(
            route_id=str(row["route_id"]),
            departure_destination=str(row["departure_destination"]),
            arrival_destination=str(row["arrival_destination"]),
            itineraries=flights_by_route.get(int(row["route_index"]), []),
        )
        for row in routes_df.to_dict("records")
    ]


def parse_route_records(
    records: Sequence[Dict[str, Any]],
    source: str = "records",
) -> List[Route]:
    """
    Validate raw route records and turn them into Route objects.

    Args:
        records: Route records in the dataset wire format.
        source: Description of where the records came from (for errors).

    Returns:
        List of Route objects in dataset order.

    Raises:
        DatasetLoadError: If a record is malformed or fails validation.
    """
    try:
        routes_df, flights_df = flatten_records(records)
    except (KeyError, TypeError) as e:
        raise DatasetLoadError(source, f"malformed route record ({e!r})") from e
    except ValueError as e:
        raise DatasetLoadError(source, str(e)) from e

    try:
        routes_df = RouteFrameSchema.validate(routes_df)
        flights_df = FlightFrameSchema.validate(flights_df)
    except (pa.errors.SchemaError, pa.errors.SchemaErrors) as e:
        raise DatasetLoadError(source, str(e)) from e

    return build_routes(routes_df, flights_df)


class JsonRouteDataProvider(RouteDataProvider):
    """
    Data provider for a JSON route dataset file.

    Attributes:
        _path: Path to the JSON file.
    """

    def __init__(self, path: Union[str, Path] = "data/flights.json") -> None:
        """
        Initialize the JSON data provider.

        Args:
            path: Path to the dataset file.
        """
        self._path = Path(path)

    def get_routes(self) -> List[Route]:
        """
        Read, validate and build the route dataset.

        Returns:
            List of Route objects in file order.

        Raises:
            DatasetLoadError: If the file is missing, not JSON, not an
                array, or fails schema validation.
        """
        source = str(self._path)

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except FileNotFoundError as e:
            raise DatasetLoadError(source, "file not found") from e
        except json.JSONDecodeError as e:
            raise DatasetLoadError(source, f"invalid JSON ({e})") from e

        if not isinstance(records, list):
            raise DatasetLoadError(source, "expected a JSON array of routes")

        routes = parse_route_records(records, source=source)

        if not routes:
            logger.warning("Route dataset %s is empty", source)
        else:
            logger.debug("Parsed %d route records from %s", len(routes), source)

        return routes

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return f"JSON file {self._path}"

    @property
    def is_available(self) -> bool:
        """Check if the dataset file exists."""
        return self._path.exists()
