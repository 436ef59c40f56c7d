"""
Timestamp helpers shared by the flight matchers.

Flight timestamps are kept as the raw strings from the dataset and parsed
on demand with pandas. Naive timestamps are treated as UTC so that naive
and offset-carrying values compare consistently.
"""

from typing import Optional

import pandas as pd

from src.flight_booking.exceptions import InvalidTimeHintError

# 24 hours, the tolerance used by every time filter
DAY = pd.Timedelta(milliseconds=86_400_000)


def parse_timestamp(value: str) -> pd.Timestamp:
    """
    Parse a calendar date-time string into a UTC timestamp.

    Args:
        value: ISO 8601 date or date-time (e.g. '2024-06-01',
            '2024-06-01T10:00:00Z').

    Returns:
        Timezone-aware pandas Timestamp in UTC.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    ts = pd.Timestamp(value)
    if ts is pd.NaT:
        raise ValueError(f"Not a timestamp: {value!r}")
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def parse_hint(parameter: str, value: Optional[str]) -> Optional[pd.Timestamp]:
    """
    Parse an optional query time hint.

    Empty strings count as absent, like a missing query parameter.

    Raises:
        InvalidTimeHintError: If a non-empty hint cannot be parsed.
    """
    if not value:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise InvalidTimeHintError(parameter, value) from e


def within_day(timestamp: pd.Timestamp, hint: pd.Timestamp) -> bool:
    """Check whether two timestamps are at most 24 hours apart (inclusive)."""
    return abs(hint - timestamp) <= DAY


def minutes_between(start: pd.Timestamp, end: pd.Timestamp) -> float:
    """Signed number of minutes from start to end."""
    return (end - start).total_seconds() / 60


def format_minutes(minutes: float) -> str:
    """Render a minute count as '<N> minutes', dropping a zero fraction."""
    if float(minutes).is_integer():
        return f"{int(minutes)} minutes"
    return f"{minutes} minutes"
