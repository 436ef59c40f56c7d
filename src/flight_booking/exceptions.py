"""
Custom exceptions for the flight booking module.

Provides a hierarchy of exceptions for clear error handling of route
lookups, flight searches and bookings. The HTTP layer maps each branch
of the hierarchy to a status code.
"""


class FlightBookingError(Exception):
    """Base exception for all flight booking errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# -------------------------
# Not found (HTTP 404)
# -------------------------


class NotFoundError(FlightBookingError):
    """Base exception for lookups that matched nothing."""

    pass


class RouteNotFoundError(NotFoundError):
    """Raised when a route id is not present in the store."""

    def __init__(self, route_id: str) -> None:
        self.route_id = route_id
        super().__init__("Route not found")


class FlightNotFoundError(NotFoundError):
    """Raised when no flight in any route carries the requested id."""

    def __init__(self, flight_id: str) -> None:
        self.flight_id = flight_id
        super().__init__("Flight not found")


class NoDirectFlightsError(NotFoundError):
    """Raised when a direct-flight search has no eligible flights."""

    def __init__(self, departure: str, arrival: str) -> None:
        self.departure = departure
        self.arrival = arrival
        super().__init__("No direct flights available")


# -------------------------
# Capacity (HTTP 400)
# -------------------------


class CapacityExceededError(FlightBookingError):
    """Raised when a booking asks for more seats than are available."""

    def __init__(self, flight_id: str, requested: int, available: int) -> None:
        self.flight_id = flight_id
        self.requested = requested
        self.available = available
        super().__init__("Not enough seats available")


# -------------------------
# Malformed input (HTTP 400)
# -------------------------


class InvalidRequestError(FlightBookingError):
    """Base exception for request values that cannot be interpreted."""

    pass


class InvalidTimeHintError(InvalidRequestError):
    """Raised when a departure/arrival time hint is not a valid timestamp."""

    def __init__(self, parameter: str, value: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid {parameter}: '{value}' is not a valid date-time")


class InvalidSeatCountError(InvalidRequestError):
    """Raised when a booking asks for fewer than one seat."""

    def __init__(self, num_seats: int) -> None:
        self.num_seats = num_seats
        super().__init__(f"numSeats must be >= 1, got {num_seats}")


# -------------------------
# Dataset lifecycle (startup)
# -------------------------


class DatasetError(FlightBookingError):
    """Base exception for dataset loading and store lifecycle errors."""

    pass


class DatasetLoadError(DatasetError):
    """Raised when the route dataset cannot be read or fails validation."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load route dataset from {source}: {reason}")


class DatasetNotLoadedError(DatasetError):
    """Raised when the route store is accessed before it was loaded."""

    def __init__(self) -> None:
        super().__init__("Route store accessed before the dataset was loaded")


class DatasetAlreadyLoadedError(DatasetError):
    """Raised when the route store is loaded a second time."""

    def __init__(self) -> None:
        super().__init__("Route store is already loaded")
