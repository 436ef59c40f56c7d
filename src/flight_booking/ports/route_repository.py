"""
Route Repository port interface.

Defines the contract of the process-wide route store shared by the
matchers and the booking service.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple

from src.flight_booking.schemas.route import Flight, Route


class RouteRepository(ABC):
    """
    Abstract interface for the route store.

    The store is loaded exactly once at startup and never rebuilt.
    Flight seat counts are the only state that changes afterwards, and
    callers that read-check-mutate them must hold ``lock``.
    """

    @abstractmethod
    def load(self, routes: Iterable[Route]) -> None:
        """
        Populate the store. Last write wins for a duplicate route id.

        Raises:
            DatasetAlreadyLoadedError: If the store was already loaded.
        """
        ...

    @abstractmethod
    def get_all(self) -> List[Route]:
        """Return all routes in insertion order."""
        ...

    @abstractmethod
    def get_by_id(self, route_id: str) -> Optional[Route]:
        """Return the route with this id, or None."""
        ...

    def iter_flights(self) -> Iterator[Tuple[Route, Flight]]:
        """Yield every (route, flight) pair in route then itinerary order."""
        for route in self.get_all():
            for flight in route.itineraries:
                yield route, flight

    @property
    @abstractmethod
    def lock(self) -> threading.Lock:
        """Lock serializing seat read-check-mutate sequences."""
        ...

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """Check if the dataset has been loaded."""
        ...
