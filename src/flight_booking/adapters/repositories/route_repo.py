"""
In-memory route store.

Holds the route dataset for the lifetime of the process:
- Insertion-ordered dict keyed by route id (last write wins)
- Load-once lifecycle, never rebuilt mid-process
- Single lock guarding seat read-check-mutate sequences
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from src.flight_booking.exceptions import (
    DatasetAlreadyLoadedError,
    DatasetNotLoadedError,
)
from src.flight_booking.ports.route_repository import RouteRepository
from src.flight_booking.schemas.route import Route

if TYPE_CHECKING:
    from src.flight_booking.ports.route_data_provider import RouteDataProvider

logger = logging.getLogger(__name__)


class InMemoryRouteRepository(RouteRepository):
    """
    Process-wide route store.

    Thread-safe for concurrent bookings: the booking service holds
    ``lock`` across its scan, capacity check and seat decrement. Readers
    do not take the lock.

    Usage:
        >>> provider = JsonRouteDataProvider("data/flights.json")
        >>> repo = InMemoryRouteRepository.from_provider(provider)
        >>> repo.get_by_id("R1")
    """

    def __init__(self) -> None:
        self._routes: Dict[str, Route] = {}
        self._loaded = False
        self._load_lock = threading.Lock()
        self._lock = threading.Lock()

    @classmethod
    def from_provider(cls, provider: RouteDataProvider) -> "InMemoryRouteRepository":
        """
        Build a loaded store from a data provider.

        Args:
            provider: Source of the route dataset.

        Returns:
            Initialized InMemoryRouteRepository.

        Raises:
            DatasetLoadError: If the provider cannot deliver the dataset.
        """
        repo = cls()
        repo.load(provider.get_routes())
        logger.info(
            "Route store loaded from %s: %d routes, %d flights",
            provider.name,
            repo.route_count,
            repo.flight_count,
        )
        return repo

    def load(self, routes: Iterable[Route]) -> None:
        """Populate the store once. Last write wins for duplicate ids."""
        with self._load_lock:
            if self._loaded:
                raise DatasetAlreadyLoadedError()

            for route in routes:
                if route.route_id in self._routes:
                    logger.warning(
                        "Duplicate route id %s in dataset, keeping the last record",
                        route.route_id,
                    )
                self._routes[route.route_id] = route

            self._loaded = True

    def get_all(self) -> List[Route]:
        self._ensure_loaded()
        return list(self._routes.values())

    def get_by_id(self, route_id: str) -> Optional[Route]:
        self._ensure_loaded()
        return self._routes.get(route_id)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise DatasetNotLoadedError()

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    @property
    def is_initialized(self) -> bool:
        return self._loaded

    @property
    def route_count(self) -> int:
        return len(self._routes)

    @property
    def flight_count(self) -> int:
        return sum(len(route.itineraries) for route in self._routes.values())
