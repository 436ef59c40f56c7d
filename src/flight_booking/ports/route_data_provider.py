"""
Route Data Provider port interface.

Defines the abstract contract for sources of the static route dataset.
Implementations handle the specifics of different backends (file, etc.).
"""

from abc import ABC, abstractmethod
from typing import List

from src.flight_booking.schemas.route import Route


class RouteDataProvider(ABC):
    """
    Abstract interface for route dataset providers.

    Providers validate the raw dataset at the boundary (Pandera schemas)
    and return ready-to-store Route objects in dataset order.

    Implementations:
    - JsonRouteDataProvider: JSON file of route records
    - In tests: in-memory providers returning fixed routes
    """

    @abstractmethod
    def get_routes(self) -> List[Route]:
        """
        Return every route record of the dataset, in dataset order.

        Duplicate route ids are returned as-is; the store resolves them.

        Returns:
            List of Route objects with their nested flights.

        Raises:
            DatasetLoadError: If the dataset is unreadable or invalid.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "JSON file data/flights.json").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True.
        """
        return True
