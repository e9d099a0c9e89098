"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Any persistence
fault is raised as PlateStoreError.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from plates.domain import Plate, PlateId, PlateQuery


class PlateStore(ABC):
    """Interface for plate persistence operations."""

    @abstractmethod
    def query(self, query: PlateQuery) -> list[Plate]:
        """Return plates matching the query: filter, then sort, then page."""
        ...

    @abstractmethod
    def insert(self, plate: Plate) -> Plate:
        """Persist a new plate and return it as committed."""
        ...

    @abstractmethod
    def fetch_all(self) -> list[Plate]:
        """Return every plate in the store's default order."""
        ...

    @abstractmethod
    def fetch_by_id(self, plate_id: PlateId) -> Plate | None:
        """Return a plate by ID, or None if not found."""
        ...

    @abstractmethod
    def update(self, plate: Plate) -> Plate:
        """Persist field changes of an existing plate."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Group mutations so they commit or roll back together."""
        ...
