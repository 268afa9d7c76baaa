"""Repository base interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class RepositoryBase(ABC, Generic[T]):
    """Base repository interface for in-memory collections."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve entity by its key."""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Add new entity."""
        pass

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return a snapshot of every entity in insertion order."""
        pass
