"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the contract every collection store
satisfies.  Service-layer code depends on this abstraction, never on
the concrete in-memory implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the record managed by the
    repository (e.g. ``Dish``, ``Order``).  Records expose an ``id``.
    """

    @abstractmethod
    def next_id(self) -> str:
        """Return a fresh id, unique within the collection."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve a record by id, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every record in insertion order."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Append a new record."""

    @abstractmethod
    def update(self, entity: T) -> Optional[T]:
        """Replace the stored record with the same id, ``None`` when absent."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove a record by id, ``False`` when absent."""

    @abstractmethod
    def atomic(self) -> ContextManager[None]:
        """Context manager serialising a read-check-write sequence."""
