"""Process-local implementation of ``IRepository``.

Records are pydantic models kept in insertion order.  A re-entrant
lock guards the collection: every method takes it, and callers hold it
across a whole lookup/validate/mutate sequence through ``atomic()``.
Records are copied on the way in and out so nothing outside the lock
shares stored state.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import Dict, Generic, Iterator, List, Optional, TypeVar
from uuid import uuid4

import structlog
from pydantic import BaseModel

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class DuplicateId(ValueError):
    """A record with the same id is already stored."""


class InMemoryRepository(IRepository[M], Generic[M]):
    """Thread-safe in-memory collection of records keyed by ``id``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[str, M] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def next_id(self) -> str:
        with self._lock:
            new_id = uuid4().hex
            while new_id in self._records:
                new_id = uuid4().hex
            return new_id

    def get_by_id(self, id: str) -> Optional[M]:
        with self._lock:
            record = self._records.get(id)
            return record.model_copy(deep=True) if record is not None else None

    def list(self) -> List[M]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def insert(self, entity: M) -> M:
        """Store a new record.

        Raises:
            DuplicateId: if the id is already taken.
        """
        with self._lock:
            if entity.id in self._records:
                raise DuplicateId(f"{self.name}: id {entity.id} already exists.")
            self._records[entity.id] = entity.model_copy(deep=True)
            logger.debug("repository.inserted", collection=self.name, record_id=entity.id)
            return entity.model_copy(deep=True)

    def update(self, entity: M) -> Optional[M]:
        with self._lock:
            if entity.id not in self._records:
                return None
            self._records[entity.id] = entity.model_copy(deep=True)
            logger.debug("repository.updated", collection=self.name, record_id=entity.id)
            return entity.model_copy(deep=True)

    def delete(self, id: str) -> bool:
        with self._lock:
            if self._records.pop(id, None) is None:
                return False
            logger.debug("repository.deleted", collection=self.name, record_id=id)
            return True

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
