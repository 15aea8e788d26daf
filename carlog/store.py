"""Thread-safe in-memory entity storage with monotonic ID assignment."""

import dataclasses
import logging
import threading
from typing import Dict, Generic, List, Optional, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityStore(Generic[T]):
    """
    Keyed store mapping integer IDs to entities of one type.

    Each store owns its own ID counter starting at 1. IDs are never reused;
    there is no update or delete. Entities are dataclasses with an ``id``
    field that is ``None`` until stored. An entity stored under an explicit
    ID moves the counter past it.
    """

    def __init__(self, name: str):
        self.name = name
        self._entities: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def put(self, entity: T) -> T:
        """Store an entity, assigning the next unused ID if it has none."""
        with self._lock:
            if entity.id is None:
                entity = dataclasses.replace(entity, id=self._next_id)
            self._next_id = max(self._next_id, entity.id + 1)
            self._entities[entity.id] = entity
        _logger.info("Saved %s with ID: %s", self.name, entity.id)
        return entity

    def get(self, entity_id: int) -> Optional[T]:
        """Return the entity with this ID, or None."""
        with self._lock:
            entity = self._entities.get(entity_id)
        if entity is None:
            _logger.debug("%s not found with ID: %s", self.name, entity_id)
        return entity

    def list(self) -> List[T]:
        """Snapshot of all entities in insertion order."""
        with self._lock:
            return list(self._entities.values())

    def count(self) -> int:
        with self._lock:
            return len(self._entities)

    def __len__(self) -> int:
        return self.count()
