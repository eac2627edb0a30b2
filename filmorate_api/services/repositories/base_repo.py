"""In-memory keyed storage with monotonic id assignment."""

from __future__ import annotations

import itertools
import threading
from typing import Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel

from filmorate_api.core.exceptions import NotFoundError

T = TypeVar("T", bound=BaseModel)


class InMemoryRepo(Generic[T]):
    """Process-local store for one entity type.

    Subclasses name the entity (for error messages) and the attribute
    holding its relationship set. Records are kept as private copies:
    callers always get snapshots, so the only way to change stored data
    is through ``create``/``update``/``delete``.
    """

    entity_name: str = "entity"
    relation_field: str = ""

    def __init__(self) -> None:
        self._items: dict[int, T] = {}
        self._ids = itertools.count(1)
        # re-entrant: services hold it around read-modify-write sequences
        self.lock = threading.RLock()

    def create(self, entity: T) -> T:
        """Assign the next id and store the entity with no relations."""
        with self.lock:
            entity_id = next(self._ids)
            stored = entity.model_copy(
                update={"id": entity_id, self.relation_field: set()},
                deep=True,
            )
            self._items[entity_id] = stored
            return stored.model_copy(deep=True)

    def update(
        self,
        entity: T,
        related: Optional[Iterable[int]] = None,
    ) -> T:
        """Replace scalar fields of a stored entity.

        The stored relationship set is carried over unless ``related``
        is given; that argument is reserved for the dedicated like and
        friendship operations of the services.
        """
        with self.lock:
            existing = self._items.get(entity.id)
            if existing is None:
                raise NotFoundError(
                    f"{self.entity_name} with id={entity.id} not found")
            relations = (set(getattr(existing, self.relation_field))
                         if related is None else set(related))
            stored = entity.model_copy(
                update={self.relation_field: relations},
                deep=True,
            )
            self._items[entity.id] = stored
            return stored.model_copy(deep=True)

    def find_all(self) -> list[T]:
        with self.lock:
            return [item.model_copy(deep=True)
                    for item in self._items.values()]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        with self.lock:
            item = self._items.get(entity_id)
            return None if item is None else item.model_copy(deep=True)

    def delete(self, entity_id: int) -> None:
        """Drop the record if present; ids are never handed out again."""
        with self.lock:
            self._items.pop(entity_id, None)
