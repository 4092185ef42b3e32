"""In-memory entity store."""

import dataclasses
from typing import Any


class InMemoryEntityStore:
    """Dict-backed store for dataclass entities with an ``id`` field.

    Keeps a per-method call counter so tests and demos can tell a
    cache hit (no store call) from a miss.
    """

    def __init__(self, entities: list[Any] | None = None) -> None:
        """Initialize the store.

        Args:
            entities: Optional entities to preload. Ids are assigned to
                entities that have none.
        """
        self._records: dict[Any, Any] = {}
        self._next_id = 1
        self.call_count: dict[str, int] = {
            "get": 0,
            "save": 0,
            "delete": 0,
            "count": 0,
            "find_all": 0,
        }

        for entity in entities or []:
            self._put(entity)

    def reset_call_count(self) -> None:
        """Reset the call counters."""
        for key in self.call_count:
            self.call_count[key] = 0

    async def get(self, entity_id: Any) -> Any | None:
        self.call_count["get"] += 1
        record = self._records.get(entity_id)
        return dataclasses.replace(record) if record is not None else None

    async def save(self, entity: Any) -> Any:
        self.call_count["save"] += 1
        return dataclasses.replace(self._put(entity))

    async def delete(self, entity_id: Any) -> bool:
        self.call_count["delete"] += 1
        return self._records.pop(entity_id, None) is not None

    async def count(self) -> int:
        self.call_count["count"] += 1
        return len(self._records)

    async def find_all(self) -> list[Any]:
        self.call_count["find_all"] += 1
        return [dataclasses.replace(self._records[key]) for key in sorted(self._records)]

    def _put(self, entity: Any) -> Any:
        if entity.id is None:
            entity = dataclasses.replace(entity, id=self._next_id)
        else:
            entity = dataclasses.replace(entity)

        if isinstance(entity.id, int):
            self._next_id = max(self._next_id, entity.id + 1)

        self._records[entity.id] = entity
        return entity
