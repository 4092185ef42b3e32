"""Error taxonomy for cacheaside."""

from typing import Any


class CacheAsideError(Exception):
    """Base class for all cacheaside errors."""

    pass


class EntityNotFoundError(CacheAsideError):
    """Raised when an entity is absent from the authoritative store."""

    def __init__(self, entity_id: Any, cache_name: str | None = None) -> None:
        self.entity_id = entity_id
        self.cache_name = cache_name
        where = f" in {cache_name}" if cache_name else ""
        super().__init__(f"Entity {entity_id!r} not found{where}")


class DependencyUnavailableError(CacheAsideError):
    """Raised when the cache or the store cannot be reached."""

    pass


class CacheUnavailableError(DependencyUnavailableError):
    """Raised when the cache backend fails or times out."""

    pass


class StoreUnavailableError(DependencyUnavailableError):
    """Raised when the authoritative store fails or times out."""

    pass


class SerializationError(CacheAsideError):
    """Raised when a value cannot be serialized or deserialized."""

    pass
