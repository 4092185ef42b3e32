"""Core domain layer for cacheaside."""

from cacheaside.core.entities import CachePolicy, Person
from cacheaside.core.errors import (
    CacheAsideError,
    CacheUnavailableError,
    DependencyUnavailableError,
    EntityNotFoundError,
    SerializationError,
    StoreUnavailableError,
)
from cacheaside.core.interfaces import (
    ICacheBackend,
    IEntityStore,
    IKeyBuilder,
    ISerializer,
)
from cacheaside.core.services import (
    CacheAsideCoordinator,
    CacheRegion,
    LastFetchedSlot,
)

__all__ = [
    # Entities
    "CachePolicy",
    "Person",
    # Errors
    "CacheAsideError",
    "EntityNotFoundError",
    "DependencyUnavailableError",
    "CacheUnavailableError",
    "StoreUnavailableError",
    "SerializationError",
    # Interfaces
    "ICacheBackend",
    "IEntityStore",
    "IKeyBuilder",
    "ISerializer",
    # Services
    "CacheAsideCoordinator",
    "CacheRegion",
    "LastFetchedSlot",
]
