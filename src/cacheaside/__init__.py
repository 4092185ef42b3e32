"""cacheaside - cache-aside access layer for entity stores.

Coordinates a fast key-value cache with a slower authoritative store:
reads are served from the cache and populate it on a miss when the
policy allows, writes go through to the store and always refresh the
cache, and deletes invalidate the whole cache region.

Example:
    from cacheaside import (
        CacheAsideCoordinator,
        CachePolicy,
        CacheRegion,
        DefaultKeyBuilder,
        InMemoryCacheBackend,
        JsonSerializer,
        LastFetchedSlot,
        Person,
        SqlitePersonStore,
    )

    backend = InMemoryCacheBackend()
    serializer = JsonSerializer()
    region = CacheRegion(
        policy=CachePolicy.for_persons(min_cacheable_age=29),
        backend=backend,
        key_builder=DefaultKeyBuilder(),
        serializer=serializer,
    )
    coordinator = CacheAsideCoordinator(
        store=SqlitePersonStore("data/persons.db"),
        region=region,
        slot=LastFetchedSlot(backend, serializer, decoder=Person.from_dict),
    )

    person = await coordinator.read(3)    # miss, fetched, cached (age >= 29)
    person = await coordinator.read(3)    # hit, no store call
    await coordinator.write(person)       # store + cache, always
    await coordinator.delete(3)           # store, then clears "persons:*"
"""

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
    LAST_FETCHED_KEY,
    CacheAsideCoordinator,
    CacheRegion,
    LastFetchedSlot,
)
from cacheaside.decorators import cache_evict, cache_put, cacheable
from cacheaside.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    InMemoryEntityStore,
    JsonSerializer,
    RedisCacheBackend,
    SqlitePersonStore,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CachePolicy",
    "Person",
    # Errors
    "CacheAsideError",
    "EntityNotFoundError",
    "DependencyUnavailableError",
    "CacheUnavailableError",
    "StoreUnavailableError",
    "SerializationError",
    # Core interfaces
    "ICacheBackend",
    "IEntityStore",
    "IKeyBuilder",
    "ISerializer",
    # Core services
    "CacheAsideCoordinator",
    "CacheRegion",
    "LastFetchedSlot",
    "LAST_FETCHED_KEY",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "InMemoryEntityStore",
    "SqlitePersonStore",
    # Decorators
    "cacheable",
    "cache_put",
    "cache_evict",
]
