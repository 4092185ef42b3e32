"""Infrastructure layer implementations for cacheaside."""

from cacheaside.infrastructure.backends import InMemoryCacheBackend, RedisCacheBackend
from cacheaside.infrastructure.key_builders import DefaultKeyBuilder
from cacheaside.infrastructure.serializers import JsonSerializer
from cacheaside.infrastructure.stores import InMemoryEntityStore, SqlitePersonStore

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "InMemoryEntityStore",
    "SqlitePersonStore",
]
