"""Core interfaces (Protocol classes) for cacheaside."""

from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.serializer import ISerializer
from cacheaside.core.interfaces.store import IEntityStore

__all__ = [
    "ICacheBackend",
    "IEntityStore",
    "IKeyBuilder",
    "ISerializer",
]
