"""Entity store implementations."""

from cacheaside.infrastructure.stores.memory import InMemoryEntityStore
from cacheaside.infrastructure.stores.sqlite import SqlitePersonStore

__all__ = [
    "InMemoryEntityStore",
    "SqlitePersonStore",
]
