"""Cache backend implementations."""

from cacheaside.infrastructure.backends.memory import InMemoryCacheBackend
from cacheaside.infrastructure.backends.redis_backend import RedisCacheBackend

__all__ = [
    "InMemoryCacheBackend",
    "RedisCacheBackend",
]
