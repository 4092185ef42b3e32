"""In-memory cache backend implementation."""

import fnmatch
import math
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from cacheaside.infrastructure.key_builders.default import KEY_SEPARATOR


def _expires_at(key: str, value: tuple[bytes, float | None], now: float) -> float:
    """Per-entry expiry for TLRUCache. Entries without a TTL never expire."""
    ttl = value[1]
    if ttl is None:
        return math.inf
    return now + ttl


class InMemoryCacheBackend:
    """In-memory cache backend using LRU with per-entry TTL.

    Suitable for single-process deployments and tests. Uses cachetools'
    TLRUCache so each entry carries its own expiry.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: TTL in seconds applied when ``set`` gets none.
                None means entries never expire.
            timer: Clock used for expiry.
        """
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, tuple[bytes, float | None]] = TLRUCache(
            maxsize=maxsize,
            ttu=_expires_at,
            timer=timer,
        )

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        item: Any = self._cache.get(key)
        if item is None:
            return None
        return item[0]

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses the default.
                A zero TTL means no expiry.
        """
        seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        if seconds is not None and seconds <= 0:
            seconds = None
        self._cache[key] = (value, seconds)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    async def delete_region(self, region: str) -> int:
        """Delete every key under ``"<region>:"``.

        Args:
            region: The region name.

        Returns:
            Number of keys deleted.
        """
        return await self.delete_pattern(f"{region}{KEY_SEPARATOR}*")

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        self._cache.expire()
        keys_to_delete = [
            key for key in list(self._cache.keys())
            if fnmatch.fnmatchcase(key, pattern)
        ]

        count = 0
        for key in keys_to_delete:
            try:
                del self._cache[key]
                count += 1
            except KeyError:
                pass

        return count
