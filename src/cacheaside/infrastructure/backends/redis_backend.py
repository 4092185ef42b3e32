"""Redis cache backend implementation."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta

import redis.asyncio as redis
from redis.exceptions import RedisError

from cacheaside.core.errors import CacheUnavailableError
from cacheaside.infrastructure.key_builders.default import KEY_SEPARATOR


@contextmanager
def _translate_errors(operation: str, key: str) -> Iterator[None]:
    """Re-raise Redis client failures as CacheUnavailableError."""
    try:
        yield
    except RedisError as e:
        raise CacheUnavailableError(f"Redis {operation} failed for {key!r}: {e}") from e


class RedisCacheBackend:
    """Redis cache backend for shared, multi-process deployments.

    Supports per-key TTL and SCAN-based region deletion. Every key is
    stored under ``key_prefix`` so clearing never reaches foreign keys.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "cacheaside",
        default_ttl: int | None = None,
        socket_timeout: float | None = 5.0,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL.
            key_prefix: Prefix for all cache keys.
            default_ttl: TTL in seconds applied when ``set`` gets none.
                None means keys never expire.
            socket_timeout: Connect and command timeout in seconds.
            client: Pre-built client, used instead of ``redis_url``.
        """
        if client is None:
            client = redis.from_url(  # type: ignore[no-untyped-call]
                redis_url,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
            )
        self._redis: redis.Redis = client
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.

        Raises:
            CacheUnavailableError: If Redis cannot be reached.
        """
        with _translate_errors("GET", key):
            return await self._redis.get(self._prefixed_key(key))

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
                A zero or negative TTL means no expiry. Positive TTLs are
                sent in milliseconds so sub-second values still expire.

        Raises:
            CacheUnavailableError: If Redis cannot be reached.
        """
        prefixed_key = self._prefixed_key(key)
        if ttl is None and self._default_ttl is not None:
            ttl = timedelta(seconds=self._default_ttl)
        milliseconds = int(ttl / timedelta(milliseconds=1)) if ttl is not None else 0

        with _translate_errors("SET", key):
            if milliseconds > 0:
                await self._redis.set(prefixed_key, value, px=milliseconds)
            else:
                await self._redis.set(prefixed_key, value)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        with _translate_errors("DEL", key):
            result = await self._redis.delete(self._prefixed_key(key))
        return result > 0

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        with _translate_errors("EXISTS", key):
            result = await self._redis.exists(self._prefixed_key(key))
        return result > 0

    async def clear(self) -> None:
        """Clear all cached values with our prefix.

        Note: This only clears keys with our prefix, not the entire Redis DB.
        """
        await self._delete_by_pattern(f"{self._key_prefix}{KEY_SEPARATOR}*")

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
            pattern: Glob-style pattern to match keys, without the prefix.

        Returns:
            Number of keys deleted.
        """
        return await self._delete_by_pattern(self._prefixed_key(pattern))

    async def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a full pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        with _translate_errors("SCAN", pattern):
            while True:
                cursor, keys = await self._redis.scan(cursor, match=pattern, count=100)

                if keys:
                    deleted = await self._redis.delete(*keys)
                    count += deleted

                if cursor == 0:
                    break

        return count

    def _prefixed_key(self, key: str) -> str:
        """Add the backend prefix to a caller key.

        Always applied, even when the key already starts with the prefix,
        so a region named like the prefix stays inside its own namespace.

        Args:
            key: The cache key.

        Returns:
            The key with prefix.
        """
        return f"{self._key_prefix}{KEY_SEPARATOR}{key}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
