"""Cache region - one named cache bound to its policy."""

import logging
from datetime import timedelta
from typing import Any

from cacheaside.core.entities.cache_policy import CachePolicy
from cacheaside.core.errors import SerializationError
from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.key_builder import IKeyBuilder
from cacheaside.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


class CacheRegion:
    """A named cache region.

    Composes backend, key builder, and serializer under a CachePolicy,
    and keeps hit/miss statistics. The region never decides *whether*
    a value should be cached; callers (the coordinator or the
    decorators) apply the policy rules and call ``put``.
    """

    def __init__(
        self,
        policy: CachePolicy,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
    ) -> None:
        """Initialize the cache region.

        Args:
            policy: The caching rules of this region.
            backend: The cache backend to use for storage.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
        """
        self._policy = policy
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer

        # Statistics
        self._hits = 0
        self._misses = 0
        self._decode_errors = 0

    @property
    def policy(self) -> CachePolicy:
        """Get the region policy."""
        return self._policy

    @property
    def name(self) -> str:
        """Get the region name."""
        return self._policy.cache_name

    @property
    def stats(self) -> dict[str, int]:
        """Get region statistics.

        Returns:
            Dictionary with hits, misses, decode errors and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "decode_errors": self._decode_errors,
            "total": self._hits + self._misses,
        }

    def key_for(self, entity_id: Any) -> str:
        """Build the cache key of an entity in this region."""
        return self._key_builder.build(self._policy.cache_name, entity_id)

    async def get(self, entity_id: Any) -> Any | None:
        """Look up an entity.

        Entries that cannot be decoded are reported as a miss so the
        caller falls through to the store.

        Args:
            entity_id: The entity identifier.

        Returns:
            The cached entity, or None on a miss.
        """
        if not self._policy.enabled:
            return None

        key = self.key_for(entity_id)
        cached_data = await self._backend.get(key)

        if cached_data is None:
            self._misses += 1
            logger.debug("Cache MISS: %s", key)
            return None

        try:
            value = self._policy.decode(self._serializer.deserialize(cached_data))
        except (SerializationError, KeyError, TypeError, ValueError) as e:
            self._misses += 1
            self._decode_errors += 1
            logger.warning("Undecodable cache entry %s treated as a miss: %s", key, e)
            return None

        self._hits += 1
        logger.debug("Cache HIT: %s", key)
        return value

    async def put(
        self,
        entity_id: Any,
        value: Any,
        ttl: timedelta | None = None,
    ) -> str | None:
        """Store an entity, overwriting any previous entry.

        Args:
            entity_id: The entity identifier.
            value: The entity to cache.
            ttl: Optional TTL. Uses the policy TTL if not provided.

        Returns:
            The cache key written, or None when the region is disabled.
        """
        if not self._policy.enabled:
            return None

        key = self.key_for(entity_id)
        effective_ttl = ttl or self._policy.ttl

        serialized = self._serializer.serialize(value)
        await self._backend.set(key, serialized, effective_ttl)
        logger.debug("Cache SET: %s (TTL: %s)", key, effective_ttl)
        return key

    async def evict(self, entity_id: Any) -> bool:
        """Remove a single entity from the region.

        Returns:
            True if an entry was removed.
        """
        if not self._policy.enabled:
            return False

        key = self.key_for(entity_id)
        deleted = await self._backend.delete(key)
        logger.debug("Cache EVICT: %s (existed: %s)", key, deleted)
        return deleted

    async def clear(self) -> int:
        """Remove every entry of the region.

        Returns:
            Number of entries removed.
        """
        if not self._policy.enabled:
            return 0

        region = self._key_builder.region_name(self._policy.cache_name)
        count = await self._backend.delete_region(region)
        logger.debug("Cache CLEAR: %s (%d entries)", region, count)
        return count
