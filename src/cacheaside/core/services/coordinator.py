"""Cache-aside coordinator - read, write and delete through a cache region."""

import logging
from typing import Any

from cacheaside.core.entities.cache_policy import CachePolicy
from cacheaside.core.errors import EntityNotFoundError
from cacheaside.core.interfaces.store import IEntityStore
from cacheaside.core.services.cache_region import CacheRegion
from cacheaside.core.services.last_fetched import LastFetchedSlot

logger = logging.getLogger(__name__)


class CacheAsideCoordinator:
    """Mediates every read and write of one entity type.

    Reads are served from the region when possible and populate it on a
    miss only if the policy predicate allows. Writes always go to the
    store and always refresh the region. Deletes remove the record and
    then invalidate the region (whole region or single key, per policy).

    No locking is performed. Two concurrent misses may both fetch and
    both populate (last write wins), and a read that fetched before a
    concurrent write committed may put the superseded value back.

    Example:
        backend = InMemoryCacheBackend()
        region = CacheRegion(
            policy=CachePolicy.for_persons(),
            backend=backend,
            key_builder=DefaultKeyBuilder(),
            serializer=JsonSerializer(),
        )
        coordinator = CacheAsideCoordinator(
            store=InMemoryEntityStore(),
            region=region,
            slot=LastFetchedSlot(backend, JsonSerializer(), decoder=Person.from_dict),
        )
        person = await coordinator.read(1)
    """

    def __init__(
        self,
        store: IEntityStore,
        region: CacheRegion,
        slot: LastFetchedSlot | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            store: The authoritative store.
            region: The cache region of the entity type.
            slot: Optional last-fetched slot updated on every store fetch.
        """
        self._store = store
        self._region = region
        self._slot = slot

        self._skipped = 0

    @property
    def policy(self) -> CachePolicy:
        """Get the region policy."""
        return self._region.policy

    @property
    def region(self) -> CacheRegion:
        """Get the cache region."""
        return self._region

    @property
    def stats(self) -> dict[str, int]:
        """Get region statistics plus the number of skipped populations."""
        return {**self._region.stats, "skipped": self._skipped}

    async def read(self, entity_id: Any) -> Any:
        """Read an entity, preferring the cache.

        Args:
            entity_id: The entity identifier.

        Returns:
            The entity.

        Raises:
            EntityNotFoundError: If the entity is absent from the store.
        """
        cached = await self._region.get(entity_id)
        if cached is not None:
            return cached

        entity = await self._store.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_id, self._region.name)

        if self._slot is not None:
            await self._slot.put(entity)

        if self.policy.should_skip(entity):
            self._skipped += 1
            logger.debug(
                "Not caching %s: rejected by %s policy",
                self._region.key_for(entity_id),
                self._region.name,
            )
            return entity

        await self._region.put(entity_id, entity)
        return entity

    async def read_last_fetched(self) -> Any | None:
        """Return the last entity fetched from the store, if any."""
        if self._slot is None:
            return None
        return await self._slot.get()

    async def write(self, entity: Any) -> Any:
        """Persist an entity and refresh its cache entry.

        The cache entry is written whatever the policy predicate says.

        Args:
            entity: The entity to save.

        Returns:
            The persisted entity.
        """
        saved = await self._store.save(entity)
        await self._region.put(saved.id, saved)
        return saved

    async def delete(self, entity_id: Any) -> None:
        """Delete an entity and invalidate the region.

        Deleting an id that does not exist is not an error.

        Args:
            entity_id: The entity identifier.
        """
        existed = await self._store.delete(entity_id)
        if not existed:
            logger.debug("Delete of missing %s %r", self._region.name, entity_id)

        if self.policy.evict_all_entries:
            await self._region.clear()
        else:
            await self._region.evict(entity_id)

    async def count(self) -> int:
        """Return the number of stored entities."""
        return await self._store.count()

    async def find_all(self) -> list[Any]:
        """Return every stored entity."""
        return await self._store.find_all()
