"""Cache policy entity."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from cacheaside.core.entities.person import Person


@dataclass
class CachePolicy:
    """Caching rules attached to one entity type.

    A policy is the explicit form of a method-level caching annotation:
    it names the cache region, decides which read results may populate
    it, and controls how broadly a delete invalidates it.

    Attributes:
        cache_name: Region name. Every key of the region starts with it.
        unless: Conditional-skip predicate evaluated on a value fetched from
            the store. When it returns True the value is not cached on read.
            Writes ignore it.
        ttl: Per-entry expiry. None or zero means entries never expire.
        evict_all_entries: Clear the whole region on delete instead of the
            single key of the deleted id.
        decoder: Rebuilds an entity from its deserialized payload.
        enabled: When False the region is bypassed entirely.
    """

    cache_name: str
    unless: Callable[[Any], bool] | None = None
    ttl: timedelta | None = None
    evict_all_entries: bool = True
    decoder: Callable[[Any], Any] | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        """Normalize a zero TTL to no expiry."""
        if not self.cache_name:
            raise ValueError("cache_name must not be empty")
        if self.ttl is not None and self.ttl.total_seconds() <= 0:
            self.ttl = None

    def should_skip(self, value: Any) -> bool:
        """Check whether a fetched value is ineligible for read population."""
        if self.unless is None:
            return False
        return bool(self.unless(value))

    def decode(self, payload: Any) -> Any:
        """Turn a deserialized payload back into an entity."""
        if self.decoder is None:
            return payload
        return self.decoder(payload)

    @classmethod
    def for_persons(
        cls,
        min_cacheable_age: int = 29,
        ttl: timedelta | None = None,
        evict_all_entries: bool = True,
    ) -> "CachePolicy":
        """Create the policy for the ``persons`` region.

        People younger than ``min_cacheable_age`` are never cached on read.

        Args:
            min_cacheable_age: Lowest age that may populate the cache on read.
            ttl: Optional entry expiry.
            evict_all_entries: Clear the whole region on delete.

        Returns:
            A new CachePolicy instance.
        """
        return cls(
            cache_name="persons",
            unless=lambda person: person.age < min_cacheable_age,
            ttl=ttl,
            evict_all_entries=evict_all_entries,
            decoder=Person.from_dict,
        )
