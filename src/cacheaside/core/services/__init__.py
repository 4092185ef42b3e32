"""Domain services for cacheaside."""

from cacheaside.core.services.cache_region import CacheRegion
from cacheaside.core.services.coordinator import CacheAsideCoordinator
from cacheaside.core.services.last_fetched import LAST_FETCHED_KEY, LastFetchedSlot

__all__ = [
    "CacheAsideCoordinator",
    "CacheRegion",
    "LastFetchedSlot",
    "LAST_FETCHED_KEY",
]
