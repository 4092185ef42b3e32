"""Façade settings read from the environment."""

import os
from dataclasses import dataclass
from datetime import timedelta


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Runtime configuration of the person service.

    Leaving ``redis_url`` unset runs with an in-process cache, which is
    enough for a single worker and for tests.
    """

    database_path: str = "data/persons.db"
    redis_url: str | None = None
    cache_prefix: str = "cacheaside"
    cache_ttl_seconds: int = 0  # 0 = entries never expire
    min_cacheable_age: int = 29
    evict_all_entries: bool = True
    cache_timeout: float = 5.0
    store_timeout: float = 5.0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @property
    def cache_ttl(self) -> timedelta | None:
        """Get the cache TTL, or None when entries never expire."""
        if self.cache_ttl_seconds <= 0:
            return None
        return timedelta(seconds=self.cache_ttl_seconds)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            database_path=os.getenv("CACHEASIDE_DATABASE_PATH", cls.database_path),
            redis_url=os.getenv("REDIS_URL") or None,
            cache_prefix=os.getenv("CACHEASIDE_CACHE_PREFIX", cls.cache_prefix),
            cache_ttl_seconds=int(os.getenv("CACHEASIDE_CACHE_TTL", "0")),
            min_cacheable_age=int(os.getenv("CACHEASIDE_MIN_CACHEABLE_AGE", "29")),
            evict_all_entries=_env_bool("CACHEASIDE_EVICT_ALL_ENTRIES", True),
            cache_timeout=float(os.getenv("CACHEASIDE_CACHE_TIMEOUT", "5.0")),
            store_timeout=float(os.getenv("CACHEASIDE_STORE_TIMEOUT", "5.0")),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", "8080")),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
