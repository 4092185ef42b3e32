"""Application factory for the person service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cacheaside.adapters.fastapi.router import create_router
from cacheaside.adapters.fastapi.settings import Settings
from cacheaside.core.entities.cache_policy import CachePolicy
from cacheaside.core.entities.person import Person
from cacheaside.core.errors import DependencyUnavailableError, EntityNotFoundError
from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.store import IEntityStore
from cacheaside.core.services.cache_region import CacheRegion
from cacheaside.core.services.coordinator import CacheAsideCoordinator
from cacheaside.core.services.last_fetched import LastFetchedSlot
from cacheaside.infrastructure.backends.memory import InMemoryCacheBackend
from cacheaside.infrastructure.backends.redis_backend import RedisCacheBackend
from cacheaside.infrastructure.key_builders.default import DefaultKeyBuilder
from cacheaside.infrastructure.serializers.json import JsonSerializer
from cacheaside.infrastructure.stores.sqlite import SqlitePersonStore

logger = logging.getLogger(__name__)

SEED_PERSONS = (
    Person(firstname="p1", lastname="test", age=25),
    Person(firstname="p2", lastname="test", age=28),
    Person(firstname="p3", lastname="test", age=60),
)


def build_cache_backend(settings: Settings) -> ICacheBackend:
    """Create the cache backend selected by the settings."""
    if settings.redis_url:
        return RedisCacheBackend(
            redis_url=settings.redis_url,
            key_prefix=settings.cache_prefix,
            socket_timeout=settings.cache_timeout,
        )
    return InMemoryCacheBackend()


def build_coordinator(
    settings: Settings,
    store: IEntityStore,
    cache_backend: ICacheBackend,
) -> CacheAsideCoordinator:
    """Wire the persons region, the last-fetched slot and the store."""
    serializer = JsonSerializer()
    policy = CachePolicy.for_persons(
        min_cacheable_age=settings.min_cacheable_age,
        ttl=settings.cache_ttl,
        evict_all_entries=settings.evict_all_entries,
    )
    region = CacheRegion(
        policy=policy,
        backend=cache_backend,
        key_builder=DefaultKeyBuilder(),
        serializer=serializer,
    )
    slot_backend = cache_backend
    if isinstance(cache_backend, InMemoryCacheBackend):
        # region LRU churn must not drop the slot
        slot_backend = InMemoryCacheBackend(maxsize=1)
    slot = LastFetchedSlot(
        backend=slot_backend,
        serializer=serializer,
        decoder=Person.from_dict,
    )
    return CacheAsideCoordinator(store=store, region=region, slot=slot)


async def seed_store(store: IEntityStore) -> None:
    """Insert the demo persons when the store is empty."""
    count = await store.count()
    logger.info("Current person count is %d.", count)
    if count > 0:
        return

    for person in SEED_PERSONS:
        await store.save(person)
    logger.info("Data: %s.", await store.find_all())


def create_app(
    settings: Settings | None = None,
    store: IEntityStore | None = None,
    cache_backend: ICacheBackend | None = None,
    seed: bool = True,
) -> FastAPI:
    """Create the person service.

    Args:
        settings: Runtime settings. Read from the environment if omitted.
        store: Authoritative store. A SQLite store at
            ``settings.database_path`` if omitted.
        cache_backend: Cache backend. Chosen from ``settings.redis_url``
            if omitted.
        seed: Insert the demo persons at startup when the store is empty.

    Returns:
        The FastAPI application.
    """
    settings = settings or Settings.from_env()
    if store is None:
        store = SqlitePersonStore(settings.database_path, timeout=settings.store_timeout)
    if cache_backend is None:
        cache_backend = build_cache_backend(settings)

    coordinator = build_coordinator(settings, store, cache_backend)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan handler."""
        if isinstance(store, SqlitePersonStore):
            logger.info("Initializing SQLite database at %s", store.db_path)
            await store.init_schema()
        if seed:
            await seed_store(store)
        yield
        if isinstance(cache_backend, RedisCacheBackend):
            logger.info("Closing Redis connection")
            await cache_backend.close()

    app = FastAPI(
        title="cacheaside person service",
        description="Person CRUD with a cache-aside Redis layer",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.coordinator = coordinator

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(DependencyUnavailableError)
    async def unavailable_handler(
        request: Request, exc: DependencyUnavailableError
    ) -> JSONResponse:
        logger.error("Dependency unavailable on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    app.include_router(create_router(coordinator))
    return app
