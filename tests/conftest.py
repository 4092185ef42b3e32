"""Pytest configuration for cacheaside tests."""

import pytest

from cacheaside import (
    CacheAsideCoordinator,
    CachePolicy,
    CacheRegion,
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    InMemoryEntityStore,
    JsonSerializer,
    LastFetchedSlot,
    Person,
)


def seed_persons() -> list[Person]:
    """The three demo persons, ids 1-3."""
    return [
        Person(id=1, firstname="p1", lastname="test", age=25),
        Person(id=2, firstname="p2", lastname="test", age=28),
        Person(id=3, firstname="p3", lastname="test", age=60),
    ]


@pytest.fixture
def store() -> InMemoryEntityStore:
    """Create a store holding the demo persons."""
    return InMemoryEntityStore(seed_persons())


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    """Create an in-memory cache backend."""
    return InMemoryCacheBackend(maxsize=100)


@pytest.fixture
def serializer() -> JsonSerializer:
    """Create a JSON serializer."""
    return JsonSerializer()


@pytest.fixture
def region(backend: InMemoryCacheBackend, serializer: JsonSerializer) -> CacheRegion:
    """Create the persons region with the age < 29 rule."""
    return CacheRegion(
        policy=CachePolicy.for_persons(min_cacheable_age=29),
        backend=backend,
        key_builder=DefaultKeyBuilder(),
        serializer=serializer,
    )


@pytest.fixture
def slot(backend: InMemoryCacheBackend, serializer: JsonSerializer) -> LastFetchedSlot:
    """Create the last-fetched slot."""
    return LastFetchedSlot(backend, serializer, decoder=Person.from_dict)


@pytest.fixture
def coordinator(
    store: InMemoryEntityStore,
    region: CacheRegion,
    slot: LastFetchedSlot,
) -> CacheAsideCoordinator:
    """Create a coordinator over the demo store."""
    return CacheAsideCoordinator(store=store, region=region, slot=slot)
