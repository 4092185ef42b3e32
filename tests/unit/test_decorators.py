"""Tests for cache decorators."""

import pytest

from cacheaside import (
    CacheRegion,
    InMemoryCacheBackend,
    InMemoryEntityStore,
    Person,
)
from cacheaside.decorators import cache_evict, cache_put, cacheable


class TestCacheableDecorator:
    """Tests for @cacheable."""

    @pytest.mark.asyncio
    async def test_caches_result(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test that a cacheable result skips the function on the next call."""

        @cacheable(region, key="{person_id}")
        async def get_person(person_id: int) -> Person | None:
            return await store.get(person_id)

        first = await get_person(3)
        second = await get_person(person_id=3)

        assert first == second
        assert store.call_count["get"] == 1

    @pytest.mark.asyncio
    async def test_policy_predicate_applies_by_default(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test that the region rule (age < 29) is used when unless is omitted."""

        @cacheable(region, key="{person_id}")
        async def get_person(person_id: int) -> Person | None:
            return await store.get(person_id)

        await get_person(1)
        await get_person(1)

        assert store.call_count["get"] == 2

    @pytest.mark.asyncio
    async def test_custom_unless(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test an explicit predicate replacing the policy one."""

        @cacheable(region, key="{person_id}", unless=lambda p: p.age > 50)
        async def get_person(person_id: int) -> Person | None:
            return await store.get(person_id)

        await get_person(1)
        await get_person(1)
        await get_person(3)
        await get_person(3)

        assert store.call_count["get"] == 3

    @pytest.mark.asyncio
    async def test_none_result_not_cached(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test that absence is never cached."""

        @cacheable(region, key="{person_id}")
        async def get_person(person_id: int) -> Person | None:
            return await store.get(person_id)

        assert await get_person(99) is None
        assert await get_person(99) is None
        assert store.call_count["get"] == 2

    @pytest.mark.asyncio
    async def test_callable_key(
        self, region: CacheRegion, backend: InMemoryCacheBackend
    ) -> None:
        """Test a key function instead of a template."""

        @cacheable(region, key=lambda first, last: f"{first}-{last}")
        async def find(first: str, last: str) -> Person:
            return Person(firstname=first, lastname=last, age=40)

        await find("ada", "lovelace")

        assert await backend.exists("persons:ada-lovelace") is True


class TestCachePutDecorator:
    """Tests for @cache_put."""

    @pytest.mark.asyncio
    async def test_always_stores_result(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test write-through ignoring the predicate."""

        @cache_put(region, key="{person.id}")
        async def update_person(person: Person) -> Person:
            return await store.save(person)

        await update_person(Person(id=1, firstname="p1", lastname="test", age=20))

        cached = await region.get(1)
        assert cached is not None and cached.age == 20

    @pytest.mark.asyncio
    async def test_runs_every_time(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test that the function is never short-circuited."""

        @cache_put(region, key="{person.id}")
        async def update_person(person: Person) -> Person:
            return await store.save(person)

        person = Person(id=3, firstname="p3", lastname="test", age=30)
        await update_person(person)
        await update_person(person)

        assert store.call_count["save"] == 2


class TestCacheEvictDecorator:
    """Tests for @cache_evict."""

    @pytest.mark.asyncio
    async def test_all_entries(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test region-wide eviction."""
        await region.put(1, Person(id=1, firstname="p1", lastname="test", age=25))
        await region.put(3, Person(id=3, firstname="p3", lastname="test", age=60))

        @cache_evict(region, all_entries=True)
        async def delete_person(person_id: int) -> None:
            await store.delete(person_id)

        await delete_person(3)

        assert await region.get(1) is None
        assert await region.get(3) is None

    @pytest.mark.asyncio
    async def test_single_key(
        self, region: CacheRegion, store: InMemoryEntityStore
    ) -> None:
        """Test single-key eviction."""
        await region.put(1, Person(id=1, firstname="p1", lastname="test", age=25))
        await region.put(3, Person(id=3, firstname="p3", lastname="test", age=60))

        @cache_evict(region, key="{person_id}")
        async def delete_person(person_id: int) -> None:
            await store.delete(person_id)

        await delete_person(3)

        assert await region.get(1) is not None
        assert await region.get(3) is None

    @pytest.mark.asyncio
    async def test_no_eviction_when_function_fails(self, region: CacheRegion) -> None:
        """Test that eviction only follows a successful call."""
        await region.put(3, Person(id=3, firstname="p3", lastname="test", age=60))

        @cache_evict(region, all_entries=True)
        async def delete_person(person_id: int) -> None:
            raise RuntimeError("store down")

        with pytest.raises(RuntimeError):
            await delete_person(3)

        assert await region.get(3) is not None

    def test_requires_key_or_all_entries(self, region: CacheRegion) -> None:
        """Test the decorator arguments are validated."""
        with pytest.raises(ValueError):
            cache_evict(region)
