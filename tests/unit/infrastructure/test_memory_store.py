"""Tests for InMemoryEntityStore."""

import pytest

from cacheaside.core.entities import Person
from cacheaside.infrastructure.stores.memory import InMemoryEntityStore


class TestInMemoryEntityStore:
    """Tests for InMemoryEntityStore."""

    @pytest.mark.asyncio
    async def test_save_assigns_ids(self) -> None:
        """Test id assignment for new entities."""
        store = InMemoryEntityStore()

        first = await store.save(Person(firstname="p1", lastname="test", age=25))
        second = await store.save(Person(firstname="p2", lastname="test", age=28))

        assert (first.id, second.id) == (1, 2)

    @pytest.mark.asyncio
    async def test_save_upserts(self, store: InMemoryEntityStore) -> None:
        """Test that saving an existing id replaces the record."""
        await store.save(Person(id=2, firstname="p2", lastname="changed", age=40))

        person = await store.get(2)

        assert person is not None
        assert person.lastname == "changed"
        assert await store.count() == 3

    @pytest.mark.asyncio
    async def test_returns_copies(self, store: InMemoryEntityStore) -> None:
        """Test that callers cannot mutate stored records."""
        person = await store.get(1)
        assert person is not None
        person.age = 99

        again = await store.get(1)

        assert again is not None and again.age == 25

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store: InMemoryEntityStore) -> None:
        """Test deleting present and missing ids."""
        assert await store.delete(1) is True
        assert await store.delete(1) is False
        assert await store.get(1) is None

    @pytest.mark.asyncio
    async def test_find_all_ordered(self, store: InMemoryEntityStore) -> None:
        """Test listing all records ordered by id."""
        await store.save(Person(id=10, firstname="p10", lastname="test", age=1))

        assert [p.id for p in await store.find_all()] == [1, 2, 3, 10]

    @pytest.mark.asyncio
    async def test_call_count(self, store: InMemoryEntityStore) -> None:
        """Test per-method call counting and reset."""
        await store.get(1)
        await store.get(2)
        await store.count()

        assert store.call_count["get"] == 2
        assert store.call_count["count"] == 1

        store.reset_call_count()

        assert all(count == 0 for count in store.call_count.values())
