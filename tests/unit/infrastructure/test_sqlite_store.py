"""Tests for SqlitePersonStore."""

from pathlib import Path

import pytest
import pytest_asyncio

from cacheaside.core.entities import Person
from cacheaside.core.errors import StoreUnavailableError
from cacheaside.infrastructure.stores.sqlite import SqlitePersonStore


@pytest_asyncio.fixture
async def sqlite_store(tmp_path: Path) -> SqlitePersonStore:
    """Create a store with an initialized schema."""
    store = SqlitePersonStore(tmp_path / "data" / "persons.db")
    await store.init_schema()
    return store


class TestSqlitePersonStore:
    """Tests for SqlitePersonStore."""

    @pytest.mark.asyncio
    async def test_init_schema_creates_directory(self, tmp_path: Path) -> None:
        """Test that the database directory is created on init."""
        store = SqlitePersonStore(tmp_path / "nested" / "dir" / "persons.db")

        await store.init_schema()
        await store.init_schema()

        assert store.db_path.exists()
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, sqlite_store: SqlitePersonStore) -> None:
        """Test that new persons get generated ids."""
        p1 = await sqlite_store.save(Person(firstname="p1", lastname="test", age=25))
        p2 = await sqlite_store.save(Person(firstname="p2", lastname="test", age=28))

        assert p1.id == 1
        assert p2.id == 2
        assert await sqlite_store.get(2) == p2

    @pytest.mark.asyncio
    async def test_save_upserts_by_id(self, sqlite_store: SqlitePersonStore) -> None:
        """Test that saving with an id updates in place or inserts."""
        await sqlite_store.save(Person(firstname="p3", lastname="test", age=60))

        updated = await sqlite_store.save(
            Person(id=1, firstname="p3", lastname="test", age=30)
        )
        inserted = await sqlite_store.save(
            Person(id=7, firstname="p7", lastname="test", age=70)
        )

        assert updated == await sqlite_store.get(1)
        assert inserted == await sqlite_store.get(7)
        assert await sqlite_store.count() == 2

    @pytest.mark.asyncio
    async def test_get_missing(self, sqlite_store: SqlitePersonStore) -> None:
        """Test that a missing id is None."""
        assert await sqlite_store.get(42) is None

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, sqlite_store: SqlitePersonStore) -> None:
        """Test deleting present and missing ids."""
        person = await sqlite_store.save(Person(firstname="p1", lastname="test", age=25))

        assert await sqlite_store.delete(person.id) is True
        assert await sqlite_store.delete(person.id) is False
        assert await sqlite_store.get(person.id) is None

    @pytest.mark.asyncio
    async def test_find_all(self, sqlite_store: SqlitePersonStore) -> None:
        """Test listing persons ordered by id."""
        for name, age in (("p1", 25), ("p2", 28), ("p3", 60)):
            await sqlite_store.save(Person(firstname=name, lastname="test", age=age))

        persons = await sqlite_store.find_all()

        assert [p.firstname for p in persons] == ["p1", "p2", "p3"]
        assert [p.age for p in persons] == [25, 28, 60]

    @pytest.mark.asyncio
    async def test_query_failure_is_translated(self, tmp_path: Path) -> None:
        """Test that driver errors surface as StoreUnavailableError."""
        store = SqlitePersonStore(tmp_path / "empty.db")

        with pytest.raises(StoreUnavailableError):
            await store.get(1)
