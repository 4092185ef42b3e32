"""SQLite person store."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from cacheaside.core.entities.person import Person
from cacheaside.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

CREATE_PERSONS_TABLE = """
    CREATE TABLE IF NOT EXISTS persons (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        firstname TEXT NOT NULL,
        lastname TEXT NOT NULL,
        age INTEGER NOT NULL
    )
"""


class SqlitePersonStore:
    """Relational person repository backed by SQLite.

    Opens one connection per call. A file path is required: an
    in-memory database would not survive between calls.
    """

    def __init__(self, db_path: str | Path, timeout: float = 5.0) -> None:
        """Initialize the store.

        Args:
            db_path: Path of the SQLite database file.
            timeout: Seconds to wait for a database lock.
        """
        self._db_path = Path(db_path)
        self._timeout = timeout

    @property
    def db_path(self) -> Path:
        """Get the database file path."""
        return self._db_path

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection, translating driver failures."""
        try:
            db = await aiosqlite.connect(self._db_path, timeout=self._timeout)
        except aiosqlite.Error as e:
            raise StoreUnavailableError(f"Cannot open {self._db_path}: {e}") from e

        db.row_factory = aiosqlite.Row
        try:
            yield db
        except aiosqlite.Error as e:
            raise StoreUnavailableError(f"SQLite query failed: {e}") from e
        finally:
            await db.close()

    async def init_schema(self) -> None:
        """Create the persons table if it does not exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with self._connect() as db:
            await db.execute(CREATE_PERSONS_TABLE)
            await db.commit()
        logger.debug("Schema ready at %s", self._db_path)

    async def get(self, entity_id: int) -> Person | None:
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT id, firstname, lastname, age FROM persons WHERE id = ?",
                (entity_id,),
            )
            row = await cursor.fetchone()
        return _row_to_person(row) if row is not None else None

    async def save(self, entity: Person) -> Person:
        async with self._connect() as db:
            if entity.id is None:
                cursor = await db.execute(
                    "INSERT INTO persons (firstname, lastname, age) VALUES (?, ?, ?)",
                    (entity.firstname, entity.lastname, entity.age),
                )
                person_id = cursor.lastrowid
            else:
                await db.execute(
                    """INSERT INTO persons (id, firstname, lastname, age)
                       VALUES (?, ?, ?, ?)
                       ON CONFLICT(id) DO UPDATE SET
                           firstname = excluded.firstname,
                           lastname = excluded.lastname,
                           age = excluded.age""",
                    (entity.id, entity.firstname, entity.lastname, entity.age),
                )
                person_id = entity.id
            await db.commit()

        return Person(
            id=person_id,
            firstname=entity.firstname,
            lastname=entity.lastname,
            age=entity.age,
        )

    async def delete(self, entity_id: int) -> bool:
        async with self._connect() as db:
            cursor = await db.execute("DELETE FROM persons WHERE id = ?", (entity_id,))
            await db.commit()
            return cursor.rowcount > 0

    async def count(self) -> int:
        async with self._connect() as db:
            cursor = await db.execute("SELECT COUNT(*) FROM persons")
            row = await cursor.fetchone()
        return int(row[0]) if row is not None else 0

    async def find_all(self) -> list[Person]:
        async with self._connect() as db:
            cursor = await db.execute(
                "SELECT id, firstname, lastname, age FROM persons ORDER BY id"
            )
            rows = await cursor.fetchall()
        return [_row_to_person(row) for row in rows]


def _row_to_person(row: aiosqlite.Row) -> Person:
    return Person(
        id=row["id"],
        firstname=row["firstname"],
        lastname=row["lastname"],
        age=row["age"],
    )
