"""Entity store interface."""

from typing import Any, Protocol


class IEntityStore(Protocol):
    """Contract for the authoritative entity store.

    The store is the source of truth. Implementations translate their
    transport failures into StoreUnavailableError.
    """

    async def get(self, entity_id: Any) -> Any | None:
        """Fetch an entity by id.

        Args:
            entity_id: The entity identifier.

        Returns:
            The entity, or None if it does not exist.
        """
        ...

    async def save(self, entity: Any) -> Any:
        """Insert or update an entity by id.

        Args:
            entity: The entity to persist. An entity without an id
                is assigned a new one.

        Returns:
            The persisted entity, carrying its id.
        """
        ...

    async def delete(self, entity_id: Any) -> bool:
        """Delete an entity by id. Deleting a missing id is not an error.

        Args:
            entity_id: The entity identifier.

        Returns:
            True if a record was removed, False otherwise.
        """
        ...

    async def count(self) -> int:
        """Return the number of stored entities."""
        ...

    async def find_all(self) -> list[Any]:
        """Return every stored entity ordered by id."""
        ...
