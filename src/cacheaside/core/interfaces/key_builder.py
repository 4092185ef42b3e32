"""Key builder interface."""

from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys for entity regions.

    Key builders are responsible for creating deterministic cache
    keys from a region name and an entity identifier.
    """

    def build(self, region: str, entity_id: Any) -> str:
        """Build the cache key of one entity.

        Args:
            region: The cache region name (e.g. ``"persons"``).
            entity_id: The entity identifier.

        Returns:
            A unique string key, e.g. ``"persons:42"``.
        """
        ...

    def region_name(self, region: str) -> str:
        """Return the full region name as seen by the backend.

        Args:
            region: The cache region name.

        Returns:
            The region name including any global prefix.
        """
        ...
