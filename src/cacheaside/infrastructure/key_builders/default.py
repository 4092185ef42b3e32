"""Default key builder implementation."""

from typing import Any

KEY_SEPARATOR = ":"


class DefaultKeyBuilder:
    """Builds ``<region>:<id>`` keys, optionally under a global prefix.

    Region names and ids must not contain the separator, otherwise
    keys of one region could collide with, or be cleared along with,
    keys of another.
    """

    def __init__(
        self,
        prefix: str | None = None,
        separator: str = KEY_SEPARATOR,
    ) -> None:
        """Initialize the key builder.

        Args:
            prefix: Optional prefix for all cache keys.
            separator: Separator between key components.
        """
        if prefix is not None:
            self._validate(prefix, "prefix", separator)
        self._prefix = prefix
        self._separator = separator

    @property
    def separator(self) -> str:
        """Get the key separator."""
        return self._separator

    def build(self, region: str, entity_id: Any) -> str:
        """Build the cache key of one entity.

        Args:
            region: The cache region name.
            entity_id: The entity identifier.

        Returns:
            The cache key, e.g. ``"persons:42"``.

        Raises:
            ValueError: If a component contains the separator.
        """
        id_part = str(entity_id)
        self._validate(id_part, "entity_id", self._separator)
        return f"{self.region_name(region)}{self._separator}{id_part}"

    def region_name(self, region: str) -> str:
        """Return the region name including the prefix.

        Raises:
            ValueError: If the region contains the separator.
        """
        self._validate(region, "region", self._separator)
        if self._prefix:
            return f"{self._prefix}{self._separator}{region}"
        return region

    @staticmethod
    def _validate(value: str, name: str, separator: str) -> None:
        if not value:
            raise ValueError(f"Cache key component {name!r} must not be empty")
        if separator in value:
            raise ValueError(
                f"Cache key component {name!r} must not contain separator {separator!r}"
            )
