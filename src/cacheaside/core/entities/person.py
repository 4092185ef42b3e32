"""Person entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Person:
    """A person record.

    The ``id`` is the identity used for cache keys and store lookups.
    It is ``None`` until the store assigns one on save.
    """

    firstname: str
    lastname: str
    age: int
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the cache/store schema representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Person":
        """Build a Person from its schema representation.

        Args:
            data: Mapping with ``id``, ``firstname``, ``lastname`` and ``age``.

        Returns:
            A new Person instance.

        Raises:
            KeyError: If a required field is missing.
            TypeError: If ``data`` is not a mapping.
            ValueError: If ``age`` or ``id`` cannot be converted to int.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            firstname=str(data["firstname"]),
            lastname=str(data["lastname"]),
            age=int(data["age"]),
        )
