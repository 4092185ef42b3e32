"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for turning entity snapshots into cache bytes and back.

    Read-back equality is structural: a deserialized snapshot equals the
    original by value, not by identity.
    """

    def serialize(self, value: Any) -> bytes:
        """Serialize an entity snapshot to bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to a plain payload (dict, list, scalar).

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
