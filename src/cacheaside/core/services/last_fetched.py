"""Last-fetched slot.

A single fixed cache key that always holds the entity most recently
fetched from the store. It is shared by every request for the lifetime
of the process (or of the cache, for a networked backend) and is
overwritten on each store fetch, whatever the region policy says.
The key lives outside every region, so region eviction never clears it.
On a size-bounded backend LRU pressure can still drop it, so give the
slot a backend of its own there.
"""

import logging
from collections.abc import Callable
from typing import Any

from cacheaside.core.errors import SerializationError
from cacheaside.core.interfaces.cache_backend import ICacheBackend
from cacheaside.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)

LAST_FETCHED_KEY = "personId"


class LastFetchedSlot:
    """Unconditional single-entry cache of the last fetched entity."""

    def __init__(
        self,
        backend: ICacheBackend,
        serializer: ISerializer,
        key: str = LAST_FETCHED_KEY,
        decoder: Callable[[Any], Any] | None = None,
    ) -> None:
        """Initialize the slot.

        Args:
            backend: The cache backend holding the slot.
            serializer: The serializer for encoding/decoding values.
            key: The fixed slot key.
            decoder: Rebuilds an entity from its deserialized payload.
        """
        self._backend = backend
        self._serializer = serializer
        self._key = key
        self._decoder = decoder

    @property
    def key(self) -> str:
        """Get the slot key."""
        return self._key

    async def get(self) -> Any | None:
        """Return the slot value, or None if it was never populated."""
        data = await self._backend.get(self._key)
        if data is None:
            return None

        try:
            payload = self._serializer.deserialize(data)
            return self._decoder(payload) if self._decoder else payload
        except (SerializationError, KeyError, TypeError, ValueError) as e:
            logger.warning("Undecodable last-fetched slot %s: %s", self._key, e)
            return None

    async def put(self, value: Any) -> None:
        """Overwrite the slot. Slot entries never expire."""
        await self._backend.set(self._key, self._serializer.serialize(value))
