"""Memory entry store.

ONLY in-memory storage - the authoritative key -> value mapping plus the
per-key metadata (creation time, TTL) the sweeper reads.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ...core.entities.entry_metadata import EntryMetadata
from ...core.exceptions.cache_capacity_exceeded import CacheCapacityExceeded
from ...core.value_objects.cache_ttl import CacheTTL

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class MemoryEntryStore:
    """In-memory entry store.

    Values and metadata live in two dicts keyed by the same strings. Both
    preserve insertion order, which is the order ``keys()`` and ``values()``
    report.

    Metadata is written only when ``track_metadata`` is on. With tracking
    off the store is a plain bounded map and TTLs are ignored.
    """

    def __init__(
        self,
        max_keys: int = 0,
        track_metadata: bool = True,
        clock: Clock = time.monotonic,
    ):
        """Initialize memory entry store.

        Args:
            max_keys: Maximum number of distinct keys, 0 for unbounded
            track_metadata: Whether to record creation time and TTL
            clock: Monotonic clock returning seconds
        """
        self._values: Dict[str, Any] = {}
        self._metadata: Dict[str, EntryMetadata] = {}
        self._max_keys = max_keys
        self._track_metadata = track_metadata
        self._clock = clock

    @property
    def max_keys(self) -> int:
        return self._max_keys

    @property
    def tracks_metadata(self) -> bool:
        return self._track_metadata

    def now(self) -> float:
        """Current reading of the store's clock."""
        return self._clock()

    # Capacity

    def ensure_capacity(self, key: str) -> None:
        """Raise CacheCapacityExceeded if ``key`` is new and the store is full."""
        if self._max_keys and key not in self._values and len(self._values) >= self._max_keys:
            logger.debug("Rejected key %r: store holds %d of %d keys", key, len(self._values), self._max_keys)
            raise CacheCapacityExceeded.max_keys(
                current_keys=len(self._values),
                max_keys=self._max_keys,
                key=key,
            )

    def count_new_keys(self, keys: Iterable[str]) -> int:
        """Count how many of ``keys`` are not stored yet."""
        return sum(1 for key in set(keys) if key not in self._values)

    # Writes

    def put(self, key: str, value: Any, ttl_seconds: Union[CacheTTL, float]) -> bool:
        """Insert or overwrite ``key``.

        A new key gets its creation time and TTL recorded; an existing key
        only has its value replaced.

        Returns:
            True if the key was new
        """
        self.ensure_capacity(key)
        is_new_key = key not in self._values
        self._values[key] = value
        if is_new_key and self._track_metadata:
            self._metadata[key] = EntryMetadata(created_at=self._clock(), ttl=CacheTTL.of(ttl_seconds))
        return is_new_key

    def restore(self, key: str, value: Any, ttl_seconds: Union[CacheTTL, float]) -> None:
        """Upsert ``key`` with a fresh creation time and the given TTL.

        Unlike ``put`` an existing key gets its TTL overwritten and its
        countdown restarted.
        """
        self._values[key] = value
        if self._track_metadata:
            self._metadata[key] = EntryMetadata(created_at=self._clock(), ttl=CacheTTL.of(ttl_seconds))

    def remove(self, key: str) -> bool:
        """Remove ``key`` and its metadata; no-op if absent.

        Returns:
            True if the key existed
        """
        self._metadata.pop(key, None)
        if key in self._values:
            del self._values[key]
            return True
        return False

    def remove_if_current(self, key: str, metadata: EntryMetadata) -> bool:
        """Remove ``key`` only if ``metadata`` is still its live record.

        Guards against deleting a newer entry that reused the key after the
        record was observed.
        """
        if self._metadata.get(key) is not metadata:
            return False
        return self.remove(key)

    def clear(self) -> None:
        """Remove all entries and metadata."""
        self._values.clear()
        self._metadata.clear()

    # Reads

    def contains(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of ``key``, or ``default`` when absent."""
        if key in self._values:
            return self._values[key]
        return default

    def get_many(self, keys: Iterable[str], default: Any = None) -> Dict[str, Any]:
        """Return a mapping for exactly the requested keys.

        Missing keys map to ``default`` rather than being omitted.
        """
        if isinstance(keys, str):
            keys = [keys]
        return {key: self.get(key, default) for key in keys}

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._values.items())

    def keys(self) -> List[str]:
        return list(self._values.keys())

    def values(self) -> List[Any]:
        return list(self._values.values())

    def size(self) -> int:
        return len(self._values)

    # Metadata

    def metadata(self, key: str) -> Optional[EntryMetadata]:
        """Live metadata record of ``key``, None if untracked or absent."""
        return self._metadata.get(key)

    def metadata_keys(self) -> List[str]:
        """Keys that currently have a metadata record."""
        return list(self._metadata.keys())

    def metadata_snapshot(self) -> Dict[str, float]:
        """TTL seconds of every tracked key."""
        return {key: meta.ttl.seconds for key, meta in self._metadata.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"MemoryEntryStore(size={len(self._values)}, max_keys={self._max_keys}, "
            f"track_metadata={self._track_metadata})"
        )
