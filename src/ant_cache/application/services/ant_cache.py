"""Ant cache facade.

ONLY the public cache surface - coordinates the entry store, hook bus,
expiry sweeper and serialization bridge behind one object.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from ...config.cache_config import CacheConfig
from ...config.settings import CacheSettings
from ...core.events.cache_event import CacheEvent
from ...core.protocols.cache_codec import CacheCodec
from ...core.protocols.cache_notifier import CacheNotifier, Listener
from ...core.value_objects.cache_stats import CacheStats
from ...core.value_objects.cache_ttl import CacheTTL
from ...infrastructure.notifiers.hook_bus import HookBus
from ...infrastructure.repositories.memory_entry_store import MemoryEntryStore
from ...infrastructure.serializers.json_codec import JSONCacheCodec
from ...infrastructure.sweepers.expiry_sweeper import ExpirySweeper
from .serialization_bridge import SerializationBridge

logger = logging.getLogger(__name__)


def _flatten_keys(keys: Iterable[Union[str, Iterable[str]]]) -> List[str]:
    """Expand a mix of single keys and key lists into one list."""
    flat: List[str] = []
    for item in keys:
        if isinstance(item, str):
            flat.append(item)
        else:
            flat.extend(item)
    return flat


class AntCache:
    """In-memory key-value cache with per-entry TTL.

    Use with TTL::

        cache = AntCache({"ttl_seconds": 120, "check_period_seconds": 10, "max_keys": 1000})
        cache.set("default ttl", "lives for 120 seconds")
        cache.set("custom ttl", "lives for 10 seconds", 10)
        cache.set("no ttl", "lives until deleted", 0)

    Use as a plain map (no TTL, no sweeper)::

        cache = AntCache({"check_period_seconds": 0})

    Expiry runs on an asyncio task, which is started at construction when
    an event loop is running. Without one, every read and write first runs
    any overdue sweep inline, so lapsed entries are never served; ``start()``
    or ``async with`` moves expiry onto the loop later.
    """

    def __init__(
        self,
        config: Optional[Union[CacheConfig, Mapping[str, Any]]] = None,
        *,
        codec: Optional[CacheCodec] = None,
        notifier: Optional[CacheNotifier] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            config: CacheConfig or a mapping of its fields, defaults apply
            codec: Codec used by ``serialize``/``deserialize``
            notifier: Hook channel, a fresh HookBus by default
            clock: Monotonic clock returning seconds
        """
        if config is None:
            config = CacheConfig()
        elif not isinstance(config, CacheConfig):
            config = CacheConfig.model_validate(dict(config))
        self.config = config

        self._notifier = notifier if notifier is not None else HookBus()
        self._store = MemoryEntryStore(
            max_keys=config.max_keys,
            track_metadata=config.sweeper_enabled,
            clock=clock,
        )
        self._sweeper = ExpirySweeper(
            store=self._store,
            notifier=self._notifier,
            check_period_seconds=config.check_period_seconds,
            delete_on_expire=config.delete_on_expire,
        )
        self._bridge = SerializationBridge(self._store, codec if codec is not None else JSONCacheCodec())

        self._hits = 0
        self._misses = 0
        self._disposed = False

        self._sweeper.start()

    @classmethod
    def from_environment(cls, **kwargs: Any) -> "AntCache":
        """Create a cache configured from ``ANT_CACHE_*`` environment variables."""
        return cls(CacheSettings().to_config(), **kwargs)

    # Writes

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Insert or update ``key``.

        Args:
            key: Cache key
            value: Value to store
            ttl: Seconds to live, only applied when inserting a new key;
                None uses the configured TTL and 0 never expires

        Raises:
            CacheCapacityExceeded: If ``key`` is new and the cache is full
        """
        self._sweeper.sweep_if_due()
        ttl_value = CacheTTL.of(self.config.ttl_seconds if ttl is None else ttl)
        self._store.ensure_capacity(key)

        self._notifier.emit(CacheEvent.BEFORE_SET, key, value)
        self._store.put(key, value, ttl_value)
        self._notifier.emit(CacheEvent.AFTER_SET, key, value)

    def delete(self, key: str) -> None:
        """Delete ``key``, wrapped in before-delete/after-delete hooks.

        Deleting an absent key is a no-op apart from the hooks.
        """
        self._sweeper.sweep_if_due()
        self._notifier.emit(CacheEvent.BEFORE_DELETE, key)
        self._store.remove(key)
        self._notifier.emit(CacheEvent.AFTER_DELETE, key)

    def delete_many(self, *keys: Union[str, Iterable[str]]) -> None:
        """Delete each key in turn; every key gets its own hook pair.

        Accepts single keys, lists of keys, or both: ``delete_many("a", ["b", "c"])``.
        """
        for key in _flatten_keys(keys):
            self.delete(key)

    def flush_all(self) -> None:
        """Remove every entry. No hooks fire."""
        self._sweeper.sweep_if_due()
        self._store.clear()

    # Reads

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of ``key``, or ``default`` when absent.

        Counts a hit or a miss. Pass a sentinel as ``default`` (or use
        ``has``) to tell a stored None apart from a missing key.
        """
        self._sweeper.sweep_if_due()
        if key in self._store:
            self._hits += 1
            return self._store.get(key)

        self._misses += 1
        return default

    def get_many(self, *keys: Union[str, Iterable[str]], default: Any = None) -> Dict[str, Any]:
        """Return values of ``keys``; missing keys map to ``default``.

        Accepts single keys, lists of keys, or both: ``get_many("a", ["b", "c"])``.
        """
        self._sweeper.sweep_if_due()
        return self._store.get_many(_flatten_keys(keys), default)

    def get_all(self) -> Dict[str, Any]:
        """Return every entry as a new dict in insertion order."""
        self._sweeper.sweep_if_due()
        return dict(self._store.items())

    def keys(self) -> List[str]:
        self._sweeper.sweep_if_due()
        return self._store.keys()

    def values(self) -> List[Any]:
        self._sweeper.sweep_if_due()
        return self._store.values()

    def size(self) -> int:
        self._sweeper.sweep_if_due()
        return self._store.size()

    def has(self, key: str) -> bool:
        self._sweeper.sweep_if_due()
        return key in self._store

    def stats(self) -> CacheStats:
        """Hit/miss counters since construction and current size."""
        self._sweeper.sweep_if_due()
        return CacheStats(hits=self._hits, misses=self._misses, size=self._store.size())

    # Hooks

    def on(self, event: Union[CacheEvent, str], listener: Listener) -> None:
        """Register ``listener`` for a lifecycle event.

        Events: before-set, after-set (key, value); before-delete,
        after-delete (key); expired (ExpiredEntry).
        """
        self._notifier.on(event, listener)

    # Serialization

    def serialize(self) -> str:
        """Encode entries and TTLs into a string for ``deserialize``.

        Cost grows with cache size; callers handle long-running cases.
        """
        self._sweeper.sweep_if_due()
        return self._bridge.serialize()

    def deserialize(self, blob: str) -> None:
        """Upsert entries from a ``serialize`` blob.

        Existing keys are overwritten in value and TTL; every restored key
        starts a fresh countdown now.
        """
        self._sweeper.sweep_if_due()
        self._bridge.deserialize(blob)

    # Expiry lifecycle

    def start(self) -> bool:
        """Start the expiry sweeper on the running event loop."""
        return self._sweeper.start()

    def check_expired(self) -> int:
        """Run one expiry sweep now; returns the number of lapsed entries."""
        return self._sweeper.sweep()

    def dispose(self) -> None:
        """Stop all expiry and detach all listeners.

        The cache should not be used afterwards. Calling twice is a no-op.
        """
        if self._disposed:
            return
        self._sweeper.close()
        self._notifier.remove_all_listeners()
        self._disposed = True
        logger.debug("Cache disposed with %d entries", self._store.size())

    close = dispose

    def __enter__(self) -> "AntCache":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()

    async def __aenter__(self) -> "AntCache":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return (
            f"AntCache(size={self._store.size()}, ttl_seconds={self.config.ttl_seconds}, "
            f"check_period_seconds={self.config.check_period_seconds}, max_keys={self.config.max_keys})"
        )
