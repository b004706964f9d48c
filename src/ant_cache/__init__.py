"""ant-cache - in-memory key-value cache with per-entry TTL.

Provides an entry store with TTL bookkeeping, a periodic expiry sweeper,
synchronous lifecycle hooks, hit/miss statistics and snapshot/restore
through a pluggable codec.
"""

from .__version__ import __version__

from .application import AntCache, SerializationBridge
from .config import CacheConfig, CacheSettings, LoggingConfig, setup_logging
from .core import (
    AntCacheError,
    CacheCapacityExceeded,
    CacheCodec,
    CacheEvent,
    CacheNotifier,
    CacheStats,
    CacheTTL,
    CacheValue,
    DeserializationError,
    ExpiredEntry,
    SerializationError,
    is_cache_value,
)
from .infrastructure import ExpirySweeper, HookBus, JSONCacheCodec, MemoryEntryStore

__all__ = [
    "__version__",

    # Facade
    "AntCache",
    "SerializationBridge",

    # Configuration
    "CacheConfig",
    "CacheSettings",
    "LoggingConfig",
    "setup_logging",

    # Domain
    "CacheEvent",
    "ExpiredEntry",
    "CacheStats",
    "CacheTTL",
    "CacheValue",
    "is_cache_value",

    # Exceptions
    "AntCacheError",
    "CacheCapacityExceeded",
    "SerializationError",
    "DeserializationError",

    # Protocols
    "CacheCodec",
    "CacheNotifier",

    # Implementations
    "MemoryEntryStore",
    "HookBus",
    "ExpirySweeper",
    "JSONCacheCodec",
]
