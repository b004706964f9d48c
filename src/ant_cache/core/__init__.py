"""Cache core domain layer.

Clean core containing only value objects, entities, events, exceptions
and shared contracts. No business logic or external dependencies.
"""

from .entities import *
from .value_objects import *
from .events import *
from .exceptions import *
from .protocols import *

__all__ = [
    # Entities
    "EntryMetadata",

    # Value Objects
    "CacheTTL",
    "CacheStats",
    "CachePrimitive",
    "CacheValue",
    "find_unsupported_value",
    "is_cache_value",

    # Events
    "CacheEvent",
    "ExpiredEntry",

    # Exceptions
    "AntCacheError",
    "CacheCapacityExceeded",
    "SerializationError",
    "DeserializationError",

    # Protocols
    "CacheCodec",
    "CacheNotifier",
    "Listener",
]
