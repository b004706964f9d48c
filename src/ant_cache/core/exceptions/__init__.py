"""Cache domain exceptions.

One exception per file following maximum separation architecture.
"""

from .base import AntCacheError
from .cache_capacity_exceeded import CacheCapacityExceeded
from .serialization_error import SerializationError
from .deserialization_error import DeserializationError

__all__ = [
    "AntCacheError",
    "CacheCapacityExceeded",
    "SerializationError",
    "DeserializationError",
]
