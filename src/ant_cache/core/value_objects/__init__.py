"""Cache value objects.

Immutable values following maximum separation - one value object per file.
"""

from .cache_ttl import CacheTTL
from .cache_stats import CacheStats
from .cache_value import (
    CachePrimitive,
    CacheValue,
    find_unsupported_value,
    is_cache_value,
)

__all__ = [
    "CacheTTL",
    "CacheStats",
    "CachePrimitive",
    "CacheValue",
    "find_unsupported_value",
    "is_cache_value",
]
