"""Cache domain events.

One event per file following maximum separation architecture.
"""

from .cache_event import CacheEvent
from .expired_entry import ExpiredEntry

__all__ = [
    "CacheEvent",
    "ExpiredEntry",
]
