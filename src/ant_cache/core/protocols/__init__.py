"""Cache protocols.

Contracts for the collaborators the cache talks to.
"""

from .cache_codec import CacheCodec
from .cache_notifier import CacheNotifier, Listener

__all__ = [
    "CacheCodec",
    "CacheNotifier",
    "Listener",
]
