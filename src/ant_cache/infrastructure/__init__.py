"""Cache infrastructure layer.

Concrete storage, notification, expiry and encoding implementations.
"""

from .repositories import MemoryEntryStore
from .notifiers import HookBus
from .sweepers import ExpirySweeper
from .serializers import JSONCacheCodec

__all__ = [
    "MemoryEntryStore",
    "HookBus",
    "ExpirySweeper",
    "JSONCacheCodec",
]
