"""Cache application services."""

from .ant_cache import AntCache
from .serialization_bridge import SerializationBridge

__all__ = [
    "AntCache",
    "SerializationBridge",
]
