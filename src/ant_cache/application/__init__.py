"""Cache application layer.

The cache facade and the services it coordinates.
"""

from .services import AntCache, SerializationBridge

__all__ = [
    "AntCache",
    "SerializationBridge",
]
