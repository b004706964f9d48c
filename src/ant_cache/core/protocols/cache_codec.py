"""Cache codec protocol.

ONLY encoding contract - turns a value graph into a portable string and
back. The cache depends on this interface, never on a concrete format.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CacheCodec(Protocol):
    """Cache codec protocol.

    Implementations must round-trip every shape of the cache value model
    (big integers, non-finite floats, dates, sets, non-string-keyed maps)
    without loss.
    """

    def encode(self, value: Any) -> str:
        """Encode value graph to a portable string.

        Raises:
            SerializationError: If value cannot be encoded
        """
        ...

    def decode(self, data: str) -> Any:
        """Decode a string produced by ``encode`` back to a value graph.

        Raises:
            DeserializationError: If data cannot be decoded
        """
        ...

    def get_format_name(self) -> str:
        """Get format name (e.g., 'json')."""
        ...
