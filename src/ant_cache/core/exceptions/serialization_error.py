"""Serialization error exception.

ONLY serialization errors - raised when cache content cannot be encoded
into its portable string form.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from .base import AntCacheError


class SerializationError(AntCacheError):
    """Cache serialization error.

    Raised when a value falls outside the supported value model or when the
    codec fails to encode the snapshot.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        key: Optional[str] = None,
        codec_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize serialization error.

        Args:
            message: Error description
            value: Value that failed to serialize
            key: Cache key holding the value, when known
            codec_name: Name of the codec that failed
            original_error: Original underlying exception
        """
        self.value = value
        self.key = key
        self.codec_name = codec_name
        self.original_error = original_error

        details: Dict[str, Any] = {"codec": codec_name}
        if key is not None:
            details["key"] = key
        if value is not None:
            details["value_type"] = type(value).__name__
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }

        super().__init__(message, error_code="CACHE_SERIALIZATION_ERROR", details=details)

    @classmethod
    def unsupported_value(cls, key: str, value: Any, path: str) -> "SerializationError":
        """Create exception for a value outside the value model."""
        return cls(
            f"Value for key {key!r} is not serializable: "
            f"unsupported type {type(value).__name__} at {path}",
            value=value,
            key=key,
        )
