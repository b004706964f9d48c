"""Deserialization error exception.

ONLY deserialization errors - raised when a serialized blob cannot be
decoded back into cache content.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from .base import AntCacheError


class DeserializationError(AntCacheError):
    """Cache deserialization error.

    Raised when the codec rejects a blob or when the decoded payload does
    not have the shape produced by ``serialize``.
    """

    def __init__(
        self,
        message: str,
        data: Optional[str] = None,
        codec_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize deserialization error.

        Args:
            message: Error description
            data: Blob that failed to deserialize
            codec_name: Name of the codec that failed
            original_error: Original underlying exception
        """
        self.data = data
        self.codec_name = codec_name
        self.original_error = original_error

        details: Dict[str, Any] = {"codec": codec_name}
        if data is not None:
            details["data_length"] = len(data)
            details["data_preview"] = data[:100]
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }

        super().__init__(message, error_code="CACHE_DESERIALIZATION_ERROR", details=details)

    @classmethod
    def invalid_payload(cls, reason: str, data: Optional[str] = None) -> "DeserializationError":
        """Create exception for a decoded payload with the wrong shape."""
        return cls(f"Invalid cache snapshot: {reason}", data=data)
