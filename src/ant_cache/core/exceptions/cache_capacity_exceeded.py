"""Cache capacity exceeded exception.

ONLY capacity errors - raised when inserting a new key would push the
store past its configured key ceiling.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from .base import AntCacheError


class CacheCapacityExceeded(AntCacheError):
    """Cache capacity exceeded error.

    Raised synchronously, before any mutation, when a brand-new key would
    exceed ``max_keys``. Overwriting an existing key never raises it.
    """

    def __init__(
        self,
        current_value: int,
        limit_value: int,
        operation: str,
        key: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize cache capacity exceeded error.

        Args:
            current_value: Number of keys held when the operation was attempted
            limit_value: Configured ``max_keys``
            operation: Operation that would exceed capacity
            key: Key that was rejected, when a single key is involved
            error_code: Optional machine-readable error code
        """
        self.current_value = current_value
        self.limit_value = limit_value
        self.operation = operation
        self.key = key

        details = {
            "current_value": current_value,
            "limit_value": limit_value,
            "operation": operation,
        }
        if key is not None:
            details["key"] = key

        super().__init__(
            f"Allow maximum {limit_value} keys ({operation} rejected at {current_value} keys)",
            error_code=error_code or "CACHE_MAX_KEYS_EXCEEDED",
            details=details,
        )

    @classmethod
    def max_keys(
        cls,
        current_keys: int,
        max_keys: int,
        key: str,
    ) -> "CacheCapacityExceeded":
        """Create exception for a rejected ``set`` of a new key."""
        return cls(
            current_value=current_keys,
            limit_value=max_keys,
            operation="set",
            key=key,
        )

    @classmethod
    def restore_overflow(
        cls,
        current_keys: int,
        incoming_keys: int,
        max_keys: int,
    ) -> "CacheCapacityExceeded":
        """Create exception for a restore that would add too many new keys."""
        error = cls(
            current_value=current_keys,
            limit_value=max_keys,
            operation="deserialize",
            error_code="CACHE_RESTORE_CAPACITY_EXCEEDED",
        )
        error.details["incoming_keys"] = incoming_keys
        return error

    def get_overflow_amount(self) -> int:
        """Get number of keys by which the limit would have been exceeded."""
        incoming = self.details.get("incoming_keys", 1)
        return max(0, self.current_value + incoming - self.limit_value)
