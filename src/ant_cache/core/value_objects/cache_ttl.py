"""Cache TTL value object.

ONLY TTL handling - time-to-live value object measured in seconds against
a monotonic clock.

Following maximum separation architecture - one file = one purpose.
"""

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CacheTTL:
    """Cache TTL (Time To Live) value object.

    ``0`` means the entry never expires; any positive value is a countdown
    in seconds from the entry's creation time.
    """

    seconds: float

    NEVER_EXPIRE = 0

    def __post_init__(self):
        """Validate TTL value."""
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, (int, float)):
            raise TypeError(f"TTL must be a number of seconds, got {type(self.seconds).__name__}")
        if math.isnan(self.seconds) or self.seconds < 0:
            raise ValueError(f"TTL cannot be negative, got {self.seconds}")

    @classmethod
    def never_expire(cls) -> "CacheTTL":
        """Create TTL that never expires."""
        return cls(cls.NEVER_EXPIRE)

    @classmethod
    def of(cls, seconds: Union["CacheTTL", int, float]) -> "CacheTTL":
        """Coerce seconds (or an existing TTL) into a TTL."""
        if isinstance(seconds, CacheTTL):
            return seconds
        return cls(seconds)

    def is_never_expire(self) -> bool:
        """Check if TTL never expires."""
        return self.seconds == self.NEVER_EXPIRE

    def is_lapsed(self, created_at: float, now: float) -> bool:
        """Check if an entry created at ``created_at`` has outlived this TTL."""
        if self.is_never_expire():
            return False
        return now - created_at > self.seconds

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.is_never_expire():
            return "never expires"
        return f"{self.seconds:g}s"
