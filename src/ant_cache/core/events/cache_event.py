"""Cache event kinds.

ONLY event naming - the lifecycle moments listeners can subscribe to.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum
from typing import Union


class CacheEvent(str, Enum):
    """Lifecycle hooks emitted by the cache."""

    BEFORE_SET = "before-set"      # (key, value), before every set
    AFTER_SET = "after-set"        # (key, value), after every set
    BEFORE_DELETE = "before-delete"  # (key), before every explicit delete
    AFTER_DELETE = "after-delete"    # (key), after every explicit delete
    EXPIRED = "expired"            # (ExpiredEntry), once per lapsed key per sweep

    @classmethod
    def parse(cls, event: Union["CacheEvent", str]) -> "CacheEvent":
        """Resolve an event from its enum member or string value."""
        if isinstance(event, cls):
            return event
        try:
            return cls(event)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown cache event {event!r}, expected one of: {valid}") from None
