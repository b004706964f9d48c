"""Cache expired event payload.

ONLY expiration payload - what an ``expired`` listener receives for a
lapsed entry, including the one-shot capability to delete it.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict


@dataclass(frozen=True)
class ExpiredEntry:
    """Payload of the ``expired`` event.

    The entry stays in the cache unless the listener calls
    ``delete_current_key``. Not calling it vetoes the expiration and the
    entry is reported again on the next sweep.
    """

    key: str
    value: Any
    ttl: float
    delete_current_key: Callable[[], bool] = field(repr=False, compare=False)

    def get_event_type(self) -> str:
        """Get event type identifier."""
        return "cache.expired"

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for logging."""
        return {
            "event_type": self.get_event_type(),
            "key": self.key,
            "ttl": self.ttl,
            "value_type": type(self.value).__name__,
        }
