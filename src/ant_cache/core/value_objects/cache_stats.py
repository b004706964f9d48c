"""Cache statistics value object.

ONLY statistics snapshot - hit/miss counters and current size.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time cache statistics."""

    hits: int
    misses: int
    size: int

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate_percent(self) -> float:
        """Hit rate as a percentage of all ``get`` calls."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "size": self.size,
            "total_requests": self.total_requests,
            "hit_rate_percent": self.hit_rate_percent,
        }
