"""Entry metadata domain entity.

ONLY per-key bookkeeping - creation time and TTL of a stored entry.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass

from ..value_objects.cache_ttl import CacheTTL


@dataclass(eq=False)
class EntryMetadata:
    """Creation time and TTL of a single cache entry.

    Compared by identity: a record belongs to exactly one insertion of a
    key, so a re-inserted key gets a new record even when the numbers match.
    """

    created_at: float
    ttl: CacheTTL

    def is_lapsed(self, now: float) -> bool:
        """Check if the entry has outlived its TTL at ``now``."""
        return self.ttl.is_lapsed(self.created_at, now)

    def age(self, now: float) -> float:
        """Seconds elapsed since creation."""
        return now - self.created_at
