"""Cache domain entities."""

from .entry_metadata import EntryMetadata

__all__ = [
    "EntryMetadata",
]
