"""Cache storage repositories."""

from .memory_entry_store import MemoryEntryStore

__all__ = [
    "MemoryEntryStore",
]
