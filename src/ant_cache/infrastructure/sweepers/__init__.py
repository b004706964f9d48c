"""Cache expiry sweepers."""

from .expiry_sweeper import ExpirySweeper

__all__ = [
    "ExpirySweeper",
]
