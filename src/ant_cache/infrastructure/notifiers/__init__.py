"""Cache hook notifiers."""

from .hook_bus import HookBus

__all__ = [
    "HookBus",
]
