"""Cache notifier protocol.

ONLY notification contract - the hook channel the cache emits lifecycle
events on. Injected into the cache so tests can substitute a stub.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Callable, Union
from typing_extensions import Protocol, runtime_checkable

from ..events.cache_event import CacheEvent

Listener = Callable[..., Any]


@runtime_checkable
class CacheNotifier(Protocol):
    """Cache notifier protocol.

    Listeners run synchronously, in registration order, on the stack of
    the operation that emitted the event.
    """

    def on(self, event: Union[CacheEvent, str], listener: Listener) -> None:
        """Register ``listener`` for ``event``."""
        ...

    def emit(self, event: Union[CacheEvent, str], *args: Any) -> bool:
        """Invoke every listener of ``event``; True if any was registered."""
        ...

    def has_listeners(self, event: Union[CacheEvent, str]) -> bool:
        """Check whether ``event`` has at least one listener."""
        ...

    def remove_all_listeners(self) -> None:
        """Detach every listener of every event."""
        ...
