"""Hook bus notifier.

ONLY event dispatch - synchronous, ordered delivery of cache lifecycle
events to registered listeners.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Union

from ...core.events.cache_event import CacheEvent
from ...core.protocols.cache_notifier import Listener

logger = logging.getLogger(__name__)


class HookBus:
    """In-process hook bus implementing the CacheNotifier protocol.

    Listeners are called in registration order on the emitting call stack.
    An exception raised by a listener propagates to the emitter and the
    remaining listeners for that emission are not called.
    """

    def __init__(self):
        self._listeners: Dict[CacheEvent, List[Listener]] = defaultdict(list)

    def on(self, event: Union[CacheEvent, str], listener: Listener) -> None:
        """Register ``listener`` for ``event``.

        Raises:
            ValueError: If ``event`` is not a known cache event
            TypeError: If ``listener`` is not callable
        """
        if not callable(listener):
            raise TypeError(f"Listener for {event!r} must be callable")
        self._listeners[CacheEvent.parse(event)].append(listener)

    def emit(self, event: Union[CacheEvent, str], *args: Any) -> bool:
        """Call every listener of ``event`` with ``args``.

        Returns:
            True if the event had listeners
        """
        listeners = self._listeners.get(CacheEvent.parse(event))
        if not listeners:
            return False
        # Listeners registered during emission run from the next emission on
        for listener in list(listeners):
            listener(*args)
        return True

    def has_listeners(self, event: Union[CacheEvent, str]) -> bool:
        return bool(self._listeners.get(CacheEvent.parse(event)))

    def listener_count(self, event: Union[CacheEvent, str]) -> int:
        return len(self._listeners.get(CacheEvent.parse(event), ()))

    def remove_all_listeners(self) -> None:
        """Detach every listener of every event."""
        count = sum(len(listeners) for listeners in self._listeners.values())
        self._listeners.clear()
        if count:
            logger.debug("Removed %d hook listeners", count)

    def __repr__(self) -> str:
        counts = {event.value: len(listeners) for event, listeners in self._listeners.items() if listeners}
        return f"HookBus(listeners={counts})"
