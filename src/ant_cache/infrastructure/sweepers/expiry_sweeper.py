"""Expiry sweeper.

ONLY time-based expiration - periodic background pass that finds lapsed
entries and either reports them or deletes them.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from typing import Callable, Optional

from ...core.entities.entry_metadata import EntryMetadata
from ...core.events.cache_event import CacheEvent
from ...core.events.expired_entry import ExpiredEntry
from ...core.protocols.cache_notifier import CacheNotifier
from ..repositories.memory_entry_store import MemoryEntryStore

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodic expiry sweeper.

    Runs ``sweep`` every ``check_period_seconds`` on an asyncio task. For
    each lapsed key:

    - if an ``expired`` listener exists, emit an ExpiredEntry carrying a
      one-shot ``delete_current_key`` capability and leave the decision to
      the listener; an entry that is not deleted is reported again on the
      next tick
    - otherwise delete the key when ``delete_on_expire`` is set, or leave it
      untouched (it is reconsidered, and ignored, on every tick)

    Sweeper removals bypass the before-delete/after-delete hooks.

    Without a running event loop the owner calls ``sweep_if_due`` on every
    cache access instead; an overdue sweep then runs inline, at most once
    per call however many periods have passed.
    """

    def __init__(
        self,
        store: MemoryEntryStore,
        notifier: CacheNotifier,
        check_period_seconds: float,
        delete_on_expire: bool = True,
    ):
        """Initialize expiry sweeper.

        Args:
            store: Entry store to scan
            notifier: Hook channel for ``expired`` events
            check_period_seconds: Seconds between ticks, 0 disables the sweeper
            delete_on_expire: Delete lapsed keys when nobody listens for ``expired``
        """
        self._store = store
        self._notifier = notifier
        self._check_period = check_period_seconds
        self._delete_on_expire = delete_on_expire
        self._task: Optional[asyncio.Task] = None
        self._last_sweep = store.now()
        self._closed = False

    @property
    def is_enabled(self) -> bool:
        return self._check_period > 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Schedule the sweep loop on the running event loop.

        Returns:
            True if the loop is running after the call
        """
        if self._closed or not self.is_enabled:
            return False
        if self.is_running:
            return True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, expiry sweeps will run on cache access")
            return False

        self._task = loop.create_task(self._sweep_loop())
        logger.debug("Expiry sweeper started (period=%ss)", self._check_period)
        return True

    def stop(self) -> None:
        """Cancel the sweep loop; no tick fires after this returns."""
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.debug("Expiry sweeper stopped")

    def close(self) -> None:
        """Stop the sweep loop and the on-access sweeps for good."""
        self.stop()
        self._closed = True

    def sweep_if_due(self) -> int:
        """Run a sweep inline if a period has elapsed and no loop task runs.

        Returns:
            Number of lapsed entries found, 0 when no sweep was due
        """
        if self._closed or not self.is_enabled or self.is_running:
            return 0
        if self._store.now() - self._last_sweep < self._check_period:
            return 0
        return self.sweep()

    def sweep(self) -> int:
        """Run one expiry pass.

        Keys are listed up front but every key's metadata is re-read before
        use, so entries removed mid-pass (by a listener or any other caller)
        are skipped.

        Returns:
            Number of lapsed entries found
        """
        now = self._store.now()
        self._last_sweep = now
        lapsed = 0

        for key in self._store.metadata_keys():
            metadata = self._store.metadata(key)
            if metadata is None or metadata.ttl.is_never_expire():
                continue
            if not metadata.is_lapsed(now):
                continue

            lapsed += 1
            self._expire(key, metadata, now)

        if lapsed:
            logger.debug("Expiry sweep found %d lapsed entries", lapsed)
        return lapsed

    def _expire(self, key: str, metadata: EntryMetadata, now: float) -> None:
        if self._notifier.has_listeners(CacheEvent.EXPIRED):
            entry = ExpiredEntry(
                key=key,
                value=self._store.get(key),
                ttl=metadata.ttl.seconds,
                delete_current_key=self._delete_capability(key, metadata),
            )
            logger.debug("Reporting expired entry %s", entry.to_dict())
            self._notifier.emit(CacheEvent.EXPIRED, entry)
        elif self._delete_on_expire:
            logger.debug("Deleting %r after %.3fs (ttl %s)", key, metadata.age(now), metadata.ttl)
            self._store.remove(key)

    def _delete_capability(self, key: str, metadata: EntryMetadata) -> Callable[[], bool]:
        """Build a one-shot deleter bound to this key and metadata record."""
        used = False

        def delete_current_key() -> bool:
            nonlocal used
            if used:
                return False
            used = True
            return self._store.remove_if_current(key, metadata)

        return delete_current_key

    async def _sweep_loop(self) -> None:
        """Background sweep loop."""
        while True:
            await asyncio.sleep(self._check_period)
            try:
                self.sweep()
            except Exception:
                logger.exception("Expiry sweep failed, retrying next period")

    def __repr__(self) -> str:
        return (
            f"ExpirySweeper(check_period_seconds={self._check_period}, "
            f"delete_on_expire={self._delete_on_expire}, running={self.is_running})"
        )
