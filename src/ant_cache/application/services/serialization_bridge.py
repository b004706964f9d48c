"""Cache serialization bridge.

ONLY snapshot/restore - converts store content and TTL metadata to and
from a portable string through an injected codec.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import math
from typing import Any, Dict, Mapping, Tuple

from ...core.exceptions.cache_capacity_exceeded import CacheCapacityExceeded
from ...core.exceptions.deserialization_error import DeserializationError
from ...core.exceptions.serialization_error import SerializationError
from ...core.protocols.cache_codec import CacheCodec
from ...core.value_objects.cache_ttl import CacheTTL
from ...core.value_objects.cache_value import find_unsupported_value
from ...infrastructure.repositories.memory_entry_store import MemoryEntryStore

logger = logging.getLogger(__name__)


class SerializationBridge:
    """Snapshot and restore a MemoryEntryStore.

    The blob is ``codec.encode([entries, ttls])`` where ``entries`` maps
    keys to values and ``ttls`` maps tracked keys to TTL seconds.

    Restore policy: every decoded key is upserted; value and TTL are
    overwritten and the creation time is reset to the restore time, so
    countdowns restart rather than resume.
    """

    def __init__(self, store: MemoryEntryStore, codec: CacheCodec):
        """Initialize serialization bridge.

        Args:
            store: Entry store to snapshot and restore into
            codec: Codec producing the portable string
        """
        self._store = store
        self._codec = codec

    def serialize(self) -> str:
        """Encode current entries and TTLs.

        Raises:
            SerializationError: If a value is outside the value model or the
                codec fails
        """
        entries = dict(self._store.items())
        for key, value in entries.items():
            path = find_unsupported_value(value)
            if path is not None:
                raise SerializationError.unsupported_value(key, value, path)

        ttls = self._store.metadata_snapshot()
        blob = self._codec.encode([entries, ttls])
        logger.debug("Serialized %d entries (%d with TTL metadata)", len(entries), len(ttls))
        return blob

    def deserialize(self, blob: str) -> int:
        """Decode ``blob`` and upsert its entries into the store.

        Keys without a TTL in the blob are restored with TTL 0 (never
        expire). No hooks fire during restore.

        Returns:
            Number of restored keys

        Raises:
            DeserializationError: If the blob cannot be decoded or has the
                wrong shape
            CacheCapacityExceeded: If the new keys would exceed ``max_keys``;
                nothing is restored in that case
        """
        entries, ttls = self._unpack(self._codec.decode(blob), blob)

        max_keys = self._store.max_keys
        if max_keys:
            incoming = self._store.count_new_keys(entries)
            if self._store.size() + incoming > max_keys:
                raise CacheCapacityExceeded.restore_overflow(
                    current_keys=self._store.size(),
                    incoming_keys=incoming,
                    max_keys=max_keys,
                )

        for key, value in entries.items():
            self._store.restore(key, value, ttls.get(key, CacheTTL.NEVER_EXPIRE))

        if ttls and not self._store.tracks_metadata:
            logger.debug("Ignored TTLs of %d restored entries, expiry is disabled", len(ttls))
        logger.debug("Restored %d entries", len(entries))
        return len(entries)

    @staticmethod
    def _unpack(payload: Any, blob: str) -> Tuple[Dict[str, Any], Dict[str, float]]:
        """Check the decoded payload has the shape written by ``serialize``."""
        if not isinstance(payload, list) or len(payload) != 2:
            raise DeserializationError.invalid_payload("expected a [entries, ttls] pair", data=blob)

        entries, ttls = payload
        if not isinstance(entries, Mapping) or not isinstance(ttls, Mapping):
            raise DeserializationError.invalid_payload("entries and ttls must be mappings", data=blob)
        if not all(isinstance(key, str) for key in entries):
            raise DeserializationError.invalid_payload("entry keys must be strings", data=blob)

        for key, ttl in ttls.items():
            if not isinstance(key, str):
                raise DeserializationError.invalid_payload("TTL keys must be strings", data=blob)
            if isinstance(ttl, bool) or not isinstance(ttl, (int, float)) or math.isnan(ttl) or ttl < 0:
                raise DeserializationError.invalid_payload(f"invalid TTL {ttl!r} for key {key!r}", data=blob)

        return dict(entries), dict(ttls)
