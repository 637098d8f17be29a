"""Read-through cache of ledger snapshots."""

import logging
from datetime import datetime
from typing import Callable, Optional

from bullion_ledger.core.exceptions import ValidationError
from bullion_ledger.core.timezone import now_utc
from bullion_ledger.domain.models import Ledger, LedgerCacheEntry
from bullion_ledger.stores.ledger_store import LedgerStore

logger = logging.getLogger(__name__)


class LedgerReadCache:
    """
    Read-through cache between ledger reads and the ledger store.

    Entries expire after ttl_seconds. A TTL of 0 makes every read a fetch.
    invalidate() removes an entry outright and must only be called after
    the store has acknowledged the write that made the entry stale.

    Concurrent misses for the same ledger are not coalesced; each one
    fetches from the store.
    """

    def __init__(
        self,
        store: LedgerStore,
        ttl_seconds: float = 0,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._store = store
        self._clock = clock
        self._entries: dict[str, LedgerCacheEntry] = {}
        self._ttl = 0.0
        self.configure(ttl_seconds)

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def configure(self, ttl_seconds: float) -> None:
        """Set the expiry window in seconds."""
        if ttl_seconds < 0:
            raise ValidationError(f"Cache TTL cannot be negative: {ttl_seconds}")
        self._ttl = float(ttl_seconds)

    def get(self, ledger_id: str) -> Ledger:
        """
        Return the ledger snapshot, fetching from the store if needed.

        A failed fetch leaves the cache untouched and propagates the
        store's error.
        """
        entry = self._entries.get(ledger_id)
        if entry is not None and entry.is_fresh(self._clock(), self._ttl):
            logger.debug(f"Ledger cache hit: {ledger_id}")
            return entry.snapshot

        logger.debug(f"Ledger cache miss: {ledger_id}")
        ledger = self._store.get_ledger(ledger_id)
        self._entries[ledger_id] = LedgerCacheEntry(snapshot=ledger, fetched_at=self._clock())
        return ledger

    def peek(self, ledger_id: str) -> Optional[Ledger]:
        """Return the cached snapshot if fresh, without fetching."""
        entry = self._entries.get(ledger_id)
        if entry is not None and entry.is_fresh(self._clock(), self._ttl):
            return entry.snapshot
        return None

    def invalidate(self, ledger_id: str) -> None:
        """Remove any entry for ledger_id (no-op if absent)."""
        if self._entries.pop(ledger_id, None) is not None:
            logger.debug(f"Ledger cache invalidated: {ledger_id}")

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __contains__(self, ledger_id: object) -> bool:
        return ledger_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
