"""Cache models for ledger read snapshots."""

from dataclasses import dataclass
from datetime import datetime

from bullion_ledger.domain.models.ledger import Ledger


@dataclass(frozen=True)
class LedgerCacheEntry:
    """
    Ledger snapshot held by the read cache.

    IMPORTANT: Never edit directly; entries are replaced by re-fetching
    from the store or removed by invalidation.
    """

    snapshot: Ledger
    fetched_at: datetime

    def is_fresh(self, now: datetime, ttl_seconds: float) -> bool:
        """Return True while now - fetched_at < ttl."""
        return (now - self.fetched_at).total_seconds() < ttl_seconds
