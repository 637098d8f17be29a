"""Ledger domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Ledger:
    """
    Per-account bullion ledger snapshot.

    Balances are owned by the store and only change when the store applies
    a transaction. Snapshots handed out by the read cache are immutable.
    """

    id: str
    name: str
    metal_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    last_updated: Optional[datetime] = None
