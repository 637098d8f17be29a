"""Domain layer - pure business models with no external dependencies."""

from bullion_ledger.domain.models import (
    Ledger,
    Transaction,
    TransactionDraft,
    LedgerCacheEntry,
    TransactionType,
    BalanceStatus,
)

__all__ = [
    "Ledger",
    "Transaction",
    "TransactionDraft",
    "LedgerCacheEntry",
    "TransactionType",
    "BalanceStatus",
]
