"""Domain models package."""

from bullion_ledger.domain.models.enums import TransactionType, BalanceStatus
from bullion_ledger.domain.models.ledger import Ledger
from bullion_ledger.domain.models.transaction import Transaction, TransactionDraft
from bullion_ledger.domain.models.cache import LedgerCacheEntry

__all__ = [
    "TransactionType",
    "BalanceStatus",
    "Ledger",
    "Transaction",
    "TransactionDraft",
    "LedgerCacheEntry",
]
