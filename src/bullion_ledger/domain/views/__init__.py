"""View models for service outputs."""

from bullion_ledger.domain.views.ledger import LedgerView, TransactionPreview

__all__ = [
    "LedgerView",
    "TransactionPreview",
]
