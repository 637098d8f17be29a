"""Service layer - valuation, caching and business logic orchestration."""

from bullion_ledger.services import valuation_engine
from bullion_ledger.services.ledger_cache import LedgerReadCache
from bullion_ledger.services.transaction_pipeline import TransactionPipeline, TransactionRequest
from bullion_ledger.services.ledger_service import LedgerService

__all__ = [
    "valuation_engine",
    "LedgerReadCache",
    "TransactionPipeline",
    "TransactionRequest",
    "LedgerService",
]
