"""Ledger service for reads, ledger creation and transaction submission."""

from typing import Optional

from bullion_ledger.core.exceptions import ValidationError
from bullion_ledger.domain.models import Ledger, Transaction
from bullion_ledger.domain.views import LedgerView, TransactionPreview
from bullion_ledger.services import valuation_engine as valuation
from bullion_ledger.services.ledger_cache import LedgerReadCache
from bullion_ledger.services.transaction_pipeline import TransactionPipeline, TransactionRequest
from bullion_ledger.stores.ledger_store import LedgerStore


class LedgerService:
    """
    Service for reading and managing bullion ledgers.

    Single ledger reads go through the read cache; listings and history
    always hit the store. Transaction writes go through the pipeline so
    the cache is invalidated after each accepted write.
    """

    def __init__(
        self,
        store: LedgerStore,
        cache: LedgerReadCache,
        pipeline: TransactionPipeline,
    ):
        self._store = store
        self._cache = cache
        self._pipeline = pipeline

    def list_ledgers(self, query: Optional[str] = None) -> list[Ledger]:
        """List ledgers; a blank query lists all."""
        query = query.strip() if query else None
        return self._store.list_ledgers(query or None)

    def get_ledger(self, ledger_id: str) -> Ledger:
        """Get a ledger snapshot through the read cache."""
        self._require_ledger_id(ledger_id)
        return self._cache.get(ledger_id)

    def get_ledger_view(self, ledger_id: str) -> LedgerView:
        """
        Get a ledger with display balances.

        Metal is truncated to 3 decimals and cash rounded to the nearest 5.
        The underlying snapshot keeps the exact figures.
        """
        ledger = self.get_ledger(ledger_id)
        return LedgerView(
            ledger=ledger,
            metal_balance_display=valuation.truncate_to_3_decimals(ledger.metal_balance),
            cash_balance_display=valuation.round_to_nearest_5(ledger.cash_balance),
        )

    def create_ledger(self, name: str) -> Ledger:
        """Create a new ledger with a non-blank name."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Ledger name is required")
        return self._store.create_ledger(name)

    def list_transactions(self, ledger_id: str) -> list[Transaction]:
        """List transactions recorded against a ledger."""
        self._require_ledger_id(ledger_id)
        return self._store.list_transactions(ledger_id)

    def submit_transaction(self, request: TransactionRequest) -> Transaction:
        return self._pipeline.submit(request)

    def preview_transaction(self, request: TransactionRequest) -> TransactionPreview:
        return self._pipeline.preview(request)

    @staticmethod
    def _require_ledger_id(ledger_id: str) -> None:
        if not ledger_id or not ledger_id.strip():
            raise ValidationError("Ledger is required")
