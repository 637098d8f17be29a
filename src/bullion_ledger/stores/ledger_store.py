"""Ledger store protocol."""

from typing import Optional, Protocol

from bullion_ledger.domain.models import Ledger, Transaction, TransactionDraft


class LedgerStore(Protocol):
    """
    Interface for the authoritative ledger store.

    Implementations raise NetworkError when the store cannot be reached or
    rejects a request. Balances are only ever changed by the store.
    """

    def list_ledgers(self, query: Optional[str] = None) -> list[Ledger]:
        """List ledgers, optionally filtered by a search string."""
        ...

    def get_ledger(self, ledger_id: str) -> Ledger:
        """Retrieve a ledger by ID."""
        ...

    def create_ledger(self, name: str) -> Ledger:
        """Create a new empty ledger."""
        ...

    def list_transactions(self, ledger_id: str) -> list[Transaction]:
        """List transactions recorded against a ledger."""
        ...

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        """Record a transaction; the store assigns id and timestamp."""
        ...
