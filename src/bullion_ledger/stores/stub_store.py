"""In-memory ledger store for offline/testing use."""

import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from bullion_ledger.core.exceptions import NotFoundError
from bullion_ledger.core.timezone import now_utc
from bullion_ledger.domain.models import Ledger, Transaction, TransactionDraft


class InMemoryLedgerStore:
    """
    Stub store that keeps ledgers and transactions in process memory.

    Behaves like the authoritative store: assigns ids and timestamps and
    applies each transaction to its ledger's balances.
    """

    def __init__(self, ledgers: Optional[list[Ledger]] = None):
        self._ledgers: dict[str, Ledger] = {}
        self._transactions: dict[str, list[Transaction]] = {}
        for ledger in ledgers or []:
            self._ledgers[ledger.id] = ledger
            self._transactions[ledger.id] = []

    def list_ledgers(self, query: Optional[str] = None) -> list[Ledger]:
        """List ledgers whose name contains query (case-insensitive)."""
        ledgers = sorted(self._ledgers.values(), key=lambda l: l.name.lower())
        if not query:
            return ledgers
        needle = query.lower()
        return [l for l in ledgers if needle in l.name.lower()]

    def get_ledger(self, ledger_id: str) -> Ledger:
        return self._require_ledger(ledger_id)

    def create_ledger(self, name: str) -> Ledger:
        ledger = Ledger(
            id=str(uuid.uuid4()),
            name=name,
            metal_balance=Decimal("0"),
            cash_balance=Decimal("0"),
            last_updated=now_utc(),
        )
        self._ledgers[ledger.id] = ledger
        self._transactions[ledger.id] = []
        return ledger

    def list_transactions(self, ledger_id: str) -> list[Transaction]:
        self._require_ledger(ledger_id)
        return list(self._transactions[ledger_id])

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        """Record the transaction and apply it to the ledger balances."""
        ledger = self._require_ledger(draft.ledger_id)

        transaction = Transaction(
            id=str(uuid.uuid4()),
            ledger_id=draft.ledger_id,
            type=draft.type,
            timestamp=now_utc(),
            gross_weight=draft.gross_weight,
            purity=draft.purity,
            rate=draft.rate,
            amount=draft.amount,
            paid_amount=draft.paid_amount,
            pure_weight=draft.pure_weight,
            rounded_amount=draft.rounded_amount,
            balance=draft.balance,
        )
        self._transactions[ledger.id].append(transaction)
        self._ledgers[ledger.id] = replace(
            ledger,
            metal_balance=ledger.metal_balance + transaction.net_metal_impact,
            cash_balance=ledger.cash_balance + transaction.net_cash_impact,
            last_updated=transaction.timestamp,
        )
        return transaction

    def _require_ledger(self, ledger_id: str) -> Ledger:
        ledger = self._ledgers.get(ledger_id)
        if ledger is None:
            raise NotFoundError("Ledger", ledger_id)
        return ledger
