"""Ledger store collaborators."""

from bullion_ledger.stores.ledger_store import LedgerStore
from bullion_ledger.stores.http_store import HttpLedgerStore
from bullion_ledger.stores.stub_store import InMemoryLedgerStore

__all__ = [
    "LedgerStore",
    "HttpLedgerStore",
    "InMemoryLedgerStore",
]
