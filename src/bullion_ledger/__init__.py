"""Bullion ledger: valuation, ledger read cache and transaction submission."""

__version__ = "0.1.0"
