"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of bullion ledger transactions."""

    PURCHASE = "purchase"
    SALE = "sale"
    METAL_RECEIVED = "metal_received"
    METAL_GIVEN = "metal_given"
    CASH_RECEIVED = "cash_received"
    CASH_GIVEN = "cash_given"

    @property
    def has_weight(self) -> bool:
        """Return True if gross weight and purity apply to this type."""
        return self in _WEIGHT_TYPES

    @property
    def has_amount(self) -> bool:
        """Return True if amount, rate and paid amount apply to this type."""
        return self in _AMOUNT_TYPES


_WEIGHT_TYPES = frozenset(
    {
        TransactionType.PURCHASE,
        TransactionType.SALE,
        TransactionType.METAL_RECEIVED,
        TransactionType.METAL_GIVEN,
    }
)

_AMOUNT_TYPES = frozenset(
    {
        TransactionType.PURCHASE,
        TransactionType.SALE,
        TransactionType.CASH_RECEIVED,
        TransactionType.CASH_GIVEN,
    }
)


class BalanceStatus(str, Enum):
    """Settlement state derived from the sign of amount - paid amount."""

    DUE = "due"
    OVERPAID = "overpaid"
    SETTLED = "settled"
