"""Transaction and TransactionDraft domain models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from bullion_ledger.domain.models.enums import TransactionType


@dataclass(frozen=True)
class TransactionDraft:
    """
    Validated transaction ready for submission to the store.

    Carries only the fields relevant to its type plus the derived
    pure_weight, rounded_amount and balance. Has no id or timestamp;
    those are assigned by the store.
    """

    ledger_id: str
    type: TransactionType
    gross_weight: Optional[Decimal] = None
    purity: Optional[Decimal] = None
    rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    paid_amount: Optional[Decimal] = None
    pure_weight: Optional[Decimal] = None
    rounded_amount: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    amount_derived: bool = False


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction as recorded by the store.

    - purchase/sale carry weight and amount fields
    - metal_received/metal_given carry weight fields only
    - cash_received/cash_given carry amount fields only
    """

    id: str
    ledger_id: str
    type: TransactionType
    timestamp: datetime
    gross_weight: Optional[Decimal] = None
    purity: Optional[Decimal] = None
    rate: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    paid_amount: Optional[Decimal] = None
    pure_weight: Optional[Decimal] = None
    rounded_amount: Optional[Decimal] = None
    balance: Optional[Decimal] = None

    @property
    def metal_figure(self) -> Decimal:
        """Weight moved by this transaction: pure weight if known, else gross."""
        if self.pure_weight is not None:
            return self.pure_weight
        return self.gross_weight or Decimal("0")

    @property
    def cash_figure(self) -> Decimal:
        """Cash moved by this transaction: outstanding balance if known, else amount."""
        if self.balance is not None:
            return self.balance
        return self.amount or Decimal("0")

    @property
    def net_metal_impact(self) -> Decimal:
        """
        Signed change to the ledger's metal balance.

        Positive = metal added to the ledger, negative = metal removed.
        """
        if self.type in (TransactionType.PURCHASE, TransactionType.METAL_RECEIVED):
            return self.metal_figure
        elif self.type in (TransactionType.SALE, TransactionType.METAL_GIVEN):
            return -self.metal_figure
        return Decimal("0")

    @property
    def net_cash_impact(self) -> Decimal:
        """
        Signed change to the ledger's cash balance.

        Positive = cash added, negative = cash removed.
        """
        if self.type == TransactionType.PURCHASE:
            return -self.cash_figure
        elif self.type == TransactionType.SALE:
            return self.cash_figure
        elif self.type == TransactionType.CASH_RECEIVED:
            return self.amount or Decimal("0")
        elif self.type == TransactionType.CASH_GIVEN:
            return -(self.amount or Decimal("0"))
        return Decimal("0")
