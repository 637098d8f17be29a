"""View models for ledger display outputs."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from bullion_ledger.domain.models import BalanceStatus, Ledger, TransactionType


@dataclass
class LedgerView:
    """Ledger snapshot with display-rounded balances."""

    ledger: Ledger
    metal_balance_display: Decimal
    cash_balance_display: Decimal


@dataclass
class TransactionPreview:
    """Derived figures for a transaction request, computed without submitting it."""

    ledger_id: str
    type: TransactionType
    pure_weight: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    amount_derived: bool = False
    rounded_amount: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    balance_status: Optional[BalanceStatus] = None
