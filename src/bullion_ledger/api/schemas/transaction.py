"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from bullion_ledger.domain.models.enums import BalanceStatus, TransactionType
from bullion_ledger.services.transaction_pipeline import TransactionRequest


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a transaction against a ledger."""

    type: TransactionType = Field(..., description="Transaction type")
    gross_weight: Optional[Decimal] = Field(
        default=None,
        description="Gross weight in grams (required for purchase/sale/metal_*)",
    )
    purity: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="Purity as a percentage (0-100)",
    )
    rate: Optional[Decimal] = Field(default=None, description="Rate per gram")
    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount; derived from pure weight x rate when omitted",
    )
    paid_amount: Optional[Decimal] = Field(default=None, description="Amount paid")

    def to_request(self, ledger_id: str) -> TransactionRequest:
        return TransactionRequest(
            ledger_id=ledger_id,
            type=self.type,
            gross_weight=self.gross_weight,
            purity=self.purity,
            rate=self.rate,
            amount=self.amount,
            paid_amount=self.paid_amount,
        )


class TransactionPreviewRequest(TransactionCreateRequest):
    """Request schema for previewing derived transaction figures."""

    ledger_id: str = Field(..., min_length=1, description="Ledger ID")


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

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


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int


class TransactionPreviewResponse(BaseModel):
    """Response schema for derived transaction figures."""

    model_config = {"from_attributes": True}

    ledger_id: str
    type: TransactionType
    pure_weight: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    amount_derived: bool = False
    rounded_amount: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    balance_status: Optional[BalanceStatus] = None
