"""Pydantic schemas for ledger endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from bullion_ledger.domain.views import LedgerView


class LedgerCreate(BaseModel):
    """Request schema for creating a ledger."""

    name: str = Field(..., min_length=1, max_length=255, description="Ledger name")


class LedgerResponse(BaseModel):
    """Response schema for a single ledger."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    metal_balance: Decimal
    cash_balance: Decimal
    last_updated: Optional[datetime] = None


class LedgerViewResponse(LedgerResponse):
    """Ledger with display balances (metal truncated to 3 dp, cash rounded to 5)."""

    metal_balance_display: Decimal
    cash_balance_display: Decimal

    @classmethod
    def from_view(cls, view: LedgerView) -> "LedgerViewResponse":
        ledger = view.ledger
        return cls(
            id=ledger.id,
            name=ledger.name,
            metal_balance=ledger.metal_balance,
            cash_balance=ledger.cash_balance,
            last_updated=ledger.last_updated,
            metal_balance_display=view.metal_balance_display,
            cash_balance_display=view.cash_balance_display,
        )


class LedgerListResponse(BaseModel):
    """Response schema for listing ledgers."""

    ledgers: list[LedgerResponse]
    count: int
