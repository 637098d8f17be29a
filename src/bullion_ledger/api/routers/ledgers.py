"""Ledger endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from bullion_ledger.api.deps import get_ledger_service
from bullion_ledger.api.schemas import (
    LedgerCreate,
    LedgerResponse,
    LedgerViewResponse,
    LedgerListResponse,
)
from bullion_ledger.services import LedgerService

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


@router.get("", response_model=LedgerListResponse)
def list_ledgers(
    q: Optional[str] = Query(None, description="Search by ledger name"),
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerListResponse:
    """List ledgers, optionally filtered by name."""
    ledgers = service.list_ledgers(q)
    return LedgerListResponse(
        ledgers=[LedgerResponse.model_validate(l) for l in ledgers],
        count=len(ledgers),
    )


@router.post("", response_model=LedgerResponse, status_code=201)
def create_ledger(
    data: LedgerCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """Create a new ledger."""
    return LedgerResponse.model_validate(service.create_ledger(data.name))


@router.get("/{ledger_id}", response_model=LedgerViewResponse)
def get_ledger(
    ledger_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerViewResponse:
    """Get a ledger with its display balances."""
    return LedgerViewResponse.from_view(service.get_ledger_view(ledger_id))
