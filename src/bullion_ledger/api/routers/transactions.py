"""Transaction endpoints."""

from fastapi import APIRouter, Depends

from bullion_ledger.api.deps import get_ledger_service
from bullion_ledger.api.schemas import (
    TransactionCreateRequest,
    TransactionPreviewRequest,
    TransactionResponse,
    TransactionListResponse,
    TransactionPreviewResponse,
)
from bullion_ledger.services import LedgerService

router = APIRouter(tags=["transactions"])


@router.get("/ledgers/{ledger_id}/transactions", response_model=TransactionListResponse)
def list_transactions(
    ledger_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionListResponse:
    """List transactions recorded against a ledger."""
    transactions = service.list_transactions(ledger_id)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@router.post(
    "/ledgers/{ledger_id}/transactions",
    response_model=TransactionResponse,
    status_code=201,
)
def create_transaction(
    ledger_id: str,
    data: TransactionCreateRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record a transaction; derived figures are computed server-side."""
    created = service.submit_transaction(data.to_request(ledger_id))
    return TransactionResponse.model_validate(created)


@router.post("/transactions/preview", response_model=TransactionPreviewResponse)
def preview_transaction(
    data: TransactionPreviewRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransactionPreviewResponse:
    """Compute pure weight, amount and balance for a transaction without recording it."""
    preview = service.preview_transaction(data.to_request(data.ledger_id))
    return TransactionPreviewResponse.model_validate(preview)
