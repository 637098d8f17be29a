"""Pydantic schemas for API request/response."""

from bullion_ledger.api.schemas.ledger import (
    LedgerCreate,
    LedgerResponse,
    LedgerViewResponse,
    LedgerListResponse,
)
from bullion_ledger.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionPreviewRequest,
    TransactionResponse,
    TransactionListResponse,
    TransactionPreviewResponse,
)

__all__ = [
    "LedgerCreate",
    "LedgerResponse",
    "LedgerViewResponse",
    "LedgerListResponse",
    "TransactionCreateRequest",
    "TransactionPreviewRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "TransactionPreviewResponse",
]
