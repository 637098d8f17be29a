"""API routers package."""

from bullion_ledger.api.routers.ledgers import router as ledgers_router
from bullion_ledger.api.routers.transactions import router as transactions_router

__all__ = [
    "ledgers_router",
    "transactions_router",
]
