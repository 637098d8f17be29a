"""Dependency injection for FastAPI."""

from fastapi import Depends

from bullion_ledger.app_context import AppContext, get_app_context
from bullion_ledger.services import LedgerService


def get_context() -> AppContext:
    """Provide the process-wide AppContext."""
    return get_app_context()


def get_ledger_service(context: AppContext = Depends(get_context)) -> LedgerService:
    """Provide LedgerService instance."""
    return context.ledger
