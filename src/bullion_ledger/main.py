"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bullion_ledger.api.routers import ledgers_router, transactions_router
from bullion_ledger.app_context import get_app_context
from bullion_ledger.config.logging_config import setup_logging
from bullion_ledger.config.settings import get_settings
from bullion_ledger.core.exceptions import AppError, NetworkError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    yield
    # Shutdown
    get_app_context().close()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Bullion ledger valuation and transaction submission",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(ledgers_router)
app.include_router(transactions_router)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, NetworkError):
        return 502
    return 500


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
