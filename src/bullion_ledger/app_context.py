"""Application context for in-process service management.

Owns the ledger store, the ledger read cache and the services built on
them, so that exactly one cache sits in front of the store per process.
"""

import logging
from typing import Optional

from bullion_ledger.config.settings import Settings, get_settings
from bullion_ledger.services import LedgerReadCache, LedgerService, TransactionPipeline
from bullion_ledger.stores import HttpLedgerStore, InMemoryLedgerStore, LedgerStore

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to all services.

    Components are created lazily from settings on first use. A store can
    be injected directly, which is how tests and offline runs supply an
    in-memory store.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[LedgerStore] = None,
    ):
        self._settings = settings
        self._store = store
        self._owns_store = store is None

        self._cache: Optional[LedgerReadCache] = None
        self._pipeline: Optional[TransactionPipeline] = None
        self._ledger_service: Optional[LedgerService] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> LedgerStore:
        """Get the ledger store, building it from settings if needed."""
        if self._store is None:
            settings = self.settings
            if settings.use_stub_store:
                logger.info("Using in-memory ledger store")
                self._store = InMemoryLedgerStore()
            else:
                logger.info(f"Using ledger store at {settings.get_api_base_url()}")
                self._store = HttpLedgerStore(
                    base_url=settings.get_api_base_url(),
                    timeout=settings.request_timeout_seconds,
                )
        return self._store

    @property
    def cache(self) -> LedgerReadCache:
        """Get the LedgerReadCache instance."""
        if self._cache is None:
            self._cache = LedgerReadCache(
                store=self.store,
                ttl_seconds=self.settings.ledger_cache_ttl_seconds,
            )
        return self._cache

    @property
    def pipeline(self) -> TransactionPipeline:
        """Get the TransactionPipeline instance."""
        if self._pipeline is None:
            self._pipeline = TransactionPipeline(store=self.store, cache=self.cache)
        return self._pipeline

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            self._ledger_service = LedgerService(
                store=self.store,
                cache=self.cache,
                pipeline=self.pipeline,
            )
        return self._ledger_service

    def close(self) -> None:
        """Clean up resources."""
        if self._owns_store:
            if isinstance(self._store, HttpLedgerStore):
                self._store.close()
            self._store = None
        self._cache = None
        self._pipeline = None
        self._ledger_service = None


# Global application context (one per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
