"""Logging configuration."""

import logging
import sys

from bullion_ledger.config.settings import get_settings

# Emits a DEBUG line per hit, miss and invalidation
CACHE_LOGGER = "bullion_ledger.services.ledger_cache"


def setup_logging() -> None:
    """
    Configure application logging.

    The bullion_ledger loggers follow settings.log_level. The per-read cache
    trace is held at INFO unless settings.log_cache_activity is set.
    """
    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("bullion_ledger").setLevel(level)
    logging.getLogger(CACHE_LOGGER).setLevel(
        level if settings.log_cache_activity else max(level, logging.INFO)
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
