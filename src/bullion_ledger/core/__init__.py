"""Core utilities and shared functionality."""

from bullion_ledger.core.timezone import (
    now_utc,
    to_utc,
    parse_timestamp,
    UTC_TZ,
)
from bullion_ledger.core.exceptions import (
    AppError,
    ValidationError,
    InvalidInputError,
    NotFoundError,
    NetworkError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_timestamp",
    "UTC_TZ",
    "AppError",
    "ValidationError",
    "InvalidInputError",
    "NotFoundError",
    "NetworkError",
]
