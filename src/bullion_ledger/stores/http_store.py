"""
HTTP ledger store.

REST client for the authoritative ledger server. Every non-2xx response
and every transport failure is raised as NetworkError; nothing is retried.
"""

import logging
from decimal import Decimal
from typing import Any, Optional
from urllib.parse import quote

import httpx

from bullion_ledger.core.exceptions import NetworkError, ValidationError
from bullion_ledger.core.timezone import parse_timestamp
from bullion_ledger.domain.models import (
    Ledger,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from bullion_ledger.services.valuation_engine import to_decimal

logger = logging.getLogger(__name__)

# Wire (camelCase) name -> Transaction/TransactionDraft attribute
_NUMERIC_FIELDS = {
    "grossWeight": "gross_weight",
    "purity": "purity",
    "rate": "rate",
    "amount": "amount",
    "paidAmount": "paid_amount",
    "pureWeight": "pure_weight",
    "roundedAmount": "rounded_amount",
    "balance": "balance",
}


class HttpLedgerStore:
    """REST client for the ledger server's /api/ledgers endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def list_ledgers(self, query: Optional[str] = None) -> list[Ledger]:
        params = {"q": query} if query else None
        data = self._request("GET", "/api/ledgers", "fetching ledgers", params=params)
        return [self._ledger_from_wire(item) for item in self._expect_list(data)]

    def get_ledger(self, ledger_id: str) -> Ledger:
        data = self._request(
            "GET",
            f"/api/ledgers/{quote(ledger_id, safe='')}",
            f"fetching ledger {ledger_id}",
        )
        return self._ledger_from_wire(data)

    def create_ledger(self, name: str) -> Ledger:
        data = self._request("POST", "/api/ledgers", "creating ledger", json={"name": name})
        return self._ledger_from_wire(data)

    def list_transactions(self, ledger_id: str) -> list[Transaction]:
        data = self._request(
            "GET",
            f"/api/ledgers/{quote(ledger_id, safe='')}/transactions",
            f"fetching transactions for ledger {ledger_id}",
        )
        return [self._transaction_from_wire(item) for item in self._expect_list(data)]

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        data = self._request(
            "POST",
            f"/api/ledgers/{quote(draft.ledger_id, safe='')}/transactions",
            "creating transaction",
            json=self._draft_to_wire(draft),
        )
        return self._transaction_from_wire(data)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HttpLedgerStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, action: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body (floats as Decimal)."""
        url = f"{self.base_url}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Ledger store unreachable while {action}: {e}")
            raise NetworkError(f"Error {action}: {e}") from e

        if not response.is_success:
            logger.warning(f"Ledger store returned {response.status_code} while {action}")
            raise NetworkError(
                f"Error {action}: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        try:
            return response.json(parse_float=Decimal)
        except ValueError as e:
            raise NetworkError(
                f"Error {action}: response is not valid JSON",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _expect_list(data: Any) -> list:
        if not isinstance(data, list):
            raise NetworkError(f"Expected a JSON array, got {type(data).__name__}")
        return data

    @staticmethod
    def _ledger_from_wire(data: Any) -> Ledger:
        try:
            last_updated = data.get("lastUpdated")
            return Ledger(
                id=str(data["id"]),
                name=data["name"],
                metal_balance=to_decimal(data.get("metalBalance", 0), "metalBalance"),
                cash_balance=to_decimal(data.get("cashBalance", 0), "cashBalance"),
                last_updated=parse_timestamp(last_updated) if last_updated else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise NetworkError(f"Malformed ledger payload: {e}") from e

    @staticmethod
    def _transaction_from_wire(data: Any) -> Transaction:
        try:
            numbers = {
                attr: to_decimal(data[key], key)
                for key, attr in _NUMERIC_FIELDS.items()
                if data.get(key) is not None
            }
            return Transaction(
                id=str(data["id"]),
                ledger_id=str(data["ledgerId"]),
                type=TransactionType(data["type"]),
                timestamp=parse_timestamp(data["timestamp"]),
                **numbers,
            )
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise NetworkError(f"Malformed transaction payload: {e}") from e

    @staticmethod
    def _draft_to_wire(draft: TransactionDraft) -> dict[str, Any]:
        """Serialize a draft; absent fields are omitted and Decimals sent as JSON numbers."""
        body: dict[str, Any] = {
            "ledgerId": draft.ledger_id,
            "type": draft.type.value,
        }
        for key, attr in _NUMERIC_FIELDS.items():
            value = getattr(draft, attr)
            if value is not None:
                body[key] = float(value)
        return body
