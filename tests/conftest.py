"""
Pytest configuration and fixtures for bullion ledger tests.

This module provides:
- Fixed clocks for deterministic cache expiry
- In-memory ledger stores (counting and failing variants)
- Service fixtures wired the way AppContext wires them
- FastAPI test client backed by an in-memory store
"""

import json
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from bullion_ledger.main import app
from bullion_ledger.api.deps import get_ledger_service
from bullion_ledger.app_context import AppContext
from bullion_ledger.config.settings import Settings, reset_settings
from bullion_ledger.core.exceptions import NetworkError
from bullion_ledger.core.timezone import UTC_TZ
from bullion_ledger.domain.models import Ledger, Transaction, TransactionDraft
from bullion_ledger.services import LedgerReadCache, LedgerService, TransactionPipeline
from bullion_ledger.services.transaction_pipeline import TransactionRequest
from bullion_ledger.stores import HttpLedgerStore, InMemoryLedgerStore


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return UTC_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Callable clock that only moves when advanced."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    """Provide a clock frozen at fixed_now."""
    return FakeClock(fixed_now)


# =============================================================================
# STORE FIXTURES
# =============================================================================


MAIN_VAULT_ID = "1"


def make_ledger(
    ledger_id: str = MAIN_VAULT_ID,
    name: str = "Main Vault",
    metal_balance: Decimal = Decimal("1250.965"),
    cash_balance: Decimal = Decimal("50092"),
    last_updated: Optional[datetime] = None,
) -> Ledger:
    """Build a ledger snapshot with sensible defaults."""
    return Ledger(
        id=ledger_id,
        name=name,
        metal_balance=metal_balance,
        cash_balance=cash_balance,
        last_updated=last_updated or utc_datetime(2024, 6, 1),
    )


class CountingLedgerStore(InMemoryLedgerStore):
    """In-memory store that records how often each operation is called."""

    def __init__(self, ledgers: Optional[list[Ledger]] = None):
        super().__init__(ledgers)
        self.get_ledger_calls = 0
        self.create_transaction_calls = 0

    def get_ledger(self, ledger_id: str) -> Ledger:
        self.get_ledger_calls += 1
        return super().get_ledger(ledger_id)

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        self.create_transaction_calls += 1
        return super().create_transaction(draft)


class FailingLedgerStore:
    """Ledger store whose every call fails like an unreachable server."""

    def __init__(self, status_code: Optional[int] = 503):
        self.status_code = status_code
        self.calls = 0

    def _fail(self, action: str):
        self.calls += 1
        raise NetworkError(f"Error {action}: {self.status_code} Service Unavailable", self.status_code)

    def list_ledgers(self, query: Optional[str] = None) -> list[Ledger]:
        self._fail("fetching ledgers")

    def get_ledger(self, ledger_id: str) -> Ledger:
        self._fail(f"fetching ledger {ledger_id}")

    def create_ledger(self, name: str) -> Ledger:
        self._fail("creating ledger")

    def list_transactions(self, ledger_id: str) -> list[Transaction]:
        self._fail(f"fetching transactions for ledger {ledger_id}")

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        self._fail("creating transaction")


@pytest.fixture
def main_vault() -> Ledger:
    """The seeded 'Main Vault' ledger."""
    return make_ledger()


@pytest.fixture
def store(main_vault) -> CountingLedgerStore:
    """Provide an in-memory store seeded with the Main Vault ledger."""
    return CountingLedgerStore([main_vault])


@pytest.fixture
def failing_store() -> FailingLedgerStore:
    """Provide a store that always fails."""
    return FailingLedgerStore()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_cache(store, clock) -> LedgerReadCache:
    """Provide a LedgerReadCache with a 60 second TTL."""
    return LedgerReadCache(store=store, ttl_seconds=60, clock=clock)


@pytest.fixture
def pipeline(store, ledger_cache) -> TransactionPipeline:
    """Provide a TransactionPipeline sharing the store and cache."""
    return TransactionPipeline(store=store, cache=ledger_cache)


@pytest.fixture
def ledger_service(store, ledger_cache, pipeline) -> LedgerService:
    """Provide a LedgerService sharing the store, cache and pipeline."""
    return LedgerService(store=store, cache=ledger_cache, pipeline=pipeline)


@pytest.fixture
def request_factory() -> Callable[..., TransactionRequest]:
    """Factory for transaction requests against the Main Vault."""

    def _create_request(type: str = "purchase", **fields) -> TransactionRequest:
        fields.setdefault("ledger_id", MAIN_VAULT_ID)
        return TransactionRequest(type=type, **fields)

    return _create_request


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(store) -> AppContext:
    """Provide an AppContext over the in-memory store with a 60 second cache."""
    reset_settings()
    return AppContext(settings=Settings(ledger_cache_ttl_seconds=60), store=store)


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client backed by the in-memory store."""
    app.dependency_overrides[get_ledger_service] = lambda: app_context.ledger
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def ledger_payload(
    ledger_id: str = MAIN_VAULT_ID,
    name: str = "Main Vault",
    metal_balance: float = 1250.965,
    cash_balance: float = 50090,
    last_updated: str = "2024-06-01T10:00:00Z",
) -> dict:
    """Ledger JSON as served by the ledger server."""
    return {
        "id": ledger_id,
        "name": name,
        "metalBalance": metal_balance,
        "cashBalance": cash_balance,
        "lastUpdated": last_updated,
    }


# =============================================================================
# FAKE LEDGER SERVER (httpx.MockTransport handler)
# =============================================================================


class FakeLedgerServer:
    """
    In-process stand-in for the ledger server's REST API.

    Serves /api/ledgers endpoints from dicts and applies cash transactions
    to the stored balances so reads after writes can be checked.
    """

    BASE_URL = "http://ledger.test"

    def __init__(self):
        self.ledgers: dict[str, dict] = {MAIN_VAULT_ID: ledger_payload()}
        self.transactions: dict[str, list[dict]] = {MAIN_VAULT_ID: []}
        self.requests: list[httpx.Request] = []
        self.fail_with: Optional[int] = None
        self._next_id = 1

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    def store(self) -> HttpLedgerStore:
        return HttpLedgerStore(base_url=self.BASE_URL, client=self.client())

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with)

        parts = request.url.path.strip("/").split("/")
        if parts[:2] != ["api", "ledgers"]:
            return httpx.Response(404)

        if len(parts) == 2 and request.method == "GET":
            query = request.url.params.get("q", "").lower()
            items = [l for l in self.ledgers.values() if query in l["name"].lower()]
            return httpx.Response(200, json=items)

        if len(parts) == 2 and request.method == "POST":
            body = json.loads(request.content)
            ledger_id = str(len(self.ledgers) + 1)
            self.ledgers[ledger_id] = ledger_payload(
                ledger_id=ledger_id, name=body["name"], metal_balance=0, cash_balance=0
            )
            self.transactions[ledger_id] = []
            return httpx.Response(201, json=self.ledgers[ledger_id])

        ledger_id = parts[2]
        if ledger_id not in self.ledgers:
            return httpx.Response(404)

        if len(parts) == 3 and request.method == "GET":
            return httpx.Response(200, json=self.ledgers[ledger_id])

        if len(parts) == 4 and parts[3] == "transactions":
            if request.method == "GET":
                return httpx.Response(200, json=self.transactions[ledger_id])
            body = json.loads(request.content)
            created = dict(body, id=f"txn-{self._next_id}", timestamp="2024-06-15T15:00:00Z")
            self._next_id += 1
            self.transactions[ledger_id].append(created)
            self._apply(self.ledgers[ledger_id], body)
            return httpx.Response(201, json=created)

        return httpx.Response(405)

    @staticmethod
    def _apply(ledger: dict, body: dict) -> None:
        if body["type"] == "cash_received":
            ledger["cashBalance"] += body["amount"]
        elif body["type"] == "cash_given":
            ledger["cashBalance"] -= body["amount"]
        ledger["lastUpdated"] = "2024-06-15T15:00:00Z"


@pytest.fixture
def fake_server() -> FakeLedgerServer:
    """Provide a fake ledger server seeded with the Main Vault."""
    return FakeLedgerServer()


@pytest.fixture
def http_store(fake_server) -> HttpLedgerStore:
    """Provide an HttpLedgerStore talking to the fake server."""
    store = fake_server.store()
    yield store
    store.close()
