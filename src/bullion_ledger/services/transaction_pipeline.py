"""Transaction submission pipeline: validate, derive, submit, invalidate."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from bullion_ledger.core.exceptions import ValidationError
from bullion_ledger.domain.models import Transaction, TransactionDraft, TransactionType
from bullion_ledger.domain.views import TransactionPreview
from bullion_ledger.services import valuation_engine as valuation
from bullion_ledger.services.ledger_cache import LedgerReadCache
from bullion_ledger.services.valuation_engine import Number
from bullion_ledger.stores.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

_MIN_PURITY = Decimal("0")
_MAX_PURITY = Decimal("100")


@dataclass
class TransactionRequest:
    """Raw input for a transaction, as captured by a form or API call."""

    ledger_id: str
    type: Union[TransactionType, str]
    gross_weight: Optional[Number] = None
    purity: Optional[Number] = None
    rate: Optional[Number] = None
    amount: Optional[Number] = None
    paid_amount: Optional[Number] = None


class TransactionPipeline:
    """
    Pipeline for submitting transactions to the ledger store.

    Validates the request against its type, attaches derived pure weight,
    rounded amount and balance, submits it, and invalidates the ledger's
    cache entry once the store has accepted the write. Store errors
    propagate unchanged and leave the cache alone.
    """

    def __init__(self, store: LedgerStore, cache: LedgerReadCache):
        self._store = store
        self._cache = cache

    def submit(self, request: TransactionRequest) -> Transaction:
        """
        Validate and submit a transaction.

        Returns the created transaction with the store-assigned id and timestamp.
        """
        draft = self.build_draft(request)

        created = self._store.create_transaction(draft)

        # Only after the store acknowledged the write
        self._cache.invalidate(draft.ledger_id)
        logger.debug(f"Recorded {draft.type.value} transaction {created.id} on ledger {draft.ledger_id}")
        return created

    def preview(self, request: TransactionRequest) -> TransactionPreview:
        """Compute the derived figures for a request without submitting it."""
        draft = self.build_draft(request)
        return TransactionPreview(
            ledger_id=draft.ledger_id,
            type=draft.type,
            pure_weight=draft.pure_weight,
            amount=draft.amount,
            amount_derived=draft.amount_derived,
            rounded_amount=draft.rounded_amount,
            balance=draft.balance,
            balance_status=(
                valuation.balance_status(draft.balance) if draft.balance is not None else None
            ),
        )

    def build_draft(self, request: TransactionRequest) -> TransactionDraft:
        """
        Validate a request and compute its derived fields.

        Fields that do not apply to the transaction type are dropped.
        """
        if not request.ledger_id or not request.ledger_id.strip():
            raise ValidationError("Ledger is required")
        txn_type = self._parse_type(request.type)

        gross_weight = purity = pure_weight = None
        if txn_type.has_weight:
            if request.gross_weight is None:
                raise ValidationError(f"{txn_type.value} requires gross_weight")
            gross_weight = valuation.to_decimal(request.gross_weight, "gross_weight")
            if request.purity is not None:
                purity = valuation.to_decimal(request.purity, "purity")
                if not _MIN_PURITY <= purity <= _MAX_PURITY:
                    raise ValidationError(f"Purity must be between 0 and 100, got {purity}")
                pure_weight = valuation.calculate_pure_weight(gross_weight, purity)

        rate = amount = paid_amount = rounded_amount = balance = None
        amount_derived = False
        if txn_type.has_amount:
            if txn_type.has_weight and request.rate is not None:
                rate = valuation.to_decimal(request.rate, "rate")
            if request.amount is not None:
                amount = valuation.to_decimal(request.amount, "amount")
            elif rate is not None and pure_weight is not None:
                amount = valuation.suggest_amount(pure_weight, rate)
                amount_derived = True
            if request.paid_amount is not None:
                paid_amount = valuation.to_decimal(request.paid_amount, "paid_amount")

            if amount is not None:
                rounded_amount = valuation.round_to_nearest_5(amount)
                if paid_amount is not None:
                    balance = valuation.calculate_balance(amount, paid_amount)

        return TransactionDraft(
            ledger_id=request.ledger_id,
            type=txn_type,
            gross_weight=gross_weight,
            purity=purity,
            rate=rate,
            amount=amount,
            paid_amount=paid_amount,
            pure_weight=pure_weight,
            rounded_amount=rounded_amount,
            balance=balance,
            amount_derived=amount_derived,
        )

    @staticmethod
    def _parse_type(value: Union[TransactionType, str]) -> TransactionType:
        if isinstance(value, TransactionType):
            return value
        if isinstance(value, str):
            try:
                return TransactionType(value)
            except ValueError:
                pass
        valid = ", ".join(t.value for t in TransactionType)
        raise ValidationError(f"Unknown transaction type {value!r}; expected one of: {valid}")
