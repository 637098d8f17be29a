"""
Valuation engine for bullion weights and cash amounts.

Pure functions with no I/O and no state. All results are Decimal; inputs
may be int, float, Decimal or a numeric string. Floats are converted via
their shortest repr, so 99.5 is treated as exactly Decimal("99.5").

Only non-finite or non-numeric input is rejected. Every finite value,
including negatives and purities outside 0-100, passes through.
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP, getcontext, localcontext
from typing import Union

from bullion_ledger.core.exceptions import InvalidInputError
from bullion_ledger.domain.models import BalanceStatus

Number = Union[int, float, str, Decimal]

_FIVE = Decimal("5")
_HUNDRED = Decimal("100")
_THOUSANDTH = Decimal("0.001")


def to_decimal(value: Number, name: str = "value") -> Decimal:
    """
    Convert a numeric input to a finite Decimal.

    Raises InvalidInputError for NaN, +/-Infinity, booleans and anything
    that does not parse as a number.
    """
    if isinstance(value, bool):
        raise InvalidInputError(name, value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInputError(name, value)
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidInputError(name, value) from None
    else:
        raise InvalidInputError(name, value)

    if not result.is_finite():
        raise InvalidInputError(name, value)
    return result


def _exact_precision(*values: Decimal) -> int:
    """
    Context precision under which arithmetic on values never rounds.

    Covers products and sums of the operands, division by 5 or 100, and
    quantizing any of the results to 3 decimal places.
    """
    width = sum(
        max(v.adjusted(), 0) - min(v.as_tuple().exponent, -3) + 1 for v in values
    )
    return max(getcontext().prec, width + 2)


def truncate_to_3_decimals(value: Number) -> Decimal:
    """
    Truncate to 3 decimal places: floor(x * 1000) / 1000.

    Rounds toward negative infinity, so -1.0005 becomes -1.001.
    Example: 10.96589 -> 10.965
    """
    x = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(x)
        return x.quantize(_THOUSANDTH, rounding=ROUND_FLOOR)


def round_to_nearest_5(value: Number) -> Decimal:
    """
    Round to the nearest multiple of 5, halves away from zero.

    Example: 10093 -> 10095, 10092 -> 10090, 10092.5 -> 10095
    """
    x = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(x)
        return (x / _FIVE).to_integral_value(rounding=ROUND_HALF_UP) * _FIVE


def calculate_pure_weight(gross_weight: Number, purity_percent: Number) -> Decimal:
    """
    Calculate pure metal weight from gross weight and percentage purity.

    Args:
        gross_weight: Gross weight in grams
        purity_percent: Fineness as a percentage (99.5 means 99.5%)

    Returns:
        Pure weight in grams, truncated to 3 decimals
    """
    gross = to_decimal(gross_weight, "gross_weight")
    purity = to_decimal(purity_percent, "purity")
    with localcontext() as ctx:
        ctx.prec = _exact_precision(gross, purity)
        return truncate_to_3_decimals(gross * purity / _HUNDRED)


def calculate_balance(amount: Number, paid_amount: Number) -> Decimal:
    """
    Outstanding balance: amount - paid_amount.

    Not rounded; rounding is applied for display only.
    """
    total = to_decimal(amount, "amount")
    paid = to_decimal(paid_amount, "paid_amount")
    with localcontext() as ctx:
        ctx.prec = _exact_precision(total, paid)
        return total - paid


def balance_status(balance: Number) -> BalanceStatus:
    """Classify a balance as due (>0), overpaid (<0) or settled (=0)."""
    b = to_decimal(balance, "balance")
    if b > 0:
        return BalanceStatus.DUE
    if b < 0:
        return BalanceStatus.OVERPAID
    return BalanceStatus.SETTLED


def suggest_amount(pure_weight: Number, rate: Number) -> Decimal:
    """Suggested amount for a weight at a rate per gram, rounded to the nearest 5."""
    weight = to_decimal(pure_weight, "pure_weight")
    per_gram = to_decimal(rate, "rate")
    with localcontext() as ctx:
        ctx.prec = _exact_precision(weight, per_gram)
        return round_to_nearest_5(weight * per_gram)
