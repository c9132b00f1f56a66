"""Monetary amount normalisation.

All balances and amounts are ``Decimal`` values with two fractional digits.
Floats are converted through ``str`` so ``30.0`` becomes ``Decimal("30.00")``
rather than its binary approximation.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any

from .errors import InvalidAmountError

CENT = Decimal("0.01")
# Largest balance or amount that survives the NUMERIC(18, 2) column exactly,
# including SQLite, which stores it as a double.
MAX_AMOUNT = Decimal("9999999999999.99")


def as_money(value: Any) -> Decimal:
    """Normalise ``value`` to a finite ``Decimal`` with 2 fractional digits."""
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount must not exceed {MAX_AMOUNT}")
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Invalid amount: {value!r}") from exc


def positive_amount(value: Any) -> Decimal:
    amount = as_money(value)
    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than zero")
    return amount


def non_negative_amount(value: Any) -> Decimal:
    amount = as_money(value)
    if amount < 0:
        raise InvalidAmountError("Amount must not be negative")
    return amount
