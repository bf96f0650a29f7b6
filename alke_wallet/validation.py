"""
Input validation for front ends

The wallet core accepts any Decimal; front ends use these helpers to
reject malformed, non-positive or oversized amounts and unknown currency
codes before calling the service.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from .currency import Currency
from .exceptions import InvalidInputError

# Largest single amount accepted from user input
MAX_AMOUNT = Decimal("1000000000000")


def require_positive(amount: Decimal) -> Decimal:
    if not amount > Decimal("0"):
        raise InvalidInputError(f"Amount must be positive, got {amount}")
    return amount


def parse_amount(value: Union[str, Decimal]) -> Decimal:
    """
    Parse user text into a positive Decimal amount

    The whole text must be a decimal literal: thousands separators,
    currency symbols and trailing words are rejected, not stripped.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal((value or "").strip())
        except (InvalidOperation, AttributeError):
            raise InvalidInputError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise InvalidInputError(f"Invalid amount: {value!r}")
    require_positive(amount)
    if amount > MAX_AMOUNT:
        raise InvalidInputError(f"Amount exceeds maximum of {MAX_AMOUNT}")
    return amount


def parse_currency(value: str) -> Currency:
    """Parse a currency code, case-insensitive"""
    code = (value or "").strip().upper()
    try:
        return Currency[code]
    except KeyError:
        supported = "/".join(c.code for c in Currency)
        raise InvalidInputError(f"Unsupported currency {value!r}, expected {supported}")
