"""
Currency and Money Module

Defines the two supported currencies and the immutable Money value type.
Amounts are always Decimal at a fixed scale of two fractional digits,
rounded half-up. NEVER uses float for monetary values.
"""

from decimal import Decimal, ROUND_HALF_UP, getcontext
from dataclasses import dataclass
from enum import Enum

from .exceptions import CurrencyMismatchError

# Set global decimal context for financial precision
getcontext().prec = 28


class Currency(Enum):
    """Supported currencies with precision info"""
    USD = ("USD", 2)  # US Dollar
    CLP = ("CLP", 2)  # Chilean Peso, kept at 2 places as a domain simplification

    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation tagged with its currency.
    Arithmetic is only allowed between values of the same currency.
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        rounded = self.amount.quantize(
            Decimal('0.1') ** self.currency.precision,
            rounding=ROUND_HALF_UP
        )
        object.__setattr__(self, 'amount', rounded)

    @classmethod
    def zero(cls, currency: Currency) -> 'Money':
        return cls(Decimal('0'), currency)

    def _require_same_currency(self, other: 'Money', verb: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot {verb} {self.currency.code} and {other.currency.code}"
            )

    def add(self, other: 'Money') -> 'Money':
        self._require_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        self._require_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: Decimal) -> 'Money':
        if not isinstance(factor, Decimal):
            factor = Decimal(str(factor))
        return Money(self.amount * factor, self.currency)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    def __neg__(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: 'Money') -> bool:
        self._require_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._require_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._require_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._require_same_currency(other, "compare")
        return self.amount >= other.amount

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.amount == Decimal('0')

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.amount < Decimal('0')

    def to_string(self) -> str:
        """Format for display with thousands separators"""
        return f"{self.currency.code} {self.amount:,.{self.currency.precision}f}"

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"
