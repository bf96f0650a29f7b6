"""
Exchange Rate Module

Exchange rate providers map an ordered currency pair to a conversion
factor. convert() is the one place where a Money value changes currency;
deposits and whole-balance conversions both go through it.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from .currency import Money, Currency
from .exceptions import UnsupportedCurrencyPairError

# Fractional digits kept on derived (inverse) rates before any rounding
RATE_PRECISION = 10

DEFAULT_USD_TO_CLP = Decimal("900")


class ExchangeRateProvider(ABC):
    """Abstract source of exchange rates"""

    @abstractmethod
    def rate(self, from_currency: Currency, to_currency: Currency) -> Decimal:
        """
        Get the factor that converts an amount in from_currency to to_currency

        Raises:
            UnsupportedCurrencyPairError: If the pair is not supported
        """
        pass


class FixedExchangeRateProvider(ExchangeRateProvider):
    """Fixed USD/CLP rates; CLP->USD is the inverse of the USD->CLP factor"""

    def __init__(self, usd_to_clp: Union[Decimal, str] = DEFAULT_USD_TO_CLP):
        if not isinstance(usd_to_clp, Decimal):
            usd_to_clp = Decimal(str(usd_to_clp))
        if usd_to_clp <= Decimal("0"):
            raise ValueError(f"Exchange rate must be positive, got {usd_to_clp}")

        self.usd_to_clp = usd_to_clp
        self.clp_to_usd = (Decimal("1") / usd_to_clp).quantize(
            Decimal("0.1") ** RATE_PRECISION,
            rounding=ROUND_HALF_UP
        )
        self._rates = {
            (Currency.USD, Currency.CLP): self.usd_to_clp,
            (Currency.CLP, Currency.USD): self.clp_to_usd,
        }

    def rate(self, from_currency: Currency, to_currency: Currency) -> Decimal:
        if from_currency == to_currency:
            return Decimal("1")

        factor = self._rates.get((from_currency, to_currency))
        if factor is None:
            raise UnsupportedCurrencyPairError(
                f"Unsupported currency pair {from_currency.code} -> {to_currency.code}"
            )
        return factor


def convert(money: Money, to_currency: Currency, rates: ExchangeRateProvider) -> Money:
    """
    Convert money into another currency

    The product of amount and rate is rounded half-up to the target
    currency's precision by Money itself.

    Args:
        money: Money to convert
        to_currency: Target currency
        rates: Source of the conversion factor

    Returns:
        Converted Money object
    """
    factor = rates.rate(money.currency, to_currency)
    return Money(money.amount * factor, to_currency)
