"""
Test suite for currency module

Tests Money construction, fixed-scale rounding and same-currency arithmetic.
"""

import pytest
from decimal import Decimal

from alke_wallet.currency import Money, Currency
from alke_wallet.exceptions import CurrencyMismatchError, ErrorKind


class TestCurrency:
    """Test the closed currency set"""

    def test_supported_currencies(self):
        assert [c.code for c in Currency] == ["USD", "CLP"]
        assert Currency.USD.precision == 2
        assert Currency.CLP.precision == 2

    def test_lookup_by_code(self):
        assert Currency["CLP"] is Currency.CLP


class TestMoney:
    """Test Money class operations"""

    def test_money_creation(self):
        """Test Money object creation and quantization"""
        money = Money(Decimal('100.50'), Currency.USD)
        assert money.amount == Decimal('100.50')
        assert money.currency == Currency.USD

        whole = Money(Decimal('100'), Currency.CLP)
        assert str(whole.amount) == '100.00'

    def test_always_two_fractional_digits(self):
        """Amounts are stored at exactly two fractional digits"""
        for raw in ['1', '1.5', '1.23', '1.2345', '0.000001', '-7.1']:
            money = Money(Decimal(raw), Currency.USD)
            assert money.amount.as_tuple().exponent == -2

    def test_rounding_half_up(self):
        """Test that ROUND_HALF_UP is used"""
        assert Money(Decimal('10.004'), Currency.USD).amount == Decimal('10.00')
        assert Money(Decimal('10.005'), Currency.USD).amount == Decimal('10.01')
        assert Money(Decimal('-10.005'), Currency.USD).amount == Decimal('-10.01')

    def test_non_decimal_input_is_coerced(self):
        """Ints and strings are converted through str, never float math"""
        assert Money(5, Currency.CLP).amount == Decimal('5.00')
        assert Money('12.345', Currency.USD).amount == Decimal('12.35')
        assert isinstance(Money(5, Currency.CLP).amount, Decimal)

    def test_money_arithmetic(self):
        """Test Money arithmetic operations"""
        money1 = Money(Decimal('100.50'), Currency.USD)
        money2 = Money(Decimal('50.25'), Currency.USD)

        result = money1 + money2
        assert result.amount == Decimal('150.75')
        assert result.currency == Currency.USD

        result = money1 - money2
        assert result.amount == Decimal('50.25')
        assert result.currency == Currency.USD

        assert money1.add(money2) == money1 + money2
        assert money1.subtract(money2) == money1 - money2

    def test_arithmetic_returns_new_values(self):
        """Money is never mutated in place"""
        money1 = Money(Decimal('10.00'), Currency.CLP)
        money2 = Money(Decimal('5.00'), Currency.CLP)

        total = money1 + money2

        assert total is not money1
        assert money1.amount == Decimal('10.00')
        assert money2.amount == Decimal('5.00')

    def test_multiply(self):
        """Multiplication quantizes the product half-up"""
        money = Money(Decimal('35000.00'), Currency.CLP)
        result = money * Decimal('0.0011111111')
        assert result.amount == Decimal('38.89')
        assert result.currency == Currency.CLP

    def test_money_currency_mismatch(self):
        """Test that operations with different currencies raise errors"""
        usd_money = Money(Decimal('100.00'), Currency.USD)
        clp_money = Money(Decimal('100.00'), Currency.CLP)

        with pytest.raises(CurrencyMismatchError, match="Cannot add USD and CLP"):
            usd_money + clp_money

        with pytest.raises(CurrencyMismatchError, match="Cannot subtract USD and CLP"):
            usd_money.subtract(clp_money)

        with pytest.raises(CurrencyMismatchError, match="Cannot compare USD and CLP"):
            usd_money < clp_money

    def test_mismatch_error_kind(self):
        """Mismatch errors carry their kind and are ValueErrors"""
        with pytest.raises(ValueError) as exc_info:
            Money(Decimal('1'), Currency.USD) + Money(Decimal('1'), Currency.CLP)
        assert exc_info.value.kind == ErrorKind.CURRENCY_MISMATCH

    def test_money_equality(self):
        """Equality is by amount and currency"""
        assert Money(Decimal('1.0'), Currency.USD) == Money(Decimal('1.00'), Currency.USD)
        assert Money(Decimal('1'), Currency.USD) != Money(Decimal('1'), Currency.CLP)
        assert Money(Decimal('1'), Currency.USD) != Decimal('1')
        assert len({Money(Decimal('1.0'), Currency.USD), Money(Decimal('1'), Currency.USD)}) == 1

    def test_money_comparison(self):
        money1 = Money(Decimal('100.00'), Currency.USD)
        money2 = Money(Decimal('50.00'), Currency.USD)

        assert money1 > money2
        assert money2 < money1
        assert money1 >= Money(Decimal('100'), Currency.USD)
        assert money2 <= money1

    def test_money_state_checks(self):
        """Test Money state checking methods"""
        zero_money = Money.zero(Currency.CLP)
        positive_money = Money(Decimal('100.50'), Currency.CLP)
        negative_money = Money(Decimal('-50.25'), Currency.CLP)

        assert zero_money.is_zero()
        assert not positive_money.is_zero()

        assert positive_money.is_positive()
        assert not zero_money.is_positive()

        assert negative_money.is_negative()
        assert not zero_money.is_negative()
        assert (-positive_money).amount == Decimal('-100.50')

    def test_money_string_formatting(self):
        """Test Money string representation"""
        money = Money(Decimal('45000'), Currency.CLP)
        assert str(money) == "45000.00 CLP"
        assert money.to_string() == "CLP 45,000.00"

        assert Money(Decimal('1234567.891'), Currency.USD).to_string() == "USD 1,234,567.89"

    def test_money_is_frozen(self):
        money = Money(Decimal('1.00'), Currency.USD)
        with pytest.raises(AttributeError):
            money.amount = Decimal('2.00')
