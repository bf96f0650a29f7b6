"""
Tests for front-end input validation
"""

import pytest
from decimal import Decimal

from alke_wallet.currency import Currency
from alke_wallet.exceptions import ErrorKind, InvalidInputError
from alke_wallet.validation import MAX_AMOUNT, parse_amount, parse_currency, require_positive


class TestParseAmount:

    def test_valid_amounts(self):
        assert parse_amount("100") == Decimal("100")
        assert parse_amount("0.01") == Decimal("0.01")
        assert parse_amount(" 1500.25 ") == Decimal("1500.25")
        assert parse_amount("1e3") == Decimal("1000")
        assert parse_amount(Decimal("7.5")) == Decimal("7.5")

    @pytest.mark.parametrize("text", ["0", "0.00", "-5", "-0.01"])
    def test_non_positive_rejected(self, text):
        with pytest.raises(InvalidInputError, match="must be positive"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", None])
    def test_malformed_rejected(self, text):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_amount(text)
        assert exc_info.value.kind == ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize("text", ["12abc", "5 USD 7", "1,000", "$10", "123,45"])
    def test_text_around_number_is_not_stripped(self, text):
        """Separators, symbols and trailing words make the amount invalid"""
        with pytest.raises(InvalidInputError, match="Invalid amount"):
            parse_amount(text)

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf"])
    def test_non_finite_text_rejected(self, text):
        with pytest.raises(InvalidInputError):
            parse_amount(text)

    def test_amount_above_maximum_rejected(self):
        assert parse_amount(str(MAX_AMOUNT)) == MAX_AMOUNT
        with pytest.raises(InvalidInputError, match="exceeds maximum"):
            parse_amount("1" + "0" * 30)
        with pytest.raises(InvalidInputError, match="exceeds maximum"):
            parse_amount(Decimal("1e40"))

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_amount(Decimal("Infinity"))

    def test_require_positive(self):
        assert require_positive(Decimal("0.01")) == Decimal("0.01")
        with pytest.raises(InvalidInputError):
            require_positive(Decimal("0"))


class TestParseCurrency:

    @pytest.mark.parametrize("text,expected", [
        ("USD", Currency.USD),
        ("usd", Currency.USD),
        (" Clp ", Currency.CLP),
    ])
    def test_supported_codes(self, text, expected):
        assert parse_currency(text) is expected

    @pytest.mark.parametrize("text", ["EUR", "", "dollars", None])
    def test_unsupported_codes(self, text):
        with pytest.raises(InvalidInputError, match="expected USD/CLP"):
            parse_currency(text)
