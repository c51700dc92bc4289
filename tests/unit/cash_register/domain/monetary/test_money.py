from __future__ import annotations

from decimal import Decimal

import pytest

from cash_register.domain.monetary.currency import Currency
from cash_register.domain.monetary.currency_registry import EUR, USD
from cash_register.domain.monetary.money import Money

def test_value_is_rounded_half_up_to_currency_precision():
    assert Money("42.507", EUR).value == Decimal("42.51")
    assert Money("0.005", USD).value == Decimal("0.01")
    assert Money("0.004", USD).value == Decimal("0.00")
    assert str(Money(30, EUR).value) == "30.00"

def test_arithmetic_keeps_currency_and_precision():
    assert Money("23.00", USD) - Money("4.56", USD) == Money("18.44", USD)
    assert Money("1.00", EUR) + Money("0.50", EUR) == Money("1.50", EUR)

def test_arithmetic_with_plain_numbers_is_not_supported():
    with pytest.raises(TypeError):
        Money("1.00", USD) - Decimal("0.50")
    with pytest.raises(TypeError):
        Money("1.00", USD) + 1

def test_subtraction_may_go_negative():
    assert (Money("20.00", USD) - Money("31.76", USD)).value == Decimal("-11.76")

def test_mixed_currencies_raise():
    with pytest.raises(ValueError):
        Money("1.00", USD) + Money("1.00", EUR)
    with pytest.raises(ValueError):
        Money("1.00", USD) >= Money("1.00", EUR)
    assert Money("1.00", USD) != Money("1.00", EUR)

def test_comparisons():
    assert Money("31.76", USD) <= Money("32.00", USD)
    assert Money("32.00", USD) >= Money("32.00", USD)
    assert Money("0.01", USD) > Money.zero(USD)

def test_invalid_inputs():
    with pytest.raises(ValueError):
        Money("abc", USD)
    with pytest.raises(TypeError):
        Money("1.00", "USD")
    with pytest.raises(ValueError):
        Money("1e30", USD)

def test_str_and_repr_name_the_currency():
    money = Money("42.51", EUR)
    assert str(money) == "42.51 EUR"
    assert repr(money) == "Money(42.51, EUR)"

def test_currency_equality_and_validation():
    assert Currency("usd", 2, "US Dollar", "$") == USD
    assert EUR.symbol == "€"
    assert USD != EUR
    with pytest.raises(ValueError):
        Currency("", 2, "Nothing", "?")
    with pytest.raises(ValueError):
        Currency("XXX", 19, "Too precise", "?")
    with pytest.raises(ValueError):
        Currency("XXX", 2, "No symbol", " ")
