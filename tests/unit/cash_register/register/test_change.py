from __future__ import annotations

from decimal import Decimal

import pytest

from cash_register.domain.denomination.denomination_table import DenominationTable, EUR_DENOMINATIONS, USD_DENOMINATIONS
from cash_register.domain.monetary.currency_registry import EUR, USD
from cash_register.domain.monetary.money import Money
from cash_register.exchange.currency_converter import CurrencyConverter
from cash_register.register.change import breakdown, compute_change

# Constants
CONVERTER = CurrencyConverter()


def test_compute_change():
    assert compute_change(Money("4.56", EUR), Money("23.00", USD), CONVERTER) == Money("17.17", EUR)
    assert compute_change(Money("456", EUR), Money("567.11", USD), CONVERTER) == Money("79.69", EUR)


def test_compute_change_uses_default_rate_without_converter():
    assert compute_change(Money("4.56", EUR), Money("23.00", USD)) == Money("17.17", EUR)


def test_compute_change_is_negative_when_underpaid():
    assert compute_change(Money("30.00", EUR), Money("20.00", USD), CONVERTER) == Money("-11.11", EUR)


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("90.00", (4, 1, 0, 0, 0, 0, 0, 0, 0)),
        ("2.32", (0, 0, 0, 2, 0, 1, 1, 0, 2)),
        ("193920.30", (9696, 0, 0, 0, 0, 1, 1, 0, 0)),
        ("0.01", (0, 0, 0, 0, 0, 0, 0, 0, 1)),
        ("0.00", (0, 0, 0, 0, 0, 0, 0, 0, 0)),
        ("38.88", (1, 1, 1, 3, 1, 1, 1, 1, 3)),
    ],
)
def test_breakdown_eur(amount, expected):
    assert breakdown(EUR_DENOMINATIONS, Money(amount, EUR)).counts() == expected


def test_breakdown_of_zero_has_no_items():
    itemized = breakdown(EUR_DENOMINATIONS, Money.zero(EUR))
    assert list(itemized.nonzero_items()) == []
    assert itemized.total() == Money.zero(EUR)


def test_breakdown_of_negative_amount_is_empty():
    assert breakdown(EUR_DENOMINATIONS, Money("-5.00", EUR)).counts() == (0,) * 9


def test_breakdown_usd():
    assert breakdown(USD_DENOMINATIONS, Money("41.41", USD)).counts() == (2, 0, 0, 1, 1, 1, 1, 1)


@pytest.mark.parametrize("table", [USD_DENOMINATIONS, EUR_DENOMINATIONS])
def test_breakdown_sums_back_to_amount(table):
    cents = list(range(0, 5001)) + [99999, 123456, 19392030]
    for cent in cents:
        amount = Money(Decimal(cent).scaleb(-2), table.currency)
        itemized = breakdown(table, amount)
        assert sum(d * count for d, count in itemized.items()) == amount.value


def test_breakdown_is_greedy_not_optimal():
    # 0.30 with {0.25, 0.10, 0.01}: greedy takes 0.25 first, 6 coins instead of 3
    table = DenominationTable(USD, ["0.25", "0.10", "0.01"])
    assert breakdown(table, Money("0.30", USD)).counts() == (1, 0, 5)


def test_breakdown_currency_must_match_table():
    with pytest.raises(ValueError):
        breakdown(EUR_DENOMINATIONS, Money("1.00", USD))
