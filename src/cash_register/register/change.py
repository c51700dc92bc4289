from __future__ import annotations

import logging

from cash_register.domain.denomination.denomination_table import DenominationTable
from cash_register.domain.denomination.itemized_amount import ItemizedAmount
from cash_register.domain.monetary.money import Money
from cash_register.exchange.currency_converter import CurrencyConverter

logger = logging.getLogger(__name__)


def compute_change(original_price: Money, total_paid: Money, converter: CurrencyConverter | None = None) -> Money:
    """Return the change owed in the price currency.

    $total_paid is converted into the secondary currency first and $original_price
    is subtracted from it. The result is negative when the payment does not cover
    the price.

    Args:
        original_price: Price of the item in the secondary currency.
        total_paid: Everything the customer paid, in the primary currency.
        converter: Converter between the two currencies; one at the default exchange rate when None.

    Returns:
        Change in the secondary currency.
    """
    if converter is None:
        converter = CurrencyConverter()
    return converter.to_secondary(total_paid) - original_price


def breakdown(table: DenominationTable, amount: Money) -> ItemizedAmount:
    """Split $amount into bills and coins of $table, largest denomination first.

    For every denomination the count is the whole number of times it fits into what
    is left (rounded down); that much is then taken off before moving on to the next
    smaller denomination. Denominations that do not fit keep a count of 0.

    Every table whose smallest denomination is the currency minor unit splits any
    non-negative $amount exactly, with nothing left over.

    Args:
        table: Denominations available for change.
        amount: Amount to split, in the currency of $table.

    Returns:
        Counts per denomination of $table.

    Raises:
        ValueError: If $amount is not in the currency of $table.

    Examples:
        >>> breakdown(EUR_DENOMINATIONS, Money("2.32", EUR)).counts()
        (0, 0, 0, 2, 0, 1, 1, 0, 2)
    """
    # Raise: denominations of one currency cannot pay out another
    if amount.currency != table.currency:
        raise ValueError(f"Cannot call `breakdown` because $amount ({amount}) is not in {table.currency}")

    itemized = ItemizedAmount(table)
    remaining = amount.value
    for denomination in table:
        # Decimal `//` truncates toward zero
        count = int(remaining // denomination)
        if count > 0:
            itemized[denomination] = count
            remaining -= denomination * count
            logger.debug(f"Breakdown of {amount}: {count} x {denomination}, remaining {remaining}")

    return itemized
