from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from cash_register.domain.denomination.denomination_table import DenominationTable, EUR_DENOMINATIONS, USD_DENOMINATIONS
from cash_register.domain.denomination.itemized_amount import ItemizedAmount
from cash_register.domain.monetary.money import Money
from cash_register.exchange.currency_converter import CurrencyConverter
from cash_register.register.change import breakdown, compute_change
from cash_register.register.payment import PaymentAccumulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    """Outcome of one sale: what was owed, what was paid, and the change handed back."""

    price: Money
    amount_owed: Money
    payment: ItemizedAmount
    total_paid: Money
    change: Money
    change_breakdown: ItemizedAmount


# region Console texts


def payment_prompt(denomination: Decimal, table: DenominationTable) -> str:
    """Prompt asking for the number of bills or coins of $denomination."""
    if denomination >= 1:
        return f"Enter the number of {table.currency.symbol}{denomination:.0f} bills given: "
    return f"Enter the number of ¢{denomination * 100:.0f} coins given: "


def change_line(denomination: Decimal, count: int, table: DenominationTable) -> str:
    """Line telling how many bills or coins of $denomination are handed back."""
    if denomination >= 1:
        return f"{denomination:.0f}{table.currency.symbol} bills: {count}"
    return f"{denomination * 100:.0f} {table.currency.name} coins: {count}"


# endregion


class CashRegister:
    """Runs a sale on a text console: price in secondary currency, payment in primary currency.

    The register asks for the price, then repeats full rounds of payment prompts
    (one per payment denomination, largest first) until the payment covers the
    converted price. It then prints the total paid, the change, and the change
    split into bills and coins.

    Console access goes through $read_line and $write, which fall back to `input` and
    `print`. Input is read as whitespace-separated values, so a whole round may be
    typed on one line. Input is not validated: text that does not parse as a number
    raises and ends the sale.

    Example:
        register = CashRegister(read_line=scripted_input, write=lines.append)
        transaction = register.run()
    """

    def __init__(
        self,
        converter: CurrencyConverter | None = None,
        payment_table: DenominationTable = USD_DENOMINATIONS,
        change_table: DenominationTable = EUR_DENOMINATIONS,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        """Create a register.

        Args:
            converter: Converter from payment currency to price currency. A converter at
                the default exchange rate is used when None.
            payment_table: Denominations customers pay with (primary currency).
            change_table: Denominations change is given in (secondary currency).
            read_line: Shows a prompt and returns the line typed in (`input` when None).
            write: Prints one line of output (`print` when None).

        Raises:
            ValueError: If the tables do not match the currencies of $converter.
        """
        # Configuration
        self._converter = converter if converter is not None else CurrencyConverter()
        self._payment_table = payment_table
        self._change_table = change_table
        self._read_line = read_line if read_line is not None else input
        self._write = write if write is not None else print

        # Internal state: tokens typed ahead on an earlier line
        self._pending_tokens: deque[str] = deque()

        # Raise: payment must be taken in the currency the converter converts from
        if payment_table.currency != self._converter.primary:
            raise ValueError(f"Cannot init `CashRegister` because $payment_table currency ({payment_table.currency}) differs from the converter primary currency ({self._converter.primary})")

        # Raise: change must be given in the currency the item is priced in
        if change_table.currency != self._converter.secondary:
            raise ValueError(f"Cannot init `CashRegister` because $change_table currency ({change_table.currency}) differs from the converter secondary currency ({self._converter.secondary})")

    @property
    def converter(self) -> CurrencyConverter:
        return self._converter

    def _read_token(self, prompt: str) -> str:
        """Return the next whitespace-separated token typed in.

        Several values may be typed on one line; the ones not consumed yet answer the
        following prompts, which are then not shown. Blank lines are skipped.
        """
        while not self._pending_tokens:
            self._pending_tokens.extend(self._read_line(prompt).split())
        return self._pending_tokens.popleft()

    def read_price(self) -> Money:
        """Ask for the item price in the secondary currency."""
        currency = self._converter.secondary
        token = self._read_token(f"Price of item in {currency.name}s: ")
        return Money(Decimal(token), currency)

    def read_payment_round(self, accumulator: PaymentAccumulator) -> tuple[int, ...]:
        """Ask once for every payment denomination and record the answers in $accumulator.

        Returns:
            Stored counts per denomination after this round, largest first.
        """
        counts = []
        for denomination in self._payment_table:
            token = self._read_token(payment_prompt(denomination, self._payment_table))
            counts.append(int(token))
        return accumulator.record_counts(counts)

    def collect_payment(self, amount_owed: Money) -> PaymentAccumulator:
        """Repeat payment rounds until $amount_owed is covered, showing the balance before each round."""
        accumulator = PaymentAccumulator(amount_owed, self._payment_table)
        symbol = self._payment_table.currency.symbol
        while True:
            self._write(f"\nYour balance is {symbol}{accumulator.outstanding.value}.")
            self.read_payment_round(accumulator)
            if accumulator.is_settled:
                return accumulator

    def hand_out_change(self, change: Money) -> ItemizedAmount:
        """Split $change into bills and coins and print one line per denomination handed back."""
        change_breakdown = breakdown(self._change_table, change)
        for denomination, count in change_breakdown.nonzero_items():
            self._write(change_line(denomination, count, self._change_table))
        return change_breakdown

    def run(self) -> Transaction:
        """Run one sale from price prompt to itemized change."""
        price = self.read_price()
        amount_owed = self._converter.to_primary(price)
        logger.debug(f"Sale started: $price {price}, $amount_owed {amount_owed}")

        accumulator = self.collect_payment(amount_owed)
        total_paid = accumulator.total_paid
        self._write(f"\nYou paid a total of {total_paid.currency.symbol}{total_paid.value}.")

        change = compute_change(price, total_paid, self._converter)
        self._write(f"\nYour total change in {change.currency.name}s is {change.currency.symbol} {change.value}:")
        change_breakdown = self.hand_out_change(change)

        logger.info(f"Sale completed: $price {price}, $total_paid {total_paid} in {accumulator.rounds} round(s), $change {change}")
        return Transaction(
            price=price,
            amount_owed=amount_owed,
            payment=accumulator.itemized,
            total_paid=total_paid,
            change=change,
            change_breakdown=change_breakdown,
        )
