from __future__ import annotations

import logging
from collections.abc import Iterable

from cash_register.domain.denomination.denomination_table import DenominationTable, USD_DENOMINATIONS
from cash_register.domain.denomination.itemized_amount import ItemizedAmount
from cash_register.domain.monetary.money import Money
from cash_register.utils.decimal_tools import DecimalLike

logger = logging.getLogger(__name__)


def sum_paid(itemized: ItemizedAmount) -> Money:
    """Return the total value of the bills and coins in $itemized."""
    return itemized.total()


class PaymentAccumulator:
    """Collects a payment over one or more rounds until it covers $amount_owed.

    Each round supplies one count per denomination of $table, largest first. A
    strictly positive count replaces whatever was stored for that denomination;
    a zero count leaves the stored count as it was. Re-entering 0 therefore never
    takes back bills handed over in an earlier round.

    Example:
        accumulator = PaymentAccumulator(Money("25.00", USD))
        accumulator.record_counts([1, 0, 1, 0, 0, 0, 0, 0])
        accumulator.outstanding     # Money(0.00, USD)
        accumulator.is_settled      # True
    """

    def __init__(self, amount_owed: Money, table: DenominationTable = USD_DENOMINATIONS) -> None:
        """Start an empty payment.

        Args:
            amount_owed: Amount the payment has to reach, in the currency of $table.
            table: Denominations the customer pays with.

        Raises:
            ValueError: If $amount_owed is not in the currency of $table.
        """
        # Raise: payment and amount owed must be comparable
        if amount_owed.currency != table.currency:
            raise ValueError(f"Cannot init `PaymentAccumulator` because $amount_owed ({amount_owed}) is not in {table.currency}")

        self._amount_owed = amount_owed
        self._itemized = ItemizedAmount(table)
        self._rounds = 0

    @property
    def amount_owed(self) -> Money:
        return self._amount_owed

    @property
    def itemized(self) -> ItemizedAmount:
        """Bills and coins received so far."""
        return self._itemized

    @property
    def rounds(self) -> int:
        """Number of rounds recorded so far."""
        return self._rounds

    @property
    def total_paid(self) -> Money:
        return sum_paid(self._itemized)

    @property
    def outstanding(self) -> Money:
        """Amount owed minus amount paid; negative once the customer has overpaid."""
        return self._amount_owed - self.total_paid

    @property
    def is_settled(self) -> bool:
        return self.total_paid >= self._amount_owed

    def record_count(self, denomination: DecimalLike, count: int) -> None:
        """Record $count bills or coins of $denomination, ignoring counts that are not positive."""
        if count > 0:
            self._itemized[denomination] = count

    def record_counts(self, counts: Iterable[int]) -> tuple[int, ...]:
        """Record one full round of counts, given in table order.

        Args:
            counts: One count per denomination, largest denomination first.

        Returns:
            Stored counts for every denomination after this round, in table order.

        Raises:
            ValueError: If $counts does not hold exactly one count per denomination.
        """
        counts = tuple(counts)
        table = self._itemized.table

        # Raise: a round always covers every denomination of the table
        if len(counts) != len(table):
            raise ValueError(f"Cannot call `record_counts` because $counts has {len(counts)} entries but the table has {len(table)} denominations")

        for denomination, count in zip(table, counts):
            self.record_count(denomination, count)

        self._rounds += 1
        logger.debug(f"Payment round {self._rounds} recorded {counts}; paid {self.total_paid} of {self._amount_owed}")
        return self._itemized.counts()
