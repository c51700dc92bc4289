from __future__ import annotations

from collections.abc import Iterator, Mapping
from decimal import Decimal, InvalidOperation

from cash_register.domain.denomination.denomination_table import DenominationTable
from cash_register.domain.monetary.money import Money
from cash_register.utils.decimal_tools import DecimalLike, as_decimal


class ItemizedAmount:
    """Count of bills and coins per denomination of one DenominationTable.

    Keys are exactly the denominations of $table; every count starts at 0 unless
    given in $counts. Iteration follows the table, so it is always descending by
    denomination value.

    Example:
        itemized = ItemizedAmount(USD_DENOMINATIONS, {Decimal("0.05"): 1463})
        itemized[Decimal("0.05")]   # 1463
        itemized.total()            # Money(73.15, USD)
    """

    __slots__ = ("_table", "_counts")

    def __init__(self, table: DenominationTable, counts: Mapping[DecimalLike, int] | None = None) -> None:
        """Create an itemized amount over $table.

        Args:
            table: Denominations this amount is itemized by.
            counts: Optional initial counts; denominations left out start at 0.

        Raises:
            TypeError: If $table is not a DenominationTable.
            ValueError: If $counts names a denomination outside $table or holds a negative count.
        """
        # Raise: table must be an instance of DenominationTable
        if not isinstance(table, DenominationTable):
            raise TypeError(f"$table must be a DenominationTable instance, but provided value is: {table}")

        self._table = table
        self._counts: list[int] = [0] * len(table)

        for denomination, count in (counts or {}).items():
            self[denomination] = count

    # region Access

    @property
    def table(self) -> DenominationTable:
        """Get the denomination table."""
        return self._table

    def _index_of(self, denomination: DecimalLike) -> int:
        try:
            return self._table.index(as_decimal(denomination))
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Denomination ({denomination}) is not part of {self._table!r}") from e

    def __getitem__(self, denomination: DecimalLike) -> int:
        return self._counts[self._index_of(denomination)]

    def __setitem__(self, denomination: DecimalLike, count: int) -> None:
        # Raise: counts are numbers of physical bills or coins
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise ValueError(f"$count for denomination ({denomination}) must be a non-negative integer, but provided value is: {count}")
        self._counts[self._index_of(denomination)] = count

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self) -> Iterator[tuple[Decimal, int]]:
        """Yield (denomination, count) pairs, largest denomination first."""
        return zip(self._table, self._counts)

    def nonzero_items(self) -> Iterator[tuple[Decimal, int]]:
        """Yield (denomination, count) pairs with count > 0, largest denomination first."""
        return ((denomination, count) for denomination, count in self.items() if count > 0)

    def counts(self) -> tuple[int, ...]:
        """Return all counts in table order."""
        return tuple(self._counts)

    # endregion

    # region Value

    def total(self) -> Money:
        """Return the exact value of all bills and coins.

        Denominations have no more fractional digits than the currency precision,
        so the sum never needs rounding.
        """
        total = sum((denomination * count for denomination, count in self.items()), Decimal("0"))
        return Money(total, self._table.currency)

    # endregion

    def __eq__(self, other) -> bool:
        if not isinstance(other, ItemizedAmount):
            return False
        return self._table == other._table and self._counts == other._counts

    def __repr__(self) -> str:
        parts = ", ".join(f"{denomination}: {count}" for denomination, count in self.items())
        return f"{self.__class__.__name__}({self._table.currency.code}; {parts})"
