from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from decimal import Decimal, InvalidOperation

from cash_register.domain.monetary.currency import Currency
from cash_register.domain.monetary.currency_registry import EUR, USD
from cash_register.utils.decimal_tools import DecimalLike, as_decimal


class DenominationTable(Sequence[Decimal]):
    """Ordered, read-only list of bill and coin values available in one currency.

    Denominations are kept strictly descending, so iteration always starts with
    the largest bill. Each value must be positive and representable in the
    precision of $currency (no value smaller than the minor unit).

    Examples:
        >>> table = DenominationTable(USD, ["20.00", "1.00", "0.25"])
        >>> table[0]
        Decimal('20.00')
        >>> Decimal("1.00") in table
        True
    """

    __slots__ = ("_currency", "_denominations")

    def __init__(self, currency: Currency, denominations: Iterable[DecimalLike]) -> None:
        """Create a table of $denominations in $currency.

        Args:
            currency: Currency all denominations belong to.
            denominations: Values in strictly descending order.

        Raises:
            TypeError: If $currency is not a Currency instance.
            ValueError: If the table is empty, a value is not positive, does not fit
                the currency precision, or the values are not strictly descending.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        try:
            values = tuple(as_decimal(d) for d in denominations)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `DenominationTable` because $denominations ({denominations}) cannot be converted to Decimal") from e

        # Raise: a table without denominations cannot express any amount
        if not values:
            raise ValueError(f"Cannot init `DenominationTable` because $denominations for {currency} is empty")

        minor_unit = Decimal(1).scaleb(-currency.precision)
        for value in values:
            # Raise: every bill and coin has a positive face value
            if value <= 0:
                raise ValueError(f"Cannot init `DenominationTable` because denomination ({value}) is not positive")
            # Raise: face value must be a whole number of minor units
            if value % minor_unit != 0:
                raise ValueError(f"Cannot init `DenominationTable` because denomination ({value}) is finer than the {currency} precision ({currency.precision})")

        for larger, smaller in zip(values, values[1:]):
            # Raise: order must be strictly descending (this also rules out duplicates)
            if larger <= smaller:
                raise ValueError(f"Cannot init `DenominationTable` because denominations are not strictly descending: {larger} is followed by {smaller}")

        self._currency = currency
        self._denominations = values

    @property
    def currency(self) -> Currency:
        """Get the currency of this table."""
        return self._currency

    @property
    def smallest(self) -> Decimal:
        """Smallest denomination, the last one visited by a greedy breakdown."""
        return self._denominations[-1]

    def __getitem__(self, index):
        return self._denominations[index]

    def __len__(self) -> int:
        return len(self._denominations)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self._denominations)

    def __contains__(self, value) -> bool:
        try:
            return as_decimal(value) in self._denominations
        except (ValueError, TypeError, InvalidOperation):
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenominationTable):
            return False
        return self._currency == other._currency and self._denominations == other._denominations

    def __hash__(self) -> int:
        return hash((self._currency, self._denominations))

    def __repr__(self) -> str:
        values = ", ".join(str(d) for d in self._denominations)
        return f"{self.__class__.__name__}({self._currency.code}: {values})"


# Bills and coins accepted as payment
USD_DENOMINATIONS = DenominationTable(USD, ["20.00", "10.00", "5.00", "1.00", "0.25", "0.10", "0.05", "0.01"])

# Bills and coins handed out as change
EUR_DENOMINATIONS = DenominationTable(EUR, ["20.00", "10.00", "5.00", "1.00", "0.50", "0.20", "0.10", "0.05", "0.01"])
