from __future__ import annotations

from decimal import Decimal, getcontext, InvalidOperation

from cash_register.domain.monetary.currency import Currency
from cash_register.utils.decimal_tools import DecimalLike, as_decimal, round_half_up

# Set high precision for intermediate results before they get rounded to the currency precision
getcontext().prec = 28


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for precision arithmetic. Every value, including every
    result of arithmetic, is rounded half-up to $currency.precision fractional digits.
    Supports values between -999_999_999_999_999.99 and +999_999_999_999_999.99
    """

    # Value limits
    MAX_VALUE = Decimal("999_999_999_999_999.99")
    MIN_VALUE = Decimal("-999_999_999_999_999.99")

    def __init__(self, value: DecimalLike, currency: Currency):
        """Initialize Money with value and currency.

        Args:
            value: Numeric value (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If value is invalid or out of range.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) cannot be converted to Decimal") from e

        # Raise: value must be within allowed range
        if decimal_value > self.MAX_VALUE:
            raise ValueError(f"$value exceeds maximum allowed value {self.MAX_VALUE}, but provided value is: {decimal_value}")
        if decimal_value < self.MIN_VALUE:
            raise ValueError(f"$value is below minimum allowed value {self.MIN_VALUE}, but provided value is: {decimal_value}")

        # Round to currency precision
        self._value = round_half_up(decimal_value, currency.precision)
        self._currency = currency

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Return a zero amount in $currency."""
        return cls(Decimal("0"), currency)

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Args:
            other (Money): The other Money object.

        Raises:
            ValueError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise ValueError(f"Cannot operate on different currencies: {self.currency} and {other.currency}")

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.value == other.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.value < other.value

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.value <= other.value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.value > other.value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.value >= other.value

    # Arithmetic operations
    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.value + other.value, self.currency)

    def __sub__(self, other):
        """Subtract two Money objects (same currency); the result may be negative."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.value - other.value, self.currency)

    # String representations
    def __str__(self) -> str:
        """Return string like '42.51 EUR'."""
        return f"{self.value} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(42.51, EUR)'."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"
