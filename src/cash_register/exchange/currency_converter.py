from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from cash_register.domain.monetary.currency import Currency
from cash_register.domain.monetary.currency_registry import EUR, USD
from cash_register.domain.monetary.money import Money
from cash_register.utils.decimal_tools import DecimalLike, as_decimal, round_half_up

logger = logging.getLogger(__name__)

# USD -> EUR rate as of 2023-09-29
DEFAULT_EXCHANGE_RATE = Decimal("0.9446")

# Fractional digits kept for the inverse rate before the final rounding
INVERSE_RATE_PLACES = 10


class CurrencyConverter:
    """Converts amounts between a primary and a secondary currency at a fixed rate.

    One unit of $primary is worth $rate units of $secondary. The rate never changes
    for the lifetime of the converter.

    Both directions round the result half-up to the target currency precision. The
    inverse rate used by `to_primary` is computed to 10 fractional digits first and is
    rounded only once more at the end, so the rate itself is never rounded before dividing.

    Example:
        converter = CurrencyConverter()
        converter.to_secondary(Money("45.00", USD))   # Money(42.51, EUR)
        converter.to_primary(Money("30.00", EUR))     # Money(31.76, USD)
    """

    __slots__ = ("_rate", "_inverse_rate", "_primary", "_secondary")

    def __init__(self, rate: DecimalLike = DEFAULT_EXCHANGE_RATE, primary: Currency = USD, secondary: Currency = EUR) -> None:
        """Create a converter.

        Args:
            rate: Units of $secondary per one unit of $primary.
            primary: Currency paid in (source of `to_secondary`).
            secondary: Currency priced in (target of `to_secondary`).

        Raises:
            ValueError: If $rate is not a positive number or both currencies are the same.
        """
        try:
            rate_decimal = as_decimal(rate)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `CurrencyConverter` because $rate ({rate}) cannot be converted to Decimal") from e

        # Raise: a zero or negative rate cannot be inverted into a meaningful price
        if not rate_decimal.is_finite() or rate_decimal <= 0:
            raise ValueError(f"Cannot init `CurrencyConverter` because $rate ({rate_decimal}) is not positive")

        # Raise: converting a currency into itself is always a mistake here
        if primary == secondary:
            raise ValueError(f"Cannot init `CurrencyConverter` because $primary and $secondary are both {primary}")

        self._rate = rate_decimal
        self._inverse_rate = round_half_up(Decimal(1) / rate_decimal, INVERSE_RATE_PLACES)
        self._primary = primary
        self._secondary = secondary

    @property
    def rate(self) -> Decimal:
        """Units of secondary currency per one unit of primary currency."""
        return self._rate

    @property
    def inverse_rate(self) -> Decimal:
        """Units of primary currency per one unit of secondary currency (10 fractional digits)."""
        return self._inverse_rate

    @property
    def primary(self) -> Currency:
        return self._primary

    @property
    def secondary(self) -> Currency:
        return self._secondary

    def to_secondary(self, amount: Money) -> Money:
        """Convert $amount in primary currency into secondary currency.

        Raises:
            ValueError: If $amount is not in the primary currency.
        """
        self._check_currency(amount, self._primary, "to_secondary")
        result = Money(amount.value * self._rate, self._secondary)
        logger.debug(f"Converted {amount} to {result} at $rate {self._rate}")
        return result

    def to_primary(self, amount: Money) -> Money:
        """Convert $amount in secondary currency into primary currency.

        Raises:
            ValueError: If $amount is not in the secondary currency.
        """
        self._check_currency(amount, self._secondary, "to_primary")
        result = Money(amount.value * self._inverse_rate, self._primary)
        logger.debug(f"Converted {amount} to {result} at $inverse_rate {self._inverse_rate}")
        return result

    @staticmethod
    def _check_currency(amount: Money, expected: Currency, method: str) -> None:
        # Raise: amount must be in the currency this direction converts from
        if amount.currency != expected:
            raise ValueError(f"Cannot call `{method}` because $amount ({amount}) is not in {expected}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(1 {self._primary.code} = {self._rate} {self._secondary.code})"
