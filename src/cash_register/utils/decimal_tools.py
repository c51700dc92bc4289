from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def round_half_up(value: DecimalLike, places: int) -> Decimal:
    """Round $value to $places fractional digits, halves away from zero.

    Args:
        value: Value to round (Decimal-like scalar).
        places: Number of fractional digits to keep (0 means whole units).

    Returns:
        The rounded Decimal with exactly $places fractional digits.

    Raises:
        ValueError: If $places is negative.

    Examples:
        >>> round_half_up("42.507", 2)
        Decimal('42.51')
        >>> round_half_up("0.125", 2)
        Decimal('0.13')
    """
    # Raise: a negative number of places has no meaning for quantization
    if places < 0:
        raise ValueError(f"Cannot call `round_half_up` because $places ({places}) is negative")

    exponent = Decimal(1).scaleb(-places)
    return as_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)
