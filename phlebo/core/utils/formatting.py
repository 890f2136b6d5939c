"""
Number formatting utilities.

This module provides the rounding and digit-grouping primitives the regional
formatters build on. All rounding goes through `decimal` so that the result
matches what a person reading the figure expects (1.005 -> 1.01) instead of
what the nearest binary float happens to be.

Usage:
    from phlebo.core.utils.formatting import format_number, round_decimal

    format_number(1234.5, 2)                 # "1,234.50"
    format_number(1234.5, 2, ".", ",")       # "1.234,50"
    round_decimal(2.675, 2)                  # Decimal("2.68")
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP, ROUND_HALF_EVEN, localcontext
from numbers import Real
from typing import Optional

from phlebo.core.config import settings
from phlebo.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# Rounding mode mappings
ROUNDING = {
    'half_up': ROUND_HALF_UP,
    'half_even': ROUND_HALF_EVEN,
}


def ensure_finite(value, name: str = 'amount') -> float:
    """
    Coerce a numeric value to float, rejecting NaN, infinity and non-numbers.

    Raises:
        InvalidArgumentError: If value is not a finite real number
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")

    num = float(value)
    if not math.isfinite(num):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")

    return num


def round_decimal(
    value: float,
    decimal_places: int,
    rounding: Optional[str] = None
) -> Decimal:
    """
    Round a number to a fixed number of decimal places.

    The float is converted through its shortest repr, so 2.675 rounds to
    2.68 under half-up even though its binary value is slightly below.

    Args:
        value: Number to round
        decimal_places: Digits to keep after the decimal point
        rounding: 'half_up' or 'half_even' (default: settings.MONEY_ROUNDING)
                  An unknown name logs a warning and rounds half-up

    Returns:
        Rounded Decimal

    Example:
        >>> round_decimal(0.125, 2)
        Decimal('0.13')
        >>> round_decimal(0.125, 2, rounding='half_even')
        Decimal('0.12')
    """
    name = rounding or settings.MONEY_ROUNDING
    mode = ROUNDING.get(name)
    if mode is None:
        logger.warning(f"Unknown rounding mode {name!r}, using half_up")
        mode = ROUND_HALF_UP

    number = Decimal(repr(float(value)))
    exponent = Decimal(1).scaleb(-decimal_places)

    # quantize fails once the result needs more digits than the context holds
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimal_places + 2)
        return number.quantize(exponent, rounding=mode)


def format_number(
    value: float,
    decimal_places: int = 2,
    thousands_separator: str = ',',
    decimal_separator: str = '.',
    rounding: Optional[str] = None
) -> str:
    """
    Format a number with grouped thousands and a fixed number of decimals.

    Grouping is applied to the integer digit run only, before the separators
    are swapped in, so a separator never lands inside the fraction or next
    to the sign.

    Args:
        value: Numeric value to format
        decimal_places: Number of decimal places
        thousands_separator: Separator inserted every three integer digits
        decimal_separator: Separator between integer and fraction
        rounding: Rounding mode name (default: settings.MONEY_ROUNDING)

    Returns:
        Formatted number string

    Example:
        >>> format_number(12345678, 0)
        "12,345,678"
        >>> format_number(1234.5678, 2, " ", ",")
        "1 234,57"
    """
    num = ensure_finite(value, 'value')
    rounded = round_decimal(num, decimal_places, rounding)

    # Avoid rendering "-0.00" for tiny negatives that round to zero
    if rounded == 0:
        rounded = abs(rounded)

    formatted = f"{rounded:,.{decimal_places}f}"

    return formatted.translate(str.maketrans({
        ',': thousands_separator,
        '.': decimal_separator,
    }))


def format_percent(rate: float) -> str:
    """
    Format a fractional rate as a whole-number percentage.

    Example:
        >>> format_percent(0.2)
        "20%"
        >>> format_percent(0.175)
        "18%"
    """
    percentage = round_decimal(ensure_finite(rate, 'rate') * 100, 0, 'half_up')
    return f"{percentage:.0f}%"
