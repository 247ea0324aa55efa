"""Formatting and percentage helpers shared by the calculator and the CLI"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext


def format_to_two_decimals(value: float) -> float:
    """
    Round a money amount to 2 decimals (half-up).

    The value is rounded from its shortest decimal representation so that
    1.235 gives 1.24 rather than the binary-float result.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits to keep 2 decimals on very large amounts
        ctx.prec = max(28, exact.adjusted() + 3)
        rounded = exact.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    return float(rounded)


def format_to_eight_decimals(value: float) -> str:
    """Format a price with up to 8 decimals, trailing zeros removed"""
    if value == 0:
        return "0"
    formatted = f"{value:.8f}".rstrip('0').rstrip('.')
    # Values below 1e-8 collapse to zero once rounded
    if formatted in ('', '-0'):
        return "0"
    return formatted


def convert_to_decimal(percentage: float) -> float:
    """Convert a raw percentage (25) to its fraction (0.25)"""
    return percentage / 100


def is_raw_percentage(value: float) -> bool:
    """A value above 1 is read as a raw percentage"""
    return value > 1


def normalize_percentage(value: float) -> float:
    """
    Normalize a percentage to its decimal form.

    Values above 1 are raw percentages (50 -> 0.5); values of 1 or less are
    already decimal and returned unchanged, so 1 means 100%.

    Args:
        value (float): Raw percentage or fraction

    Returns:
        float: Fraction
    """
    return value / 100 if is_raw_percentage(value) else value
