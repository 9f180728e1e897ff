"""Utility functions for number formatting and lenient form parsing."""

import math
import re
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer, with halves going toward positive infinity.

    Python's round() rounds halves to even, so 0.5 -> 0 and 2.5 -> 2. Display
    values here follow the browser behaviour instead: 0.5 -> 1, 2.5 -> 3,
    -2.5 -> -2.

    Args:
        value: Number to round

    Returns:
        Rounded value (NaN and infinities are returned unchanged)
    """
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def to_fixed(value: float, digits: int) -> str:
    """
    Format with a fixed number of decimals, ties rounding away from zero.

    The exact binary value of the float is rounded, so 2.549 -> "2.5" and
    1.25 -> "1.3".

    Examples:
        >>> to_fixed(1.0, 1)
        '1.0'
        >>> to_fixed(2.549, 1)
        '2.5'
        >>> to_fixed(15.0, 2)
        '15.00'
    """
    if not math.isfinite(value):
        return format_number(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: Union[int, float]) -> str:
    """
    Render a number the way it is interpolated into display text.

    Integral values drop the trailing ".0" (6.0 -> "6", 0.6 -> "0.6").
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def parse_int_prefix(value: Union[str, int, float, None]) -> Optional[int]:
    """
    Parse the leading integer of a form value ("3", " 2 ", "4abc", "2.7").

    Returns:
        The parsed integer, or None when there is no leading integer
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else None


def parse_float_prefix(value: Union[str, int, float, None], default: float = 0.0) -> float:
    """
    Parse the leading number of a form value, falling back to `default`.

    Empty, non-numeric, NaN and infinite inputs all give `default`, so
    "Infinity" and overflowing values such as "1e400" price as `default`
    rather than an unbounded amount.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return default
        number = float(match.group(1))
    if not math.isfinite(number) or number == 0:
        return default
    return number


def format_date(value: Union[str, date]) -> str:
    """
    Format an ISO date as "Thursday, December 25, 2025".

    Raises:
        ValueError: If the string is not an ISO date
    """
    day = value if isinstance(value, date) else date.fromisoformat(value.strip())
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
