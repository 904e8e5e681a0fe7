"""
Unit conversion for display.

Blank inputs convert to None, never to 0 or NaN, so column selection can
tell "no value" apart from "zero".
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

METERS_TO_MILES = 0.000621371
METERS_TO_FEET = 3.28084


def is_blank(value: Any) -> bool:
    """
    Check whether a cell value counts as "no value".

    None, empty/whitespace strings and NaN are blank. Zero and any
    other text are values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def as_number(value: Any) -> Optional[float]:
    """
    Read a value for numeric conversion.

    Returns None for blanks, non-numeric text and non-finite numbers.
    """
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def round_to(number: float, places: int) -> float:
    """
    Round half away from zero on the exact binary value.

    round() would use banker's rounding on exact halves (2.5 -> 2).
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


def meters_to_miles(meters: Any) -> Optional[float]:
    """Convert meters to miles, 1 decimal place."""
    number = as_number(meters)
    if number is None:
        return None
    return round_to(number * METERS_TO_MILES, 1)


def meters_to_feet(meters: Any) -> Optional[int]:
    """Convert meters to whole feet."""
    number = as_number(meters)
    if number is None:
        return None
    return int(round_to(number * METERS_TO_FEET, 0))
