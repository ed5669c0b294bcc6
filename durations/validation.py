"""Input checks applied before a value is treated as a duration."""

import math
from numbers import Integral, Real

from utils.constants import MAX_DURATION_SECONDS


def is_valid_number(value: object) -> bool:
    """
    Check that a value is a finite real number.

    Booleans are rejected even though they subclass int. Integers and
    fractions too large for a float are still finite, so they pass.

    Args:
        value: Anything a caller might pass as a duration.

    Returns:
        True if value is a finite int/float (or other Real), False otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, Integral):
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # Only exact rationals overflow float conversion; NaN and inf don't
        return True


def is_displayable_seconds(seconds: object) -> bool:
    """Check that seconds is a valid number in (0, MAX_DURATION_SECONDS]."""
    if not is_valid_number(seconds):
        return False
    return 0 < seconds <= MAX_DURATION_SECONDS
