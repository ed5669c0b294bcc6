"""
Calendar-aware decomposition of elapsed time.

Spans are anchored at REFERENCE_EPOCH and split into years, months, days,
hours, minutes and seconds with dateutil's relativedelta, so month and
year lengths follow the real calendar (leap years included).
"""

import math
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from utils.constants import DURATION_UNITS, MILLISECONDS_PER_SECOND, REFERENCE_EPOCH

# Type alias for a unit -> count mapping
Breakdown = dict[str, int]


def _offset(ms: float) -> timedelta:
    # Whole milliseconds only; timedelta would round float input to the microsecond
    return timedelta(milliseconds=math.floor(ms))


def decompose_interval(start_ms: float, end_ms: float) -> Breakdown:
    """
    Break the interval between two epoch offsets into calendar units.

    Args:
        start_ms: Start of the interval, milliseconds after REFERENCE_EPOCH.
        end_ms: End of the interval, milliseconds after REFERENCE_EPOCH.

    Returns:
        Dict with one non-negative int per unit in DURATION_UNITS.
        Sub-second remainders are dropped.

    Raises:
        ValueError: If end_ms is before start_ms.
    """
    if end_ms < start_ms:
        raise ValueError(f"Interval end ({end_ms}) is before start ({start_ms})")

    start = REFERENCE_EPOCH + _offset(start_ms)
    end = REFERENCE_EPOCH + _offset(end_ms)
    delta = relativedelta(end, start)

    return {unit: int(getattr(delta, unit)) for unit in DURATION_UNITS}


def decompose_seconds(seconds: float) -> Breakdown:
    """
    Break a span of seconds, measured from REFERENCE_EPOCH, into calendar units.

    Args:
        seconds: Non-negative elapsed seconds.

    Returns:
        Breakdown as returned by decompose_interval.
    """
    return decompose_interval(0, seconds * MILLISECONDS_PER_SECOND)


def is_zero_breakdown(breakdown: Breakdown) -> bool:
    """Check whether every unit in a breakdown is zero (or missing)."""
    return all(breakdown.get(unit, 0) == 0 for unit in DURATION_UNITS)
