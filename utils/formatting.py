"""Human-readable formatting of elapsed durations."""

import logging

from durations.breakdown import decompose_seconds, is_zero_breakdown
from durations.phrase import render_duration_phrase
from durations.validation import is_displayable_seconds

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """
    Format seconds as a human-readable calendar duration.

    Units run from years down to seconds; zero-valued units are skipped.
    Invalid, non-positive, or out-of-range input gives an empty string,
    as does a span shorter than one second.

    Args:
        seconds: Elapsed time in seconds.

    Returns:
        Formatted string like "1 second", "1 hour, 1 minute, 1 second",
        or "2 years, 3 days"; "" when there is nothing to display.
    """
    if not is_displayable_seconds(seconds):
        logger.debug(f"Not a displayable duration: {seconds!r}")
        return ""

    breakdown = decompose_seconds(seconds)
    if is_zero_breakdown(breakdown):
        logger.debug(f"Duration shorter than one second: {seconds!r}")
        return ""
    return render_duration_phrase(breakdown)
