"""
Project-wide constants for duration formatting.

Centralized here so they can be imported by the formatter, scripts,
and tests without circular imports.
"""

from datetime import datetime, timezone

# Calendar units in the order they are rendered, largest first.
DURATION_UNITS: tuple[str, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
)

# Anchor for turning a millisecond span into calendar units.
REFERENCE_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Largest displayable duration: every integer up to 11 digits.
# Roughly 3,168 years, well inside datetime's year-9999 ceiling.
MAX_DURATION_SECONDS: int = 99_999_999_999

MILLISECONDS_PER_SECOND: int = 1000

DEFAULT_DELIMITER: str = ", "
