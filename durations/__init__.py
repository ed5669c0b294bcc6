"""Duration decomposition, validation and phrase rendering."""

from .breakdown import Breakdown, decompose_interval, decompose_seconds, is_zero_breakdown
from .phrase import format_unit, render_duration_phrase
from .validation import is_displayable_seconds, is_valid_number

__all__ = [
    "Breakdown",
    "decompose_interval",
    "decompose_seconds",
    "format_unit",
    "is_displayable_seconds",
    "is_valid_number",
    "is_zero_breakdown",
    "render_duration_phrase",
]
