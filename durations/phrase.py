"""
Render a duration breakdown as a human-readable phrase.

Example:
    render_duration_phrase({"years": 2, "days": 3})
    # '2 years, 3 days'
"""

from collections.abc import Iterable, Mapping

from utils.constants import DEFAULT_DELIMITER, DURATION_UNITS
from utils.unit_config import load_unit_labels


def format_unit(unit: str, value: int) -> str:
    """
    Format a single unit value, e.g. "1 second" or "5 days".

    Args:
        unit: Unit name from DURATION_UNITS.
        value: Count for that unit.

    Returns:
        Count followed by the singular or plural label.

    Raises:
        ValueError: If unit has no configured labels.
    """
    labels = load_unit_labels().get(unit)
    if labels is None:
        raise ValueError(f"Unknown duration unit: {unit!r}")

    label = labels["one"] if value == 1 else labels["other"]
    return f"{value} {label}"


def render_duration_phrase(
    breakdown: Mapping[str, int],
    units: Iterable[str] = DURATION_UNITS,
    zero: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """
    Join the units of a breakdown into one delimited phrase.

    Args:
        breakdown: Unit name to count. Missing units count as zero.
        units: Units to include, in output order.
        zero: Include zero-valued units instead of skipping them.
        delimiter: String placed between unit phrases.

    Returns:
        The phrase, or "" if nothing was included.

    Raises:
        ValueError: If units names an unknown unit.
    """
    units = list(units)
    labels = load_unit_labels()
    unknown = [unit for unit in units if unit not in labels]
    if unknown:
        raise ValueError(f"Unknown duration units: {unknown}")

    parts = []
    for unit in units:
        value = breakdown.get(unit, 0)
        if value == 0 and not zero:
            continue
        parts.append(format_unit(unit, value))
    return delimiter.join(parts)
