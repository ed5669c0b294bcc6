"""
Print human-readable durations for one or more second counts.

Each input produces one output line. Inputs that are not displayable
durations (non-positive, out of range, NaN) print an empty line.

Usage:
    uv run python -m scripts.format_duration 3661
    uv run python -m scripts.format_duration 31536000 90061 --delimiter " / "
    uv run python -m scripts.format_duration 3600 --zero
"""

import argparse
import logging

from durations.breakdown import decompose_seconds
from durations.phrase import render_duration_phrase
from durations.validation import is_displayable_seconds
from utils.settings import get_delimiter

# -----------------------------------------------------------------------------
# Logging setup
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def parse_seconds(raw: str) -> int | float:
    """
    Parse a command-line argument as a second count.

    Integers stay integers so large values keep full precision.

    Args:
        raw: Argument text, e.g. "3661" or "0.5".

    Returns:
        Parsed number.

    Raises:
        argparse.ArgumentTypeError: If raw is not a number.
    """
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None


def describe(seconds: int | float, delimiter: str, zero: bool) -> str:
    """
    Render one second count, or "" if it is not displayable.

    Args:
        seconds: Elapsed seconds.
        delimiter: String placed between unit phrases.
        zero: Include zero-valued units.

    Returns:
        Duration phrase.
    """
    if not is_displayable_seconds(seconds):
        logger.warning(f"Skipping non-displayable duration: {seconds}")
        return ""
    return render_duration_phrase(
        decompose_seconds(seconds), zero=zero, delimiter=delimiter
    )


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Main entry point for duration formatting."""
    default_delimiter = get_delimiter()

    parser = argparse.ArgumentParser(
        description="Format second counts as human-readable durations"
    )
    parser.add_argument(
        "seconds",
        nargs="+",
        type=parse_seconds,
        help="Elapsed time in seconds",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help=f"Separator between units (default: {default_delimiter!r}, "
        "or DURATION_DELIMITER)",
    )
    parser.add_argument(
        "--zero",
        action="store_true",
        help="Include zero-valued units",
    )
    args = parser.parse_args(argv)

    # Apply defaults after parsing
    delimiter = args.delimiter if args.delimiter is not None else default_delimiter

    for seconds in args.seconds:
        print(describe(seconds, delimiter, args.zero))


if __name__ == "__main__":
    main()
