"""
Environment-driven defaults.

Functions (not module-level constants) ensure environment is read at runtime,
not import time.
"""

import os

from dotenv import load_dotenv

from utils.constants import DEFAULT_DELIMITER


def get_delimiter() -> str:
    """
    Get the phrase delimiter from environment or use default.

    Reads DURATION_DELIMITER from environment (with .env support).
    Default: ", "

    Returns:
        Delimiter placed between unit phrases.
    """
    load_dotenv()
    return os.getenv("DURATION_DELIMITER", DEFAULT_DELIMITER)
