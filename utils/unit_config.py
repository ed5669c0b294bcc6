"""
Unit label configuration loading from YAML.

This module provides cached access to the singular and plural labels
for each calendar unit from config/units.yaml.
"""

from functools import lru_cache
from pathlib import Path

import yaml


CONFIG_PATH = Path(__file__).parent.parent / "config" / "units.yaml"


@lru_cache(maxsize=1)
def load_unit_labels() -> dict[str, dict[str, str]]:
    """
    Load unit labels from config/units.yaml.

    Returns:
        Dict mapping unit name to its labels ("one" and "other").

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
    """
    with open(CONFIG_PATH) as f:
        config = yaml.safe_load(f)

    return config.get("units", {})
