"""
Tests for unit label configuration loading.

Tests cover loading from YAML and caching behavior.
"""

from pathlib import Path

import pytest

from utils.constants import DURATION_UNITS
from utils.unit_config import CONFIG_PATH, load_unit_labels


class TestLoadUnitLabels:
    """Tests for load_unit_labels function."""

    def test_returns_dict(self):
        """Config loader returns a dict."""
        assert isinstance(load_unit_labels(), dict)

    def test_every_unit_configured(self):
        """Every rendered unit has labels."""
        labels = load_unit_labels()
        for unit in DURATION_UNITS:
            assert unit in labels, f"{unit} missing from config"

    def test_each_unit_has_singular_and_plural(self):
        """Each unit has 'one' and 'other' string labels."""
        for unit, forms in load_unit_labels().items():
            assert isinstance(forms["one"], str), f"{unit} missing singular"
            assert isinstance(forms["other"], str), f"{unit} missing plural"

    def test_seconds_labels(self):
        """Seconds uses the expected English labels."""
        labels = load_unit_labels()
        assert labels["seconds"] == {"one": "second", "other": "seconds"}

    def test_caching_returns_same_object(self):
        """Multiple calls return the same cached object."""
        result1 = load_unit_labels()
        result2 = load_unit_labels()
        assert result1 is result2


class TestUnitConfigPackaging:
    """The YAML must ship wherever utils/ is installed."""

    def test_config_sits_beside_utils(self):
        """CONFIG_PATH resolves to config/units.yaml next to the utils directory."""
        assert CONFIG_PATH.exists()
        assert CONFIG_PATH.parent.name == "config"

    def test_yaml_declared_as_package_data(self):
        """pyproject installs config/ with its YAML files."""
        tomllib = pytest.importorskip("tomllib")
        pyproject = Path(__file__).parents[2] / "pyproject.toml"
        with open(pyproject, "rb") as f:
            setuptools_config = tomllib.load(f)["tool"]["setuptools"]

        assert "config*" in setuptools_config["packages"]["find"]["include"]
        assert "*.yaml" in setuptools_config["package-data"]["config"]
