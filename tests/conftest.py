"""
Pytest fixtures for duration formatting tests.

Fixtures provide reusable test data and utilities. They're injected
into test functions by name — pytest handles the wiring automatically.
"""

import pytest

# ---------------------------------------------------------------------------
# Breakdown fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def zero_breakdown() -> dict[str, int]:
    """Every unit zero — what a sub-second span decomposes to."""
    return {
        "years": 0,
        "months": 0,
        "days": 0,
        "hours": 0,
        "minutes": 0,
        "seconds": 0,
    }


@pytest.fixture
def full_breakdown() -> dict[str, int]:
    """Every unit non-zero, mixing singular and plural values."""
    return {
        "years": 2,
        "months": 1,
        "days": 3,
        "hours": 1,
        "minutes": 10,
        "seconds": 1,
    }


@pytest.fixture
def sparse_breakdown() -> dict[str, int]:
    """
    Only years and days set.

    The gaps in between must not show up in the rendered phrase.
    """
    return {
        "years": 2,
        "months": 0,
        "days": 3,
        "hours": 0,
        "minutes": 0,
        "seconds": 0,
    }


# ---------------------------------------------------------------------------
# Environment fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def no_dotenv(monkeypatch):
    """
    Stop settings from reading a stray .env file.

    Environment-dependent tests then see only what monkeypatch sets.
    """
    monkeypatch.setattr("utils.settings.load_dotenv", lambda: False)
