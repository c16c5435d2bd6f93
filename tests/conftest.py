"""
Pytest configuration and shared fixtures.
"""

import pytest

from rngcalc.analysis.calculator import RawInput
from rngcalc.config.loader import AdviceThresholds, clear_cache


@pytest.fixture(autouse=True)
def fresh_config():
    """Start every test with an empty config cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def thresholds():
    """Default advice thresholds."""
    return AdviceThresholds()


@pytest.fixture
def rare_fish_input():
    """One-in-a-million fish, no luck, no casts yet."""
    return RawInput(
        fish_name="Orca",
        base_denominator="1000000",
        total_luck="0",
        total_caught="0",
    )


@pytest.fixture
def lucky_grind_input():
    """1 : 100 fish with 100% luck after 50 casts (p = 0.02)."""
    return RawInput(
        fish_name="Crystal Crab",
        base_denominator="100",
        total_luck="100",
        total_caught="50",
    )


@pytest.fixture
def negative_luck_input():
    """Luck so negative the effective probability clamps to zero."""
    return RawInput(
        fish_name="Ghost Shark",
        base_denominator="10",
        total_luck="-200",
        total_caught="30",
    )
