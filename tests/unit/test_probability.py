"""
Unit tests for probability math.
"""

import math

import numpy as np
import pytest

from rngcalc.analysis.probability import (
    parse_number,
    round_half_up,
    luck_multiplier,
    effective_probability,
    attempts_from_caught,
    cumulative_probability,
    cumulative_curve,
    expected_attempts,
    attempts_for_confidence,
)


class TestParseNumber:
    """Test raw form text parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("100", 100.0),
        ("1,5", 1.5),
        ("1.5", 1.5),
        ("  42 ", 42.0),
        ("-200", -200.0),
        (".5", 0.5),
        ("150k", 150.0),
        ("1e3", 1000.0),
        ("1,000,000", 1.0),  # only the first comma becomes a decimal point
    ])
    def test_parses_leading_number(self, text, expected):
        """Leading numeric text is parsed, comma or dot as decimal."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", None, "abc", "inf", "nan", "1e400", "-", ",", "١٠٠"])
    def test_non_numbers_are_nan(self, text):
        """Text without a finite number parses as nan."""
        assert math.isnan(parse_number(text))


class TestRounding:
    """Test half-up rounding."""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (3.5, 4),
        (2.49, 2),
        (50.0, 50),
    ])
    def test_half_up(self, value, expected):
        """Halves round up, unlike Python's round()."""
        assert round_half_up(value) == expected


class TestEffectiveProbability:
    """Test luck multiplier and clamping."""

    def test_zero_luck_is_identity(self):
        """0% luck leaves the base rate unchanged."""
        assert luck_multiplier(0) == 1.0
        assert effective_probability(100, 0) == pytest.approx(0.01)

    def test_missing_luck_is_identity(self):
        """Absent luck counts as 0%."""
        assert luck_multiplier(math.nan) == 1.0

    def test_hundred_percent_doubles(self):
        """100% luck doubles the chance."""
        assert effective_probability(100, 100) == pytest.approx(0.02)

    def test_negative_luck_clamps_to_zero(self):
        """Luck below -100% drives the probability to zero, not negative."""
        assert effective_probability(10, -200) == 0.0

    def test_tiny_base_with_cancelled_luck(self):
        """-100% luck over a subnormal base is zero, not nan."""
        assert effective_probability(1e-320, -100) == 0.0

    def test_tiny_base_clamps_to_one(self):
        """A base small enough to overflow 1/X still clamps to 1."""
        assert effective_probability(1e-320, 0) == 1.0
        assert effective_probability(1e-320, -150) == 0.0

    def test_clamps_to_one(self):
        """Probabilities above 1 are clamped."""
        assert effective_probability(0.5, 0) == 1.0

    @pytest.mark.parametrize("base,luck", [
        (1_000_000, 0),
        (100, 100),
        (10, -50),
        (2, 500),
        (7, -99.9),
    ])
    def test_matches_closed_form(self, base, luck):
        """p_eff == clamp(1/base * (1 + luck/100), 0, 1)."""
        expected = min(max(1 / base * (1 + luck / 100), 0), 1)
        assert effective_probability(base, luck) == pytest.approx(expected)


class TestAttemptsFromCaught:
    """Test cast count parsing."""

    @pytest.mark.parametrize("value,expected", [
        (math.nan, 0),
        (0, 0),
        (-5, 0),
        (0.9, 0),
        (50, 50),
        (50.7, 50),
    ])
    def test_floor_and_defaults(self, value, expected):
        """Casts are floored; nan and non-positive become 0."""
        assert attempts_from_caught(value) == expected


class TestCumulativeProbability:
    """Test at-least-one-success probability."""

    def test_known_value(self):
        """p=0.02 over 50 casts is about 63.58%."""
        assert cumulative_probability(0.02, 50) == pytest.approx(1 - 0.98 ** 50)
        assert cumulative_probability(0.02, 50) * 100 == pytest.approx(63.58, abs=0.01)

    def test_zero_attempts(self):
        """No casts means no chance yet."""
        assert cumulative_probability(0.5, 0) == 0.0

    def test_zero_probability(self):
        """Zero probability stays zero for any n."""
        assert cumulative_probability(0.0, 1000) == 0.0

    def test_certain_success(self):
        """p=1 gives certainty after one cast."""
        assert cumulative_probability(1.0, 1) == 1.0

    def test_monotonic_in_attempts(self):
        """More casts never lower the cumulative chance."""
        values = [cumulative_probability(0.001, n) for n in range(0, 5000, 250)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_monotonic_in_probability(self):
        """Higher p never lowers the cumulative chance."""
        values = [cumulative_probability(p, 100) for p in np.linspace(0, 1, 21)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_huge_attempt_count(self):
        """Very large n is fine and saturates at 1."""
        assert cumulative_probability(0.01, 10 ** 12) == pytest.approx(1.0)


class TestCumulativeCurve:
    """Test vectorised cumulative probability."""

    def test_matches_scalar(self):
        """Curve agrees with cumulative_probability element-wise."""
        attempts = [0, 1, 10, 50, 200]
        curve = cumulative_curve(0.02, attempts)
        expected = [cumulative_probability(0.02, n) for n in attempts]
        np.testing.assert_allclose(curve, expected)

    def test_zero_probability(self):
        """Zero probability gives an all-zero curve."""
        curve = cumulative_curve(0.0, [1, 10, 100])
        np.testing.assert_array_equal(curve, [0.0, 0.0, 0.0])


class TestExpectedAttempts:
    """Test the respawn suggestion (1/p rounded)."""

    @pytest.mark.parametrize("p_eff,expected", [
        (0.02, 50),
        (0.25, 4),
        (1e-6, 1_000_000),
        (0.0, None),
        (1.0, None),
    ])
    def test_values(self, p_eff, expected):
        """1/p rounded, None at 0 and 1."""
        assert expected_attempts(p_eff) == expected


class TestAttemptsForConfidence:
    """Test casts needed for a target cumulative chance."""

    @pytest.mark.parametrize("p_eff,confidence", [
        (0.02, 0.5),
        (0.02, 0.9),
        (0.001, 0.99),
        (0.3, 0.5),
    ])
    def test_is_smallest_sufficient_n(self, p_eff, confidence):
        """Result reaches confidence and one cast fewer does not."""
        n = attempts_for_confidence(p_eff, confidence)
        assert cumulative_probability(p_eff, n) >= confidence - 1e-12
        assert cumulative_probability(p_eff, n - 1) < confidence

    def test_zero_probability(self):
        """No amount of casts helps when p is zero."""
        assert attempts_for_confidence(0.0, 0.9) is None

    def test_certain_success(self):
        """p=1 needs a single cast."""
        assert attempts_for_confidence(1.0, 0.99) == 1
