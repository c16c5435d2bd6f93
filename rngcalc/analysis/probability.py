"""
Independent-trial probability math for rare fish drops.

Every cast is a Bernoulli trial with the same effective probability, so the
chance of at least one drop in n casts is binomial and the number of casts
until the first drop is geometric.
"""

import math
import re
from typing import Optional

import numpy as np
from scipy import stats


# Leading decimal number, read the way a browser reads form text
_NUMBER_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)


def parse_number(text: Optional[str]) -> float:
    """
    Parse raw form text into a float.

    The first ',' is treated as the decimal separator. Only the leading
    numeric part is read, so "150k" parses as 150.

    Args:
        text: Raw input text (may be None or empty)

    Returns:
        Parsed finite float, or nan when the text holds no finite number
    """
    if not text:
        return math.nan

    match = _NUMBER_PREFIX.match(text.replace(',', '.', 1))
    if match is None:
        return math.nan

    value = float(match.group(1))
    return value if math.isfinite(value) else math.nan


def round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def luck_multiplier(luck_pct: float) -> float:
    """Multiplier for a luck percentage; nan (absent) counts as 0% luck."""
    if math.isnan(luck_pct):
        return 1.0
    return 1 + luck_pct / 100


def effective_probability(base_denominator: float, luck_pct: float) -> float:
    """
    Per-cast probability after luck, clamped to [0, 1].

    Args:
        base_denominator: X from the "1 : X" base rate (must be > 0)
        luck_pct: Total luck percent (nan when absent)

    Returns:
        Effective probability (0-1)
    """
    p_raw = luck_multiplier(luck_pct) / base_denominator
    return min(max(p_raw, 0.0), 1.0)


def attempts_from_caught(total_caught: float) -> int:
    """Whole number of casts made; nan or non-positive counts as 0."""
    if math.isnan(total_caught) or total_caught <= 0:
        return 0
    return math.floor(total_caught)


def cumulative_probability(p_eff: float, n: int) -> float:
    """
    Probability of at least one success in n independent trials.

    Args:
        p_eff: Per-trial probability (0-1)
        n: Number of trials

    Returns:
        Probability (0-1); 0 when n <= 0 or p_eff <= 0
    """
    if n <= 0 or p_eff <= 0:
        return 0.0
    return 1 - (1 - p_eff) ** n


def cumulative_curve(p_eff: float, attempts) -> np.ndarray:
    """
    Vectorised cumulative_probability over an array of attempt counts.

    Args:
        p_eff: Per-trial probability (0-1)
        attempts: Array-like of attempt counts

    Returns:
        Array of probabilities (0-1), same shape as attempts
    """
    n = np.floor(np.asarray(attempts, dtype=float))
    if p_eff <= 0:
        return np.zeros_like(n)
    curve = 1 - np.power(1 - p_eff, np.clip(n, 0, None))
    return np.where(n > 0, curve, 0.0)


def expected_attempts(p_eff: float) -> Optional[int]:
    """
    Mean casts until the first drop (geometric expectation 1/p), rounded.

    Returns:
        Rounded 1/p_eff, or None when p_eff is 0 or 1
    """
    if 0 < p_eff < 1:
        return round_half_up(1 / p_eff)
    return None


def attempts_for_confidence(p_eff: float, confidence: float) -> Optional[int]:
    """
    Smallest number of casts whose cumulative chance reaches confidence.

    Uses the geometric distribution quantile.

    Args:
        p_eff: Per-trial probability (0-1)
        confidence: Target cumulative probability (0-1, exclusive of 1)

    Returns:
        Number of casts, or None when p_eff <= 0
    """
    if p_eff <= 0:
        return None
    if p_eff >= 1:
        return 1
    return int(stats.geom.ppf(confidence, p_eff))
