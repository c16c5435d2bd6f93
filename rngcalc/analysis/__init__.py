"""
Probability analysis for rare fish drops.
"""

from rngcalc.analysis.probability import (
    parse_number,
    effective_probability,
    cumulative_probability,
    cumulative_curve,
    expected_attempts,
    attempts_for_confidence,
)
from rngcalc.analysis.advice import build_steps
from rngcalc.analysis.calculator import (
    RawInput,
    Result,
    compute,
    fish_label,
)

__all__ = [
    # Probability
    'parse_number',
    'effective_probability',
    'cumulative_probability',
    'cumulative_curve',
    'expected_attempts',
    'attempts_for_confidence',
    # Advice
    'build_steps',
    # Calculator
    'RawInput',
    'Result',
    'compute',
    'fish_label',
]
