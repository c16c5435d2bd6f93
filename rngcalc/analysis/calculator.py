"""
Fish drop probability calculator.

Turns the four raw form fields into a Result: per-cast chance, cumulative
chance over the casts made, a "respawn after" suggestion, warnings and
advisory steps. Malformed input never raises; it shows up in the result.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from rngcalc.analysis.advice import build_steps
from rngcalc.analysis.probability import (
    attempts_from_caught,
    cumulative_probability,
    effective_probability,
    expected_attempts,
    parse_number,
)
from rngcalc.config.loader import get_display_settings, get_message


@dataclass(frozen=True)
class RawInput:
    """Raw text as typed into the form."""
    fish_name: str = ""
    base_denominator: str = ""
    total_luck: str = ""
    total_caught: str = ""


@dataclass
class Result:
    """Outcome of one calculation."""
    valid: bool
    single_chance_pct: float
    cumulative_chance_pct: float
    respawn_after: Optional[int]
    steps: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    fish_label: str = ""
    attempts: int = 0
    p_eff: float = 0.0


def fish_label(fish_name: str) -> str:
    """Trimmed fish name, or the placeholder label when empty."""
    return fish_name.strip() or get_display_settings().fish_placeholder


def compute(raw: RawInput) -> Result:
    """
    Compute drop chances from raw form input.

    Args:
        raw: The four text fields

    Returns:
        Result; valid is False only when the base rate is missing or not positive
    """
    base_denom = parse_number(raw.base_denominator)
    luck_pct = parse_number(raw.total_luck)
    total_caught = parse_number(raw.total_caught)

    warnings = []
    label = fish_label(raw.fish_name)

    if not raw.fish_name.strip():
        warnings.append(get_message('warnings.fish_name_empty'))

    if math.isnan(base_denom) or base_denom <= 0:
        warnings.append(get_message('warnings.base_invalid'))
        return Result(
            valid=False,
            single_chance_pct=0.0,
            cumulative_chance_pct=0.0,
            respawn_after=None,
            steps=[],
            warnings=warnings,
            fish_label=label,
        )

    p_eff = effective_probability(base_denom, luck_pct)
    if p_eff <= 0:
        warnings.append(get_message('warnings.zero_probability'))

    single_chance_pct = p_eff * 100

    n = attempts_from_caught(total_caught)
    cumulative_chance_pct = cumulative_probability(p_eff, n) * 100

    respawn_after = expected_attempts(p_eff)

    steps = build_steps(p_eff, single_chance_pct, cumulative_chance_pct, n, respawn_after)

    return Result(
        valid=True,
        single_chance_pct=single_chance_pct,
        cumulative_chance_pct=cumulative_chance_pct,
        respawn_after=respawn_after,
        steps=steps,
        warnings=warnings,
        fish_label=label,
        attempts=n,
        p_eff=p_eff,
    )
