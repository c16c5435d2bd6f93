"""
Advisory "next steps" for a calculation result.

Rule-based on the computed chances; the message text comes from the bundled
strings so the wording stays identical to the community tool.
"""

from typing import Optional

from rngcalc.config.loader import AdviceThresholds, get_advice_thresholds, get_message


def single_chance_step(single_chance_pct: float, thresholds: AdviceThresholds) -> str:
    """Pick the per-cast tier message."""
    if single_chance_pct < thresholds.single_chance_low_pct:
        return get_message('steps.single_very_low')
    elif single_chance_pct < thresholds.single_chance_mid_pct:
        return get_message('steps.single_low')
    else:
        return get_message('steps.single_decent')


def cumulative_chance_step(cumulative_chance_pct: float, thresholds: AdviceThresholds) -> str:
    """Pick the cumulative tier message."""
    if cumulative_chance_pct < thresholds.cumulative_early_pct:
        return get_message('steps.cumulative_early')
    elif cumulative_chance_pct < thresholds.cumulative_moderate_pct:
        return get_message('steps.cumulative_moderate')
    elif cumulative_chance_pct < thresholds.cumulative_high_pct:
        return get_message('steps.cumulative_high')
    else:
        return get_message('steps.cumulative_very_high')


def build_steps(
    p_eff: float,
    single_chance_pct: float,
    cumulative_chance_pct: float,
    n: int,
    respawn_after: Optional[int],
    thresholds: Optional[AdviceThresholds] = None,
) -> list[str]:
    """
    Build the ordered advisory steps.

    Args:
        p_eff: Effective per-cast probability (0-1)
        single_chance_pct: Per-cast chance in percent
        cumulative_chance_pct: Chance of at least one drop in n casts, percent
        n: Casts made so far
        respawn_after: Rounded expected casts, or None
        thresholds: Tier thresholds (loaded from config if None)

    Returns:
        List of advisory messages in display order
    """
    if thresholds is None:
        thresholds = get_advice_thresholds()

    if p_eff <= 0:
        return [get_message('steps.recheck_input')]

    steps = [single_chance_step(single_chance_pct, thresholds)]

    if n == 0:
        steps.append(get_message('steps.enter_caught'))
        return steps

    steps.append(cumulative_chance_step(cumulative_chance_pct, thresholds))

    if respawn_after and n > respawn_after * thresholds.far_past_factor:
        steps.append(get_message('steps.far_past_expectation'))
    elif respawn_after:
        steps.append(get_message('steps.respawn_ritual', respawn_after=respawn_after))

    return steps
