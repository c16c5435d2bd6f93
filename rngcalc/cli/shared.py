"""
Shared utilities for CLI tools.

Renders calculation results as plain text panels for rng_calculator.py.
"""

from __future__ import annotations

from rngcalc.analysis.calculator import Result
from rngcalc.analysis.probability import attempts_for_confidence, cumulative_curve, round_half_up
from rngcalc.config.loader import get_display_settings, get_message
from rngcalc.formatters import (
    format_attempts,
    format_confidence,
    format_percent,
    format_respawn,
)

WIDTH = 70


def render_header() -> str:
    """Title block shown above the form or result."""
    return "\n".join([
        "=" * WIDTH,
        get_message('title'),
        "=" * WIDTH,
        get_message('subtitle'),
    ])


def render_milestones(result: Result) -> list[str]:
    """
    Lines for the casts-per-confidence and cumulative curve sections.

    Args:
        result: A valid result with p_eff > 0

    Returns:
        Lines to print (empty when there is no effective probability)
    """
    if not result.valid or result.p_eff <= 0:
        return []

    settings = get_display_settings()
    lines = [f"\n  {get_message('panel.milestones_title')}:"]
    for level in settings.confidence_levels:
        needed = attempts_for_confidence(result.p_eff, level)
        lines.append("    " + get_message(
            'panel.milestone_row',
            confidence=format_confidence(level),
            attempts=format_attempts(needed),
        ))

    if result.respawn_after:
        attempts = sorted({max(1, round_half_up(result.respawn_after * m)) for m in settings.curve_multiples})
        chances = cumulative_curve(result.p_eff, attempts) * 100
        lines.append(f"\n  {get_message('panel.curve_title')}:")
        for n, chance in zip(attempts, chances):
            lines.append("    " + get_message(
                'panel.curve_row',
                attempts=format_attempts(n),
                chance=format_percent(float(chance)),
            ))

    return lines


def render_result(result: Result | None, milestones: bool = False) -> str:
    """
    Render the result panel.

    Args:
        result: Last calculation result, or None before the first submit
        milestones: Also show the confidence and cumulative curve sections

    Returns:
        Multi-line text panel
    """
    lines = [f"\n{'-' * WIDTH}", f"  {get_message('panel.heading')}", '-' * WIDTH]

    if result is None:
        lines.append(f"  {get_message('panel.empty_hint')}")
        return "\n".join(lines)

    if result.warnings:
        lines.append(f"\n  {get_message('panel.warnings_title')}")
        for warning in result.warnings:
            lines.append(f"    ! {warning}")

    if result.valid:
        single_label = get_message('panel.single_chance', fish_label=result.fish_label)
        cumulative_label = get_message('panel.cumulative_chance')
        respawn_label = get_message('panel.respawn_after')
        label_width = max(len(single_label), len(cumulative_label), len(respawn_label))

        lines.append("")
        lines.append(f"  {single_label:<{label_width}}  {format_percent(result.single_chance_pct):>12}")
        lines.append(f"  {cumulative_label:<{label_width}}  {format_percent(result.cumulative_chance_pct):>12}")
        lines.append(f"  {respawn_label:<{label_width}}  {format_respawn(result.respawn_after):>12}")
        lines.append(f"    ({get_message('panel.respawn_note')})")

        lines.append(f"\n  {get_message('panel.steps_title')}:")
        if not result.steps:
            lines.append(f"    {get_message('panel.no_steps')}")
        for i, step in enumerate(result.steps, 1):
            lines.append(f"    {i}. {step}")

        if milestones:
            lines.extend(render_milestones(result))

    lines.append(f"\n{get_message('panel.footer')}")
    return "\n".join(lines)
