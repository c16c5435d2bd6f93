"""
Percentage formatting for chance values.
"""

import math

from rngcalc.config.loader import get_display_settings


def format_percent(value: float) -> str:
    """
    Format a chance given in percent.

    Args:
        value: Percentage (0-100), nan when unknown

    Returns:
        Formatted string (e.g., "2.00%", "< 0,01%", "100%", "-")
    """
    settings = get_display_settings()

    if math.isnan(value):
        return settings.empty_value
    if value <= 0:
        return "0%"
    if value >= 100:
        return "100%"
    if value < settings.below_resolution_pct:
        return settings.below_resolution_label
    return f"{value:.{settings.percent_decimals}f}%"


def format_confidence(probability: float) -> str:
    """Format a 0-1 confidence level as a whole or one-decimal percent (e.g., "90%", "99.9%")."""
    pct = round(probability * 100, 6)
    if pct == int(pct):
        return f"{pct:.0f}%"
    return f"{pct:.1f}%"
