"""
Cast count formatting.
"""

from typing import Optional

from rngcalc.config.loader import get_display_settings, get_message


def format_attempts(value: Optional[int]) -> str:
    """
    Format a cast count with thousand separators.

    Args:
        value: Number of casts, or None

    Returns:
        Formatted string (e.g., "1,000,000"), or the empty placeholder for None
    """
    if value is None:
        return get_display_settings().empty_value
    return f"{value:,}"


def format_respawn(value: Optional[int]) -> str:
    """
    Format the respawn suggestion card value.

    Args:
        value: Suggested casts, or None

    Returns:
        "<n> cast", or the empty placeholder when there is no suggestion
    """
    if not value:
        return get_display_settings().empty_value
    return get_message('panel.respawn_value', respawn_after=value)
