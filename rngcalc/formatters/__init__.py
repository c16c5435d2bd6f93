"""
Output formatting utilities.
"""

from rngcalc.formatters.percent import format_percent, format_confidence
from rngcalc.formatters.attempts import format_attempts, format_respawn

__all__ = [
    'format_percent',
    'format_confidence',
    'format_attempts',
    'format_respawn',
]
