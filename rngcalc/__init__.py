"""
Fish It RNG calculator.

Per-cast and cumulative drop chances from a base rate, total luck and casts made.
"""

from rngcalc.analysis.calculator import RawInput, Result, compute

__version__ = "1.0.0"

__all__ = ['RawInput', 'Result', 'compute']
