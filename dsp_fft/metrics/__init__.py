"""
Accuracy metrics for the FFT engine.
"""

from .accuracy import (
    max_abs_error,
    relative_error,
    round_trip_error,
    energy_ratio,
    linearity_error,
)

__all__ = [
    'max_abs_error',
    'relative_error',
    'round_trip_error',
    'energy_ratio',
    'linearity_error',
]
