"""
Numerical accuracy measures for the transform pair.

Used by the benchmark script to compare against a reference FFT and to check
the round-trip, Parseval and linearity properties of the unitary transform.
Every function accepts ComplexArray instances or numpy complex arrays.
"""

import numpy as np
from typing import Union

from ..fft_core import ComplexArray, forward, inverse

ArrayLike = Union[ComplexArray, np.ndarray]


def _as_complex(x: ArrayLike) -> np.ndarray:
    if isinstance(x, ComplexArray):
        return x.to_complex().astype(np.complex128)
    return np.asarray(x, dtype=np.complex128)


def max_abs_error(actual: ArrayLike, expected: ArrayLike) -> float:
    """Largest elementwise |actual - expected|."""
    diff = _as_complex(actual) - _as_complex(expected)
    if diff.size == 0:
        return 0.0
    return float(np.abs(diff).max())


def relative_error(actual: ArrayLike, expected: ArrayLike) -> float:
    """||actual - expected|| / ||expected|| (absolute error if expected is zero)."""
    actual = _as_complex(actual)
    expected = _as_complex(expected)
    err = float(np.linalg.norm(actual - expected))
    ref = float(np.linalg.norm(expected))
    return err / ref if ref > 0 else err


def round_trip_error(x: ComplexArray) -> float:
    """Max error of inverse(forward(x)) against x."""
    return max_abs_error(inverse(forward(x)), x)


def energy_ratio(x: ComplexArray) -> float:
    """
    Spectrum energy over signal energy.

    1.0 for a unitary transform (Parseval). A zero signal returns 1.0.
    """
    e_in = x.energy()
    e_out = forward(x).energy()
    if e_in == 0.0:
        return 1.0 if e_out == 0.0 else float('inf')
    return e_out / e_in


def linearity_error(x: ComplexArray, y: ComplexArray, a: complex, b: complex) -> float:
    """Relative error between forward(a*x + b*y) and a*forward(x) + b*forward(y)."""
    if x.n != y.n:
        raise ValueError(f"x and y must have the same length, got {x.n} and {y.n}")

    xc, yc = _as_complex(x), _as_complex(y)
    combined = ComplexArray.from_complex(a * xc + b * yc, dtype=x.dtype)
    lhs = forward(combined)
    rhs = a * _as_complex(forward(x)) + b * _as_complex(forward(y))
    return relative_error(lhs, rhs)
