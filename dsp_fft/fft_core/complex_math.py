"""
Scalar complex arithmetic on (re, im) pairs.

All functions are Numba-jitted so the butterfly kernel can inline them, and
remain callable from plain Python with tuples of floats.
"""

import math
from numba import jit


@jit(nopython=True, cache=True)
def cadd(x, y):
    return (x[0] + y[0], x[1] + y[1])


@jit(nopython=True, cache=True)
def csub(x, y):
    return (x[0] - y[0], x[1] - y[1])


@jit(nopython=True, cache=True)
def cmul(x, y):
    """(a + bi)(c + di) = (ac - bd) + (ad + bc)i"""
    return (x[0] * y[0] - x[1] * y[1], x[0] * y[1] + x[1] * y[0])


@jit(nopython=True, cache=True)
def cabs(x):
    return math.hypot(x[0], x[1])


@jit(nopython=True, cache=True)
def cispi(x):
    """Unit root exp(i*pi*x) = (cos(pi*x), sin(pi*x))."""
    return (math.cos(math.pi * x), math.sin(math.pi * x))
