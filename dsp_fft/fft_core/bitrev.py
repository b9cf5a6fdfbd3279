"""
Bit-Reversal Engine

Indices are reversed 6 bits at a time through a 64-entry lookup table. Four
lookups give a 24-bit reversal, which is then shifted down to the requested
width, so transforms up to 2**24 points are supported.
"""

import numpy as np
from numba import jit

MAX_BITS = 24
MAX_LENGTH = 1 << MAX_BITS

# 6-bit reversal table, read-only for the lifetime of the process
REV6 = np.array([int(f"{i:06b}"[::-1], 2) for i in range(64)], dtype=np.int64)
REV6.setflags(write=False)


@jit(nopython=True, cache=True)
def rev_bits24(n, bits):
    """
    Reverse the low `bits` bits of n.

    Parameters
    ----------
    n : int
        Index in [0, 2**bits)
    bits : int
        Bit width, 0 <= bits <= 24

    Returns
    -------
    int
        The bit-reversed index, also in [0, 2**bits)
    """
    rev = 0
    rev = (rev << 6) | REV6[n & 0x3F]
    n >>= 6
    rev = (rev << 6) | REV6[n & 0x3F]
    n >>= 6
    rev = (rev << 6) | REV6[n & 0x3F]
    n >>= 6
    rev = (rev << 6) | REV6[n & 0x3F]
    return rev >> (24 - bits)


@jit(nopython=True, cache=True)
def _bit_reverse_permutation(n, bits):
    perm = np.empty(n, dtype=np.int64)
    for i in range(n):
        perm[i] = rev_bits24(i, bits)
    return perm


def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0


def validate_length(n: int) -> int:
    """
    Check that n is a supported transform length and return log2(n).

    Raises
    ------
    ValueError
        If n is not a power of two (including 0) or exceeds 2**24.
    """
    if not is_power_of_two(n):
        raise ValueError(f"FFT input size N must be a power of 2, got {n}")
    if n > MAX_LENGTH:
        raise ValueError(f"FFT input size N must be at most 2**{MAX_BITS}, got {n}")
    return int(n).bit_length() - 1


def bit_reverse_indices(n: int) -> np.ndarray:
    """Bit-reversal permutation of [0, n) for a power-of-two n."""
    bits = validate_length(n)
    return _bit_reverse_permutation(int(n), bits)
