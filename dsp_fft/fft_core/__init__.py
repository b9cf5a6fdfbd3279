"""
FFT Core - radix-2 decimation-in-time FFT with unitary normalization

Modules:
    - complex_math: scalar complex arithmetic on (re, im) pairs
    - container: ComplexArray, structure-of-arrays storage in float32/float64
    - bitrev: table-driven bit reversal for lengths up to 2**24
    - butterfly: in-place iterative Cooley-Tukey stage
    - transform: forward / inverse entry points
"""

from .complex_math import cadd, csub, cmul, cabs, cispi
from .container import ComplexArray, SUPPORTED_DTYPES
from .bitrev import (
    REV6,
    MAX_BITS,
    MAX_LENGTH,
    rev_bits24,
    bit_reverse_indices,
    is_power_of_two,
    validate_length,
)
from .butterfly import butterfly
from .transform import forward, inverse, forward_batch, inverse_batch, fft, ifft

__all__ = [
    # Complex arithmetic
    'cadd',
    'csub',
    'cmul',
    'cabs',
    'cispi',
    # Container
    'ComplexArray',
    'SUPPORTED_DTYPES',
    # Bit reversal
    'REV6',
    'MAX_BITS',
    'MAX_LENGTH',
    'rev_bits24',
    'bit_reverse_indices',
    'is_power_of_two',
    'validate_length',
    # Transforms
    'butterfly',
    'forward',
    'inverse',
    'forward_batch',
    'inverse_batch',
    'fft',
    'ifft',
]
