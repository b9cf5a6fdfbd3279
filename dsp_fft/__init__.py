"""
dsp_fft - unitary radix-2 FFT engine on structure-of-arrays complex sequences.
"""

from .fft_core import ComplexArray, forward, inverse, forward_batch, inverse_batch, fft, ifft

__all__ = [
    'ComplexArray',
    'forward',
    'inverse',
    'forward_batch',
    'inverse_batch',
    'fft',
    'ifft',
]

__version__ = '1.0.0'
