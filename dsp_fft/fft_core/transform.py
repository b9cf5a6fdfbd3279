"""
Unitary FFT / IFFT

Both directions scale by 1/sqrt(N), so the pair preserves signal energy and
inverse(forward(x)) returns x. The inverse reuses the forward butterfly with
the real and imaginary buffers swapped.
"""

import math
import numpy as np
from numba import jit
from typing import Iterable, List

from .bitrev import rev_bits24, validate_length
from .butterfly import butterfly
from .container import ComplexArray
from ..utils.logging import get_logger

logger = get_logger(__name__)


@jit(nopython=True, cache=True)
def _scatter_bit_reversed(src_re, src_im, dst_re, dst_im, bits, norm):
    for i in range(len(src_re)):
        i_rev = rev_bits24(i, bits)
        dst_re[i_rev] = src_re[i] * norm
        dst_im[i_rev] = src_im[i] * norm


def _setup(x: ComplexArray) -> ComplexArray:
    """Copy x into a new array in bit-reversed order, scaled by 1/sqrt(N)."""
    bits = validate_length(x.n)
    result = ComplexArray(x.n, x.dtype)
    norm = 1.0 / math.sqrt(x.n)
    _scatter_bit_reversed(x.re, x.im, result.re, result.im, bits, norm)
    return result


def forward(x: ComplexArray) -> ComplexArray:
    """
    Forward DFT with unitary normalization.

    X_k = (1/sqrt(N)) * sum_n x_n * exp(-2*pi*i*k*n/N)

    Parameters
    ----------
    x : ComplexArray
        Input sequence, length a power of two up to 2**24. Not modified.

    Returns
    -------
    ComplexArray
        New sequence with the same length and dtype

    Raises
    ------
    ValueError
        If the length is not a supported power of two
    """
    result = _setup(x)
    butterfly(result.re, result.im, result.n)
    return result


def inverse(x: ComplexArray) -> ComplexArray:
    """
    Inverse DFT with unitary normalization.

    x_n = (1/sqrt(N)) * sum_k X_k * exp(+2*pi*i*k*n/N)
    """
    result = _setup(x)
    # Swapping the buffers conjugates input and output around the butterfly
    butterfly(result.im, result.re, result.n)
    return result


def forward_batch(xs: Iterable[ComplexArray]) -> List[ComplexArray]:
    """Forward transform of each independent sequence in xs."""
    results = [forward(x) for x in xs]
    logger.debug(f"forward_batch: transformed {len(results)} sequences")
    return results


def inverse_batch(xs: Iterable[ComplexArray]) -> List[ComplexArray]:
    """Inverse transform of each independent sequence in xs."""
    results = [inverse(x) for x in xs]
    logger.debug(f"inverse_batch: transformed {len(results)} sequences")
    return results


def fft(z: np.ndarray, dtype=np.float64) -> np.ndarray:
    """
    Forward transform of a numpy array.

    Matches scipy.fft.fft(z, norm="ortho") for power-of-two lengths.

    Examples
    --------
    >>> import numpy as np
    >>> X = fft(np.array([1.0, 1.0, 1.0, 1.0]))
    >>> # X is approximately [2, 0, 0, 0]
    """
    return forward(ComplexArray.from_complex(z, dtype=dtype)).to_complex()


def ifft(z: np.ndarray, dtype=np.float64) -> np.ndarray:
    """Inverse of `fft`; matches scipy.fft.ifft(z, norm="ortho")."""
    return inverse(ComplexArray.from_complex(z, dtype=dtype)).to_complex()
