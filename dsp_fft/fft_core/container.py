"""
Complex Array Container

Structure-of-arrays storage for complex sequences: the real and imaginary
parts are two rows of one (2, n) buffer, in single or double precision.
"""

import numpy as np
from numba import jit
from typing import Optional, Union

from .complex_math import cabs

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def _check_dtype(dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if dtype not in SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported dtype {dtype}, expected float32 or float64")
    return dtype


@jit(nopython=True, cache=True)
def _magnitude(re, im, out):
    for i in range(len(re)):
        out[i] = cabs((re[i], im[i]))


class ComplexArray:
    """
    A complex sequence of fixed length stored as parallel re/im buffers.

    Parameters
    ----------
    n : int
        Number of samples
    dtype : np.float32 or np.float64
        Storage precision of both coordinates

    Attributes
    ----------
    re, im : np.ndarray
        Views into the shared buffer, each of shape (n,)
    """

    def __init__(self, n: int, dtype=np.float32):
        n = int(n)
        if n < 0:
            raise ValueError(f"Length must be non-negative, got {n}")

        self.n = n
        self.dtype = _check_dtype(dtype)
        self._buffer = np.zeros((2, n), dtype=self.dtype)
        self.re = self._buffer[0]
        self.im = self._buffer[1]

    @classmethod
    def zeros(cls, n: int, dtype=np.float32) -> "ComplexArray":
        return cls(n, dtype)

    @classmethod
    def from_parts(
        cls,
        re: np.ndarray,
        im: Optional[np.ndarray] = None,
        dtype=None,
    ) -> "ComplexArray":
        """
        Build a sequence from separate real and imaginary parts.

        If `im` is None the imaginary part is zero. If `dtype` is None,
        float32 input stays float32 and everything else becomes float64.
        """
        re = np.asarray(re)
        if re.ndim != 1:
            raise ValueError(f"Input must be 1D, got shape {re.shape}")

        if im is not None:
            im = np.asarray(im)
            if im.shape != re.shape:
                raise ValueError(f"re and im must have the same shape, got {re.shape} and {im.shape}")

        if dtype is None:
            dtype = np.float32 if re.dtype == np.float32 else np.float64

        result = cls(len(re), dtype)
        result.re[:] = re
        if im is not None:
            result.im[:] = im
        return result

    @classmethod
    def from_complex(cls, z: Union[np.ndarray, list], dtype=np.float64) -> "ComplexArray":
        z = np.asarray(z)
        if z.ndim != 1:
            raise ValueError(f"Input must be 1D, got shape {z.shape}")
        return cls.from_parts(np.real(z), np.imag(z), dtype=dtype)

    def to_complex(self) -> np.ndarray:
        """Return a numpy complex64 (float32) or complex128 (float64) copy."""
        out = np.empty(self.n, dtype=np.result_type(self.dtype, np.complex64))
        out.real = self.re
        out.imag = self.im
        return out

    def copy(self) -> "ComplexArray":
        result = ComplexArray(self.n, self.dtype)
        result._buffer[:] = self._buffer
        return result

    def magnitude(self) -> np.ndarray:
        out = np.empty(self.n, dtype=self.dtype)
        _magnitude(self.re, self.im, out)
        return out

    def energy(self) -> float:
        """Total signal energy, sum of |x_n|^2, accumulated in float64."""
        re = self.re.astype(np.float64)
        im = self.im.astype(np.float64)
        return float(np.sum(re * re + im * im))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"ComplexArray(n={self.n}, dtype={self.dtype.name})"
