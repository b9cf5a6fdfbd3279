"""
Iterative radix-2 decimation-in-time butterfly stage.
"""

from numba import jit

from .complex_math import cadd, csub, cmul, cispi


@jit(nopython=True, cache=True)
def butterfly(a, b, n):
    """
    In-place Cooley-Tukey butterflies over log2(n) stages.

    `a` and `b` are the two coordinate buffers, already bit-reversed and
    scaled. Passing (re, im) computes the forward transform; passing
    (im, re) flips the sign of every twiddle and computes the inverse, so
    both directions share this one routine.

    Twiddles are accumulated in double precision; results take the dtype of
    the buffers.
    """
    stride = 1
    while stride < n:
        wm = cispi(-1.0 / stride)

        for i in range(0, n, 2 * stride):
            w = (1.0, 0.0)

            for j in range(stride):
                idx0 = i + j
                idx1 = idx0 + stride

                p = (a[idx0], b[idx0])
                q = cmul(w, (a[idx1], b[idx1]))

                top = cadd(p, q)
                bottom = csub(p, q)
                a[idx0] = top[0]
                b[idx0] = top[1]
                a[idx1] = bottom[0]
                b[idx1] = bottom[1]

                w = cmul(w, wm)

        stride *= 2
