"""
Unit Tests for the FFT Core Module

Validates the unitary radix-2 FFT against scipy.fft (norm="ortho") and
checks the algebraic properties of the transform pair.

Test Coverage:
    - Complex arithmetic primitives
    - Bit reversal: table, involution, permutation
    - ComplexArray container
    - Forward / inverse: known responses, scipy agreement, precision
    - Properties: round trip, Parseval, linearity
    - Validation and purity

Run:
    pytest tests/test_fft_core.py -v
"""

import sys
import os
import math

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from scipy import fft as scipy_fft

from dsp_fft.fft_core import (
    cadd,
    csub,
    cmul,
    cabs,
    cispi,
    ComplexArray,
    REV6,
    MAX_LENGTH,
    rev_bits24,
    bit_reverse_indices,
    is_power_of_two,
    validate_length,
    butterfly,
    forward,
    inverse,
    forward_batch,
    inverse_batch,
    fft,
    ifft,
)

ATOL = {np.float32: 1e-4, np.float64: 1e-10}


def random_sequence(n, dtype=np.float64, seed=0):
    rng = np.random.default_rng(seed)
    return ComplexArray.from_parts(rng.standard_normal(n), rng.standard_normal(n), dtype=dtype)


def naive_reverse(i, bits):
    if bits == 0:
        return 0
    return int(f"{i:0{bits}b}"[::-1], 2)


class TestComplexMath:
    """Scalar complex arithmetic."""

    def test_add_sub(self):
        assert cadd((1.0, 2.0), (3.0, -4.0)) == (4.0, -2.0)
        assert csub((1.0, 2.0), (3.0, -4.0)) == (-2.0, 6.0)

    def test_mul_matches_python_complex(self):
        x, y = (1.5, -2.0), (0.25, 3.0)
        expected = complex(*x) * complex(*y)
        assert cmul(x, y) == pytest.approx((expected.real, expected.imag))

    def test_abs(self):
        assert cabs((3.0, 4.0)) == pytest.approx(5.0)

    def test_cispi(self):
        assert cispi(0.0) == pytest.approx((1.0, 0.0))
        assert cispi(0.5) == pytest.approx((0.0, 1.0), abs=1e-15)
        assert cispi(-1.0) == pytest.approx((-1.0, 0.0), abs=1e-15)
        re, im = cispi(0.3)
        assert math.hypot(re, im) == pytest.approx(1.0)


class TestBitReversal:
    """Table-driven 24-bit reversal."""

    def test_table(self):
        assert len(REV6) == 64
        assert REV6[1] == 0x20
        assert REV6[0x3F] == 0x3F
        for i in range(64):
            assert REV6[i] == naive_reverse(i, 6)

    def test_table_is_read_only(self):
        with pytest.raises(ValueError):
            REV6[0] = 1

    def test_matches_naive(self):
        for bits in [1, 3, 6, 7, 12, 13]:
            for i in range(0, 1 << bits, max(1, (1 << bits) // 64)):
                assert rev_bits24(i, bits) == naive_reverse(i, bits)

    def test_full_width(self):
        assert rev_bits24(1, 24) == 1 << 23
        assert rev_bits24((1 << 24) - 1, 24) == (1 << 24) - 1
        assert rev_bits24(0, 0) == 0

    def test_involution_exhaustive(self):
        """bitrev(bitrev(i)) == i for every index, bits 1..20."""
        for bits in range(1, 21):
            perm = bit_reverse_indices(1 << bits)
            np.testing.assert_array_equal(perm[perm], np.arange(1 << bits))

    def test_involution_wide(self):
        """Sampled indices for bits 21..24."""
        rng = np.random.default_rng(0)
        for bits in range(21, 25):
            for i in rng.integers(0, 1 << bits, size=2000):
                i = int(i)
                j = rev_bits24(i, bits)
                assert 0 <= j < (1 << bits)
                assert rev_bits24(j, bits) == i

    def test_permutation_is_bijection(self):
        perm = bit_reverse_indices(1024)
        assert sorted(perm.tolist()) == list(range(1024))
        np.testing.assert_array_equal(bit_reverse_indices(8), [0, 4, 2, 6, 1, 5, 3, 7])


class TestComplexArray:
    """Structure-of-arrays container."""

    def test_zeros(self):
        x = ComplexArray(8)
        assert len(x) == 8
        assert x.dtype == np.float32
        assert x.re.shape == (8,) and x.im.shape == (8,)
        assert not x.re.any() and not x.im.any()

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_dtype(self, dtype):
        x = ComplexArray.zeros(4, dtype)
        assert x.re.dtype == dtype
        assert x.im.dtype == dtype

    def test_unsupported_dtype(self):
        with pytest.raises(ValueError):
            ComplexArray(4, np.int32)
        with pytest.raises(ValueError):
            ComplexArray(4, np.float16)

    def test_negative_length(self):
        with pytest.raises(ValueError):
            ComplexArray(-1)

    def test_from_parts(self):
        x = ComplexArray.from_parts([1.0, 2.0], [3.0, 4.0])
        assert x.dtype == np.float64
        np.testing.assert_array_equal(x.re, [1.0, 2.0])
        np.testing.assert_array_equal(x.im, [3.0, 4.0])

        y = ComplexArray.from_parts(np.ones(4, dtype=np.float32))
        assert y.dtype == np.float32
        np.testing.assert_array_equal(y.im, np.zeros(4))

    def test_from_parts_shape_mismatch(self):
        with pytest.raises(ValueError):
            ComplexArray.from_parts([1.0, 2.0], [1.0])
        with pytest.raises(ValueError):
            ComplexArray.from_parts(np.ones((2, 2)))

    def test_complex_conversion(self):
        z = np.array([1 + 2j, -3 + 0.5j, 0j, 4j])
        x = ComplexArray.from_complex(z)
        np.testing.assert_array_equal(x.to_complex(), z)
        assert ComplexArray.from_complex(z, dtype=np.float32).to_complex().dtype == np.complex64

    def test_copy_is_independent(self):
        x = ComplexArray.from_parts([1.0, 2.0])
        y = x.copy()
        y.re[0] = 10.0
        assert x.re[0] == 1.0

    def test_magnitude_and_energy(self):
        x = ComplexArray.from_parts([3.0, 0.0], [4.0, 1.0])
        np.testing.assert_allclose(x.magnitude(), [5.0, 1.0])
        assert x.energy() == pytest.approx(26.0)


class TestForward:
    """Forward transform."""

    def test_impulse(self):
        x = ComplexArray.from_parts([1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0], dtype=np.float32)
        X = forward(x)
        np.testing.assert_allclose(X.re, [0.5, 0.5, 0.5, 0.5], atol=1e-6)
        np.testing.assert_allclose(X.im, [0.0, 0.0, 0.0, 0.0], atol=1e-6)

    def test_dc(self):
        x = ComplexArray.from_parts([1.0, 1.0, 1.0, 1.0], dtype=np.float32)
        X = forward(x)
        np.testing.assert_allclose(X.re, [2.0, 0.0, 0.0, 0.0], atol=1e-6)
        np.testing.assert_allclose(X.im, [0.0, 0.0, 0.0, 0.0], atol=1e-6)

    def test_single_tone(self):
        """exp(2*pi*i*k0*n/N) concentrates in bin k0 with magnitude sqrt(N)."""
        n, k0 = 16, 3
        z = np.exp(2j * np.pi * k0 * np.arange(n) / n)
        X = fft(z)
        expected = np.zeros(n, dtype=complex)
        expected[k0] = np.sqrt(n)
        np.testing.assert_allclose(X, expected, atol=1e-10)

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 256, 1024, 4096])
    def test_matches_scipy(self, n):
        x = random_sequence(n, seed=n)
        X = forward(x)
        expected = scipy_fft.fft(x.to_complex(), norm="ortho")
        np.testing.assert_allclose(X.to_complex(), expected, atol=1e-10)

    def test_identity_length_one(self):
        for dtype in (np.float32, np.float64):
            x = ComplexArray.from_parts([0.75], [-1.25], dtype=dtype)
            X = forward(x)
            assert X.re[0] == 0.75 and X.im[0] == -1.25
            Y = inverse(x)
            assert Y.re[0] == 0.75 and Y.im[0] == -1.25

    def test_single_precision(self):
        x = random_sequence(512, dtype=np.float32, seed=1)
        X = forward(x)
        assert X.dtype == np.float32
        assert X.re.dtype == np.float32
        expected = scipy_fft.fft(x.to_complex().astype(np.complex128), norm="ortho")
        np.testing.assert_allclose(X.to_complex(), expected, atol=1e-4)

    def test_input_not_mutated(self):
        x = random_sequence(64)
        before = x.copy()
        _ = forward(x)
        _ = inverse(x)
        np.testing.assert_array_equal(x.re, before.re)
        np.testing.assert_array_equal(x.im, before.im)

    def test_returns_new_sequence(self):
        x = random_sequence(8)
        X = forward(x)
        assert X is not x
        assert not np.shares_memory(X.re, x.re)


class TestInverse:
    """Inverse transform via swapped butterfly roles."""

    @pytest.mark.parametrize("n", [2, 8, 128, 2048])
    def test_matches_scipy(self, n):
        x = random_sequence(n, seed=100 + n)
        expected = scipy_fft.ifft(x.to_complex(), norm="ortho")
        np.testing.assert_allclose(inverse(x).to_complex(), expected, atol=1e-10)

    def test_impulse(self):
        x = ComplexArray.from_parts([1.0, 0.0, 0.0, 0.0], dtype=np.float32)
        X = inverse(x)
        np.testing.assert_allclose(X.re, [0.5, 0.5, 0.5, 0.5], atol=1e-6)
        np.testing.assert_allclose(X.im, [0.0, 0.0, 0.0, 0.0], atol=1e-6)

    def test_sign_convention(self):
        """A tone in bin 1 maps to exp(+2*pi*i*n/N)/sqrt(N)."""
        n = 8
        X = np.zeros(n, dtype=complex)
        X[1] = 1.0
        expected = np.exp(2j * np.pi * np.arange(n) / n) / np.sqrt(n)
        np.testing.assert_allclose(ifft(X), expected, atol=1e-10)

    def test_butterfly_role_swap(self):
        """Running the butterfly on (im, re) equals conj(forward(conj(x)))."""
        x = random_sequence(32, seed=7)
        a, b = x.im.copy(), x.re.copy()
        perm = bit_reverse_indices(32)
        a_rev, b_rev = np.empty_like(a), np.empty_like(b)
        a_rev[perm], b_rev[perm] = a / np.sqrt(32), b / np.sqrt(32)
        butterfly(a_rev, b_rev, 32)
        result = b_rev + 1j * a_rev

        expected = np.conj(scipy_fft.fft(np.conj(x.to_complex()), norm="ortho"))
        np.testing.assert_allclose(result, expected, atol=1e-10)


class TestProperties:
    """Algebraic properties of the unitary pair."""

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    @pytest.mark.parametrize("n", [1, 4, 32, 1024])
    def test_round_trip(self, dtype, n):
        x = random_sequence(n, dtype=dtype, seed=n)
        atol = ATOL[dtype]

        y = inverse(forward(x))
        np.testing.assert_allclose(y.re, x.re, atol=atol)
        np.testing.assert_allclose(y.im, x.im, atol=atol)

        z = forward(inverse(x))
        np.testing.assert_allclose(z.re, x.re, atol=atol)
        np.testing.assert_allclose(z.im, x.im, atol=atol)

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_parseval(self, dtype):
        x = random_sequence(2048, dtype=dtype, seed=3)
        rtol = 1e-5 if dtype == np.float32 else 1e-10
        assert forward(x).energy() == pytest.approx(x.energy(), rel=rtol)
        assert inverse(x).energy() == pytest.approx(x.energy(), rel=rtol)

    def test_linearity(self):
        x = random_sequence(256, seed=11)
        y = random_sequence(256, seed=12)
        a, b = 2.5 - 1j, -0.75 + 0.5j

        combined = ComplexArray.from_complex(a * x.to_complex() + b * y.to_complex())
        lhs = forward(combined).to_complex()
        rhs = a * forward(x).to_complex() + b * forward(y).to_complex()
        np.testing.assert_allclose(lhs, rhs, atol=1e-10)

    def test_nan_propagates(self):
        x = ComplexArray.from_parts([np.nan, 0.0, 0.0, 0.0])
        X = forward(x)
        assert np.isnan(X.re).all()


class TestValidation:
    """Length precondition."""

    def test_is_power_of_two(self):
        assert is_power_of_two(1)
        assert is_power_of_two(1024)
        assert not is_power_of_two(0)
        assert not is_power_of_two(6)
        assert not is_power_of_two(-4)

    def test_validate_length(self):
        assert validate_length(1) == 0
        assert validate_length(2) == 1
        assert validate_length(MAX_LENGTH) == 24
        with pytest.raises(ValueError):
            validate_length(MAX_LENGTH * 2)

    @pytest.mark.parametrize("n", [0, 3, 6, 100, 1000])
    def test_rejects_bad_length(self, n):
        x = ComplexArray(n, np.float64)
        with pytest.raises(ValueError, match="power of 2"):
            forward(x)
        with pytest.raises(ValueError, match="power of 2"):
            inverse(x)

    def test_bit_reverse_indices_rejects_bad_length(self):
        with pytest.raises(ValueError):
            bit_reverse_indices(12)

    def test_fft_rejects_bad_length(self):
        with pytest.raises(ValueError):
            fft(np.ones(5))


class TestBatch:
    """Independent transforms over a batch."""

    def test_forward_batch(self):
        xs = [random_sequence(n, seed=n) for n in (4, 16, 64)]
        Xs = forward_batch(xs)
        assert len(Xs) == 3
        for x, X in zip(xs, Xs):
            np.testing.assert_allclose(X.to_complex(), forward(x).to_complex())

    def test_inverse_batch_round_trip(self):
        xs = [random_sequence(32, seed=s) for s in range(4)]
        ys = inverse_batch(forward_batch(xs))
        for x, y in zip(xs, ys):
            np.testing.assert_allclose(y.to_complex(), x.to_complex(), atol=1e-10)

    def test_batch_validates_each(self):
        with pytest.raises(ValueError):
            forward_batch([random_sequence(4), ComplexArray(3, np.float64)])


class TestNumpyInterface:
    """fft / ifft on plain numpy arrays."""

    def test_real_input(self):
        x = np.random.default_rng(5).standard_normal(128)
        np.testing.assert_allclose(fft(x), scipy_fft.fft(x, norm="ortho"), atol=1e-10)

    def test_round_trip(self):
        rng = np.random.default_rng(6)
        z = rng.standard_normal(64) + 1j * rng.standard_normal(64)
        np.testing.assert_allclose(ifft(fft(z)), z, atol=1e-10)

    def test_single_precision_output(self):
        z = np.ones(16, dtype=np.complex64)
        X = fft(z, dtype=np.float32)
        assert X.dtype == np.complex64
        assert abs(X[0] - 4.0) < 1e-5
