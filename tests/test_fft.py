"""
Tests for the recursive FFT kernel.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from SigProc.fft import (
    InvalidInputLength,
    fft,
    ifft,
    is_power_of_two,
    next_power_of_two,
    pad_to_power_of_two,
    validate_length,
)
from SigProc.dft import dft

TOL = 1e-9


class TestForwardTransform:
    """fft against known spectra and the numpy reference."""

    def test_length_one_returned_unchanged(self):
        """A single sample is its own transform."""
        for value in (3.5, -2 + 1j, 0):
            result = fft([value])
            assert result.shape == (1,)
            assert result[0] == value

    @pytest.mark.parametrize("n", [1, 2, 8, 256])
    def test_zeros(self, n):
        """All zeros in, all zeros out."""
        assert_allclose(fft(np.zeros(n)), np.zeros(n), atol=TOL)

    @pytest.mark.parametrize("n", [2, 4, 16, 128])
    def test_constant_signal(self, n):
        """Constant c puts N*c in bin 0 and nothing elsewhere."""
        c = 1.5 - 0.25j
        expected = np.zeros(n, dtype=complex)
        expected[0] = n * c
        assert_allclose(fft(np.full(n, c)), expected, atol=TOL)

    def test_impulse(self):
        """[1, 0, 0, 0] gives a flat spectrum."""
        assert_allclose(fft([1, 0, 0, 0]), [1, 1, 1, 1], atol=TOL)

    def test_single_tone(self):
        """exp(2*pi*i*3*n/N) lands entirely in bin 3."""
        n = 32
        x = np.exp(2j * np.pi * 3 * np.arange(n) / n)
        expected = np.zeros(n, dtype=complex)
        expected[3] = n
        assert_allclose(fft(x), expected, atol=1e-9)

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024])
    def test_matches_numpy(self, random_signal, n):
        """Agrees with numpy.fft.fft."""
        x = random_signal(n)
        assert_allclose(fft(x), np.fft.fft(x), atol=1e-9)

    def test_matches_naive_dft(self, random_signal):
        """Agrees with the direct O(N^2) sum."""
        x = random_signal(16)
        assert_allclose(fft(x), dft(x), atol=1e-9)

    def test_linearity(self, random_signal):
        """fft(a + alpha*b) == fft(a) + alpha*fft(b)."""
        a = random_signal(64)
        b = random_signal(64)
        alpha = 0.7 - 2.1j
        assert_allclose(fft(a + alpha * b), fft(a) + alpha * fft(b), atol=1e-9)


class TestTypeStability:
    """Output is complex128 no matter what goes in."""

    @pytest.mark.parametrize("signal", [[1], [1, 2], [1.0, 0.0, 0.0, 0.0], np.arange(8, dtype=np.int32)])
    def test_complex_output(self, signal):
        """Integer and real input still produce complex128."""
        assert fft(signal).dtype == np.complex128

    def test_input_not_modified(self, random_signal):
        """The caller's array is left alone."""
        x = random_signal(16)
        before = x.copy()
        fft(x)
        ifft(x)
        assert_allclose(x, before, atol=0)

    def test_fresh_output(self):
        """Length one output is a new array, not the input."""
        x = np.array([2 + 0j])
        out = fft(x)
        out[0] = 99
        assert x[0] == 2


class TestInverse:
    """ifft undoes fft."""

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 64])
    def test_round_trip(self, random_signal, n):
        """ifft(fft(x)) reproduces x."""
        x = random_signal(n)
        assert_allclose(ifft(fft(x)), x, atol=1e-9)

    def test_matches_numpy(self, random_signal):
        """Agrees with numpy.fft.ifft."""
        X = random_signal(32)
        assert_allclose(ifft(X), np.fft.ifft(X), atol=1e-9)

    def test_flat_spectrum_is_impulse(self):
        """Inverse of [1, 1, 1, 1] is the unit impulse."""
        assert_allclose(ifft([1, 1, 1, 1]), [1, 0, 0, 0], atol=TOL)


class TestLengthValidation:
    """Non power of two lengths are rejected before computing."""

    def test_length_three(self):
        """Length 3 raises InvalidInputLength."""
        with pytest.raises(InvalidInputLength):
            fft([1, 2, 3])

    def test_length_zero(self):
        """Empty input raises InvalidInputLength."""
        with pytest.raises(InvalidInputLength) as exc:
            fft([])
        assert exc.value.length == 0

    def test_error_is_value_error(self):
        """Callers catching ValueError also see the length error."""
        with pytest.raises(ValueError, match="not a power of two"):
            ifft(np.ones(6))

    def test_error_names_length(self):
        """Message and attribute carry the bad length."""
        with pytest.raises(InvalidInputLength) as exc:
            fft(np.ones(12))
        assert exc.value.length == 12
        assert "12" in str(exc.value)
        assert "16" in str(exc.value)

    def test_not_one_dimensional(self):
        """2-D input is a shape error, not a length error."""
        with pytest.raises(ValueError) as exc:
            fft(np.ones((4, 4)))
        assert not isinstance(exc.value, InvalidInputLength)

    def test_validate_length(self):
        """validate_length passes powers of two only."""
        for n in (1, 2, 4, 1024):
            validate_length(n)
        for n in (0, 3, 6, 1000):
            with pytest.raises(InvalidInputLength):
                validate_length(n)


class TestPadding:
    """Explicit zero padding to the next power of two."""

    def test_is_power_of_two(self):
        assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]

    def test_next_power_of_two(self):
        assert [next_power_of_two(n) for n in (1, 2, 3, 5, 8, 9)] == [1, 2, 4, 8, 8, 16]
        with pytest.raises(ValueError):
            next_power_of_two(0)

    def test_pad_to_power_of_two(self):
        """Zeros appended at the end."""
        padded = pad_to_power_of_two([1, 2, 3])
        assert padded.dtype == np.complex128
        assert_allclose(padded, [1, 2, 3, 0])

    def test_pad_keeps_power_of_two_length(self):
        assert pad_to_power_of_two(np.ones(8)).size == 8

    def test_fft_with_pad(self):
        """pad=True transforms the zero padded signal."""
        x = [1, 2, 3, 4, 5]
        expected = np.fft.fft(np.array(x + [0, 0, 0]))
        assert_allclose(fft(x, pad=True), expected, atol=1e-9)

    def test_pad_empty_still_rejected(self):
        with pytest.raises(InvalidInputLength):
            fft([], pad=True)


class TestParallel:
    """Forking the top level halves gives the serial answer."""

    def test_parallel_matches_serial(self, random_signal):
        x = random_signal(256)
        serial = fft(x)
        parallel = fft(x, workers=2, parallel_threshold=16)
        assert_allclose(parallel, serial, atol=0)

    def test_parallel_inverse(self, random_signal):
        x = random_signal(128)
        X = fft(x, workers=4, parallel_threshold=2)
        assert_allclose(ifft(X, workers=4, parallel_threshold=2), x, atol=1e-9)

    def test_below_threshold_runs_serial(self, random_signal):
        """Small inputs ignore workers."""
        x = random_signal(8)
        assert_allclose(fft(x, workers=8), np.fft.fft(x), atol=1e-9)

    def test_parallel_length_one(self):
        assert_allclose(fft([5], workers=2, parallel_threshold=1), [5])
