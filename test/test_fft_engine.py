import numpy as np
import pytest
from core.errors import DomainError
from core.complex_number import Complex
from core.fft_engine import (
    is_power_of_two, forward_fft, inverse_fft, fft_shift, magnitude_spectrum
)

def test_is_power_of_two():
    assert [n for n in range(1, 70) if is_power_of_two(n)] == [1, 2, 4, 8, 16, 32, 64]
    assert not is_power_of_two(0)

@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 256])
def test_fft_ifft_roundtrip(n):
    rng = np.random.default_rng(n)
    x = rng.normal(size=n) + 1j * rng.normal(size=n)
    back = inverse_fft(forward_fft(x))
    assert back.shape == x.shape
    assert np.allclose(back, x, atol=1e-9)

@pytest.mark.parametrize("n", [2, 8, 128])
def test_matches_numpy(n):
    rng = np.random.default_rng(1)
    x = rng.normal(size=n) + 1j * rng.normal(size=n)
    assert np.allclose(forward_fft(x), np.fft.fft(x), atol=1e-9)
    assert np.allclose(inverse_fft(x), np.fft.ifft(x), atol=1e-9)

def test_zero_sequence():
    assert np.all(forward_fft(np.zeros(16)) == 0)

def test_constant_sequence_is_dc_only():
    c = 2.5 - 1.0j
    y = forward_fft(np.full(8, c))
    assert np.isclose(y[0], 8 * c)
    assert np.allclose(y[1:], 0, atol=1e-12)

def test_base_case_returns_copy():
    x = np.array([3.0 + 1.0j])
    y = forward_fft(x)
    assert y[0] == x[0]
    y[0] = 0
    assert x[0] == 3.0 + 1.0j

def test_accepts_complex_values():
    x = [Complex(1.0, 0.0), Complex(0.0, 1.0), Complex(-1.0, 0.0), Complex(0.0, -1.0)]
    expected = np.fft.fft([1, 1j, -1, -1j])
    assert np.allclose(forward_fft(x), expected)

def test_input_not_mutated():
    x = np.arange(8, dtype=np.complex128)
    before = x.copy()
    forward_fft(x)
    inverse_fft(x)
    assert np.array_equal(x, before)

@pytest.mark.parametrize("n", [3, 6, 12, 0])
def test_non_power_of_two_raises(n):
    with pytest.raises(DomainError):
        forward_fft(np.ones(n))
    with pytest.raises(DomainError):
        inverse_fft(np.ones(n))

def test_rows_transform_independently():
    rng = np.random.default_rng(2)
    rows = rng.normal(size=(4, 16))
    stacked = forward_fft(rows)
    for i in range(4):
        assert np.allclose(stacked[i], forward_fft(rows[i]))

def test_shift_and_magnitude():
    F = forward_fft(np.random.rand(4, 16))
    assert np.allclose(np.fft.ifftshift(fft_shift(F)), F)
    mag = magnitude_spectrum(F, log=True)
    assert mag.shape == F.shape
    assert np.all(mag >= 0)
