import numpy as np
import pytest
from core.errors import DomainError
from core.transform2d import forward_2d, inverse_2d

@pytest.mark.parametrize("n", [1, 2, 8, 32])
def test_roundtrip(n):
    rng = np.random.default_rng(n)
    g = rng.normal(size=(n, n)) + 1j * rng.normal(size=(n, n))
    assert np.allclose(inverse_2d(forward_2d(g)), g, atol=1e-9)

def test_matches_numpy_fft2():
    g = np.random.rand(16, 16)
    assert np.allclose(forward_2d(g), np.fft.fft2(g), atol=1e-8)
    assert np.allclose(inverse_2d(g), np.fft.ifft2(g), atol=1e-8)

def test_rows_then_columns():
    g = np.random.rand(8, 8)
    rows = np.array([np.fft.fft(r) for r in g])
    expected = np.array([np.fft.fft(c) for c in rows.T]).T
    assert np.allclose(forward_2d(g), expected)

def test_input_not_mutated():
    g = np.random.rand(8, 8)
    before = g.copy()
    forward_2d(g)
    assert np.array_equal(g, before)

def test_non_power_of_two_raises():
    with pytest.raises(DomainError):
        forward_2d(np.zeros((6, 6)))
    with pytest.raises(DomainError):
        inverse_2d(np.zeros((12, 12)))

def test_non_square_or_wrong_rank_raises():
    with pytest.raises(DomainError):
        forward_2d(np.zeros((8, 16)))
    with pytest.raises(DomainError):
        forward_2d(np.zeros(8))
