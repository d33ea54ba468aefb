import numpy as np
from core.transform2d import forward_2d, inverse_2d
from core.correlation import cross_correlate

def test_fft_hermitian_symmetry():
    img = np.random.rand(32,32)
    F = forward_2d(img)
    M,N = F.shape
    i_idx = (-np.arange(M)) % M
    j_idx = (-np.arange(N)) % N
    conj_pair = np.conj(F[i_idx[:,None], j_idx[None,:]])
    assert np.allclose(F, conj_pair, atol=1e-6)

def test_parseval():
    img = np.random.rand(16, 16)
    F = forward_2d(img)
    assert np.isclose(np.sum(img ** 2), np.sum(np.abs(F) ** 2) / img.size)

def test_inverse_of_real_spectrum_is_real():
    img = np.random.rand(16, 16)
    back = inverse_2d(forward_2d(img))
    assert np.max(np.abs(np.imag(back))) < 1e-9

def test_correlation_dc_term():
    A = np.random.rand(8, 8)
    B = np.random.rand(8, 8)
    # sum over all shifts factorizes into sum(A) * sum(B)
    assert np.isclose(cross_correlate(A, B).sum(), A.sum() * B.sum())
