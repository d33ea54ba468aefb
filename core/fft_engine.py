'''
FFT engine.

Functions:
- is_power_of_two: size check used by every transform
- as_complex_sequence: convert Complex / complex / real input to a complex128 array
- forward_fft: recursive radix-2 Cooley-Tukey transform (no 1/N scaling)
- inverse_fft: conjugate -> forward_fft -> conjugate -> scale by 1/N
- fft_shift: wrapper around np.fft.fftshift (display only)
- magnitude_spectrum: log-scaled magnitude for visualization

forward_fft / inverse_fft transform along the last axis. A 1-D input is a
single sequence; a 2-D input is a stack of independent sequences (one per
row), transformed in one pass of the recursion.
'''

import logging
import numpy as np

from .errors import DomainError

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n >= 1 and (n & (n - 1)) == 0


def as_complex_sequence(x) -> np.ndarray:
    """
    Return a fresh complex128 array for x.
    Accepts numpy arrays, or (nested) sequences of Complex / complex / real values.
    """
    if isinstance(x, np.ndarray):
        return np.array(x, dtype=np.complex128, copy=True)
    return np.array(_to_builtin(x), dtype=np.complex128)


def _to_builtin(x):
    if isinstance(x, (list, tuple)):
        return [_to_builtin(v) for v in x]
    return complex(x)


def _fft_recursive(x: np.ndarray) -> np.ndarray:
    n = x.shape[-1]

    # base case
    if n == 1:
        return x.copy()

    # radix 2 Cooley-Tukey: any non power of two hits an odd length at some depth
    if n % 2 != 0:
        raise DomainError(f"FFT length {n} is not a power of two.")

    half = n // 2
    q = _fft_recursive(x[..., 0::2].copy())
    r = _fft_recursive(x[..., 1::2].copy())

    k = np.arange(half)
    kth = -2.0 * np.pi * k / n
    wk = np.cos(kth) + 1j * np.sin(kth)
    wr = wk * r

    y = np.empty(x.shape, dtype=np.complex128)
    y[..., :half] = q + wr
    y[..., half:] = q - wr
    return y


def forward_fft(x) -> np.ndarray:
    """
    Discrete Fourier transform of x along its last axis (no scaling).
    Raises DomainError if the length is not a power of two.
    """
    a = as_complex_sequence(x)
    if a.ndim == 0 or a.shape[-1] == 0:
        raise DomainError("FFT input must contain at least one sample.")
    logger.debug("forward_fft: shape=%s", a.shape)
    return _fft_recursive(a)


def inverse_fft(x) -> np.ndarray:
    """
    Inverse transform built from the forward one:
    conj -> forward_fft -> conj -> scale by 1/N.
    inverse_fft(forward_fft(x)) == x up to rounding.
    """
    a = as_complex_sequence(x)
    if a.ndim == 0 or a.shape[-1] == 0:
        raise DomainError("FFT input must contain at least one sample.")
    n = a.shape[-1]
    y = _fft_recursive(np.conj(a))
    return np.conj(y) * (1.0 / n)


def fft_shift(F: np.ndarray) -> np.ndarray:
    """Shift zero-frequency to center (wrapper)."""
    return np.fft.fftshift(F)


def magnitude_spectrum(F: np.ndarray, log: bool = True, eps: float = 1e-8) -> np.ndarray:
    """
    Return magnitude spectrum for visualization.
    If log is True, returns log1p(abs(F)+eps).
    """
    mag = np.abs(F)
    if log:
        return np.log1p(mag + eps)
    return mag
