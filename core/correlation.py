"""
core/correlation.py

FFT-based cross-correlation of two equally sized real intensity grids.

Pipeline:
  1) forward_2d of both grids (real input, zero imaginary part)
  2) product = specA * conj(specB)      (correlation, not convolution)
  3) inverse_2d(product)
  4) keep the real part -> correlation surface

The correlation is circular: no zero-padding is applied here. Callers that
need linear correlation pad both grids first, e.g. with pad_for_linear().

Also provided:
- find_peak / peak_shift: location of the surface maximum
- circular_convolve / linear_convolve: 1-D convolution with the same engine
"""

import logging
from typing import Tuple
import numpy as np

from .errors import DomainError
from .fft_engine import forward_fft, inverse_fft, as_complex_sequence
from .transform2d import forward_2d, inverse_2d

logger = logging.getLogger(__name__)


def _as_real_grid(grid, name: str) -> np.ndarray:
    g = np.asarray(grid)
    if np.iscomplexobj(g):
        raise DomainError(f"{name} must be a real intensity grid.")
    g = g.astype(np.float64)
    if g.ndim != 2:
        raise DomainError(f"{name} must be a 2-D grid, got {g.ndim} dimension(s).")
    if not np.all(np.isfinite(g)):
        raise DomainError(f"{name} contains undefined (NaN/Inf) samples.")
    return g


def cross_correlate(grid_a, grid_b) -> np.ndarray:
    """
    Circular cross-correlation surface of grid_a against grid_b.

    surface[i, j] = sum_{m,n} a[m, n] * b[m - i, n - j]   (indices mod N)

    so when grid_a is grid_b shifted by (di, dj) the maximum lands at (di, dj).
    Raises DomainError for mismatched shapes or non power-of-two sizes.
    """
    a = _as_real_grid(grid_a, "grid_a")
    b = _as_real_grid(grid_b, "grid_b")
    if a.shape != b.shape:
        raise DomainError(f"Grid shapes differ: {a.shape} vs {b.shape}.")

    spec_a = forward_2d(a)
    spec_b = forward_2d(b)
    product = spec_a * np.conj(spec_b)
    surface = np.real(inverse_2d(product))
    logger.debug("cross_correlate: shape=%s max=%g", surface.shape, float(surface.max()))
    return surface


def find_peak(surface: np.ndarray) -> Tuple[int, int, float]:
    """
    Return (row, col, value) of the surface maximum.
    Ties go to the first maximum in row-major order.
    """
    s = np.asarray(surface, dtype=np.float64)
    if s.ndim != 2 or s.size == 0:
        raise DomainError("find_peak expects a non-empty 2-D surface.")
    row, col = np.unravel_index(int(np.argmax(s)), s.shape)
    return int(row), int(col), float(s[row, col])


def peak_shift(surface: np.ndarray) -> Tuple[int, int]:
    """
    Peak location as a signed circular shift (dy, dx).
    Offsets past the half size wrap to negative values.
    """
    row, col, _ = find_peak(surface)
    M, N = np.shape(surface)
    dy = row - M if row > M // 2 else row
    dx = col - N if col > N // 2 else col
    return dy, dx


def pad_for_linear(grid) -> np.ndarray:
    """
    Zero-pad an N x N grid into the top-left corner of a 2N x 2N grid.
    Correlating padded grids gives linear (non wrapping) correlation.
    """
    g = np.asarray(grid)
    if g.ndim != 2:
        raise DomainError(f"pad_for_linear expects a 2-D grid, got {g.ndim} dimension(s).")
    M, N = g.shape
    out = np.zeros((2 * M, 2 * N), dtype=np.result_type(g.dtype, np.float64))
    out[:M, :N] = g
    return out


def circular_convolve(x, y) -> np.ndarray:
    """
    Circular convolution of two equal-length 1-D sequences (power of two).
    """
    a = as_complex_sequence(x)
    b = as_complex_sequence(y)
    if a.ndim != 1 or b.ndim != 1:
        raise DomainError("circular_convolve expects 1-D sequences.")
    if a.shape != b.shape:
        raise DomainError(f"Sequence lengths differ: {a.shape[0]} vs {b.shape[0]}.")
    return inverse_fft(forward_fft(a) * forward_fft(b))


def linear_convolve(x, y) -> np.ndarray:
    """
    Linear convolution: both sequences are zero-padded to twice their
    length before the circular convolution. The result has length 2N.
    """
    a = as_complex_sequence(x)
    b = as_complex_sequence(y)
    if a.ndim != 1 or b.ndim != 1:
        raise DomainError("linear_convolve expects 1-D sequences.")
    a = np.concatenate([a, np.zeros_like(a)])
    b = np.concatenate([b, np.zeros_like(b)])
    return circular_convolve(a, b)
