"""
core/classifier.py

Peak-relative classification of a correlation surface.

For every cell v, with max the global maximum of the surface and t the
peak threshold (0.9 by default):
  - v >= t * max   -> PEAK       (strong match)
  - v > 0          -> GRADED     intensity = round(255 * v / max)
  - otherwise      -> BACKGROUND (no match)

to_rgb() turns a Classification into an H x W x 3 uint8 image:
red for PEAK, gray (g, g, g) for GRADED, black for BACKGROUND.
"""

from typing import NamedTuple, Tuple
import numpy as np

from .errors import DomainError

BACKGROUND = 0
GRADED = 1
PEAK = 2

DEFAULT_PEAK_THRESHOLD = 0.9

PEAK_COLOR = (255, 0, 0)
BACKGROUND_COLOR = (0, 0, 0)


class Classification(NamedTuple):
    bands: np.ndarray       # int8, one of BACKGROUND / GRADED / PEAK
    intensity: np.ndarray   # uint8, 255 for PEAK, 0 for BACKGROUND
    max_value: float


def _validate_threshold(peak_threshold: float) -> float:
    t = float(peak_threshold)
    if not (0.0 < t <= 1.0):
        raise ValueError("peak_threshold must be in (0, 1].")
    return t


def classify(surface: np.ndarray, peak_threshold: float = DEFAULT_PEAK_THRESHOLD) -> Classification:
    """
    Classify every cell of `surface` relative to its maximum value.

    Parameters
    ----------
    surface : np.ndarray
        Real 2-D correlation surface.
    peak_threshold : float
        Fraction of the maximum at or above which a cell is in the peak band.

    Returns
    -------
    Classification
        bands, graded intensities and the maximum that was used.
    """
    t = _validate_threshold(peak_threshold)
    s = np.asarray(surface, dtype=np.float64)
    if s.ndim != 2 or s.size == 0:
        raise DomainError("classify expects a non-empty 2-D surface.")

    max_value = float(np.max(s))
    peak = s >= t * max_value
    graded = ~peak & (s > 0)

    bands = np.full(s.shape, BACKGROUND, dtype=np.int8)
    bands[graded] = GRADED
    bands[peak] = PEAK

    # graded cells only exist when max_value > 0
    intensity = np.zeros(s.shape, dtype=np.uint8)
    if np.any(graded):
        ratio = s[graded] / max_value
        intensity[graded] = np.clip(np.floor(255.0 * ratio + 0.5), 0, 255).astype(np.uint8)
    intensity[peak] = 255

    return Classification(bands=bands, intensity=intensity, max_value=max_value)


def marker_at(classification: Classification, row: int, col: int) -> Tuple[int, int, int]:
    """RGB marker for one cell."""
    band = int(classification.bands[row, col])
    if band == PEAK:
        return PEAK_COLOR
    if band == GRADED:
        g = int(classification.intensity[row, col])
        return (g, g, g)
    return BACKGROUND_COLOR


def to_rgb(classification: Classification) -> np.ndarray:
    """Render a Classification as an H x W x 3 uint8 array."""
    bands = classification.bands
    rgb = np.zeros(bands.shape + (3,), dtype=np.uint8)
    graded = bands == GRADED
    for c in range(3):
        rgb[..., c][graded] = classification.intensity[graded]
    rgb[bands == PEAK] = PEAK_COLOR
    return rgb
