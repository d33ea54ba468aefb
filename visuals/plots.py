"""
visuals/plots.py

Plotting utilities for spectra, correlation surfaces and classification results.

APIs:
- plot_magnitude_spectrum(F, out_path=None, is_shifted=False, log=True)
- plot_correlation_surface(surface, out_path=None, center=True)
- compare_and_save(image_a, image_b, classification_rgb, out_path=None, titles=None)

Notes:
- Raw exports (spectrum, surface) are written with Pillow; compare_and_save uses matplotlib.
- If out_path is None, functions return a normalized array (raw exports) or the Figure.
"""

from typing import Optional, Sequence
import os
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from core.fft_engine import magnitude_spectrum, fft_shift


# Helper to ensure outdir exists
def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path


def _normalize(a: np.ndarray) -> np.ndarray:
    """Min/max stretch to 0..1; constant or non-finite input maps to zeros."""
    a = np.asarray(a, dtype=np.float64)
    amin = float(np.nanmin(a))
    amax = float(np.nanmax(a))
    if np.isfinite(amin) and np.isfinite(amax) and amax > amin:
        return (a - amin) / (amax - amin)
    return np.zeros_like(a)


def _save_raw_array_image(out_path: Optional[str], arr: np.ndarray, log_scale: bool = False):
    """
    Save a 2D numeric array as a raw grayscale PNG. No Matplotlib involved.
    - complex input is reduced to its magnitude
    - log_scale: apply log1p before normalization (useful for magnitude spectrum)
    """
    if out_path is None:
        return None

    _ensure_outdir(out_path)

    a = np.array(arr, copy=True)
    if np.iscomplexobj(a):
        a = np.abs(a)
    if log_scale:
        a = np.log1p(np.abs(a))
    a = np.squeeze(a)
    if a.ndim != 2:
        raise ValueError("_save_raw_array_image expects a 2D array.")

    img_arr = np.clip(_normalize(a) * 255.0, 0, 255).astype(np.uint8)
    Image.fromarray(img_arr).save(out_path)
    return out_path


def plot_magnitude_spectrum(
    F: np.ndarray,
    out_path: Optional[str] = None,
    is_shifted: bool = False,
    log: bool = True,
):
    """
    Save raw magnitude spectrum image, DC centered.
    If out_path is None -> return the normalized 2D float array instead.
    """
    F_disp = F if is_shifted else fft_shift(F)

    if out_path is not None:
        return _save_raw_array_image(out_path, np.abs(F_disp), log_scale=bool(log))
    return _normalize(magnitude_spectrum(F_disp, log=log))


def plot_correlation_surface(
    surface: np.ndarray,
    out_path: Optional[str] = None,
    center: bool = True,
):
    """
    Save the correlation surface as grayscale PNG.
    center=True moves the zero-shift cell to the middle of the image.
    """
    s = fft_shift(surface) if center else np.asarray(surface)
    if out_path is not None:
        return _save_raw_array_image(out_path, s, log_scale=False)
    return _normalize(s)


def compare_and_save(
    image_a: np.ndarray,
    image_b: np.ndarray,
    classification_rgb: np.ndarray,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Image A | Image B | Classification, in one figure.
    """
    titles = list(titles) if titles else ["Image A", "Image B", "Correlation peak"]
    fig, axs = plt.subplots(1, 3, figsize=(15, 5))

    for ax, img, title in zip(axs, (image_a, image_b, classification_rgb), titles):
        if img.ndim == 2:
            ax.imshow(img, cmap="gray", interpolation="nearest")
        else:
            ax.imshow(img.astype(np.uint8), interpolation="nearest")
        ax.set_title(title)
        ax.axis("off")

    if out_path:
        _ensure_outdir(out_path)
        fig.savefig(out_path, dpi=150, bbox_inches="tight", pad_inches=0.05)
        plt.close(fig)
        return out_path
    return fig
