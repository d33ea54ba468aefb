# io/image_handler.py
"""
Image read/write helpers using Pillow, plus the sampling interface the
correlation core consumes and the marker interface it emits.

Functions:
- read_image(path) -> (array, meta); (H x W) or (H x W x 3), dtype preserved
- save_image(path, array) -> writes image
- sample_intensity(image, x, y, channel=0) -> float
- read_intensity_grid(path, grid_size=None, channel=0) -> float64 N x N grid
- new_output_image(rows, cols=None) -> blank RGB uint8 image
- set_classified_sample(image, x, y, marker) -> None
- write_classification_image(path, classification) -> path

Pixel (x, y) is column x, row y, with (0, 0) at the upper left.
"""

from PIL import Image
import pillow_avif
import numpy as np
from typing import Optional, Sequence, Tuple

from core.errors import DomainError
from core.fft_engine import is_power_of_two
from core.classifier import Classification, to_rgb


def read_image(path: str) -> Tuple[np.ndarray, dict]:
    """
    Read an image from `path` and return (array, meta).
    - Returns RGB arrays of shape (H,W,3) or grayscale (H,W).
    - Meta contains mode and size. If image has alpha, meta includes 'has_alpha' and meta['alpha'] as a separate array.
    """
    img = Image.open(path)
    mode = img.mode
    # Convert to a consistent representation: preserve alpha separately if present
    if mode in ("RGBA", "LA") or ("transparency" in img.info):
        img = img.convert("RGBA")
        arr = np.asarray(img)
        meta = {"mode": "RGBA", "size": img.size, "has_alpha": True, "alpha": arr[..., 3]}
        return arr[..., :3], meta
    if mode.startswith("RGB") or mode == "P" or path.lower().endswith(".avif"):
        img = img.convert("RGB")
        return np.asarray(img), {"mode": "RGB", "size": img.size, "has_alpha": False}
    img = img.convert("L")
    return np.asarray(img), {"mode": "L", "size": img.size, "has_alpha": False}


def save_image(path: str, array: np.ndarray):
    """
    Save an image array to `path`. Accepts HxW (grayscale) or HxWx3 (RGB).
    Casts floats to uint8 by clipping to 0..255.
    """
    if not (array.ndim == 2 or (array.ndim == 3 and array.shape[2] == 3)):
        raise ValueError("save_image expects HxW or HxWx3 array.")

    if np.issubdtype(array.dtype, np.floating):
        arr = np.clip(array, 0.0, 255.0).astype(np.uint8)
    else:
        arr = array.astype(np.uint8)

    Image.fromarray(arr).save(path)


def sample_intensity(image: np.ndarray, x: int, y: int, channel: int = 0) -> float:
    """
    Single-channel intensity at column x, row y.
    For color images `channel` selects the band (0 = red); grayscale images ignore it.
    Raises DomainError for out-of-range coordinates or an undefined sample.
    """
    if image is None or image.ndim not in (2, 3):
        raise DomainError("sample_intensity expects an HxW or HxWxC image array.")
    H, W = image.shape[0], image.shape[1]
    if not (0 <= x < W and 0 <= y < H):
        raise DomainError(f"Pixel ({x}, {y}) outside image of size {W}x{H}.")
    if image.ndim == 3:
        if not (0 <= channel < image.shape[2]):
            raise DomainError(f"Channel {channel} not present in image with {image.shape[2]} channel(s).")
        value = float(image[y, x, channel])
    else:
        value = float(image[y, x])
    if not np.isfinite(value):
        raise DomainError(f"Undefined intensity sample at ({x}, {y}).")
    return value


def check_grid_dimensions(shape: Sequence[int], grid_size: Optional[int] = None) -> int:
    """
    Validate that `shape` is a square power-of-two size (and equals grid_size if given).
    Returns the side length.
    """
    H, W = int(shape[0]), int(shape[1])
    if H != W:
        raise DomainError(f"Image must be square, got {W}x{H}.")
    if not is_power_of_two(H):
        raise DomainError(f"Image size {H} is not a power of two.")
    if grid_size is not None and H != int(grid_size):
        raise DomainError(f"Image size {H} does not match requested grid size {grid_size}.")
    return H


def intensity_grid(image: np.ndarray, grid_size: Optional[int] = None, channel: int = 0) -> np.ndarray:
    """
    Float64 grid of one channel of `image` (row = y, col = x).
    Same samples as sample_intensity, taken as one array slice.
    """
    if image is None or image.ndim not in (2, 3):
        raise DomainError("intensity_grid expects an HxW or HxWxC image array.")
    check_grid_dimensions(image.shape[:2], grid_size)
    if image.ndim == 3:
        if not (0 <= channel < image.shape[2]):
            raise DomainError(f"Channel {channel} not present in image with {image.shape[2]} channel(s).")
        grid = image[..., channel].astype(np.float64)
    else:
        grid = image.astype(np.float64)
    if not np.all(np.isfinite(grid)):
        y, x = np.argwhere(~np.isfinite(grid))[0]
        raise DomainError(f"Undefined intensity sample at ({x}, {y}).")
    return grid


def read_intensity_grid(path: str, grid_size: Optional[int] = None, channel: int = 0) -> np.ndarray:
    arr, _ = read_image(path)
    return intensity_grid(arr, grid_size=grid_size, channel=channel)


def new_output_image(rows: int, cols: Optional[int] = None) -> np.ndarray:
    """Blank (black) RGB image, square unless cols is given."""
    cols = rows if cols is None else cols
    return np.zeros((int(rows), int(cols), 3), dtype=np.uint8)


def set_classified_sample(image: np.ndarray, x: int, y: int, marker: Sequence[int]) -> None:
    """
    Write an RGB marker at column x, row y of an H x W x 3 image.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError("set_classified_sample expects an HxWx3 image array.")
    H, W = image.shape[0], image.shape[1]
    if not (0 <= x < W and 0 <= y < H):
        raise DomainError(f"Pixel ({x}, {y}) outside image of size {W}x{H}.")
    if len(marker) != 3:
        raise ValueError("marker must be an (R, G, B) triple.")
    image[y, x] = [int(c) for c in marker]


def write_classification_image(path: str, classification: Classification) -> str:
    save_image(path, to_rgb(classification))
    return path
