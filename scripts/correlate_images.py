"""
Correlate two images and mark where they match best.

Reads two square, power-of-two sized images of equal size, samples one
channel of each (red by default), computes the FFT cross-correlation
surface and writes into a fresh results directory
(files named fftcorr_<image A>_t-<threshold>_<desc>.png):
- classification   red = peak band, gray = graded, black = no match
- surface          correlation surface (zero shift centered)
- spectrum         log magnitude spectrum of image A
- comparison       A | B | classification
- parameters.txt   the parameters of the run, peak value and shift
If any write fails the run directory is removed.

Usage (from project root):
python -m scripts.correlate_images return.png pulse.png --threshold 0.9
"""

import argparse
import logging
import shutil
import sys
from typing import Optional

from core.errors import DomainError
from core.transform2d import forward_2d
from core.correlation import cross_correlate, find_peak, peak_shift, pad_for_linear
from core.classifier import classify, to_rgb, DEFAULT_PEAK_THRESHOLD
from io_utils.image_handler import read_image, intensity_grid, write_classification_image
from io_utils.file_utils import make_run_dirname, make_result_filename, save_parameters_txt
from visuals.plots import plot_magnitude_spectrum, plot_correlation_surface, compare_and_save

PROJECT_NAME = "fftcorr"


def process_pair(
    path_a: str,
    path_b: str,
    outdir: str = "results",
    grid_size: Optional[int] = None,
    peak_threshold: float = DEFAULT_PEAK_THRESHOLD,
    channel: int = 0,
    linear: bool = False,
) -> dict:
    arr_a, _ = read_image(path_a)
    arr_b, _ = read_image(path_b)

    grid_a = intensity_grid(arr_a, grid_size=grid_size, channel=channel)
    grid_b = intensity_grid(arr_b, grid_size=grid_size, channel=channel)
    if grid_a.shape != grid_b.shape:
        raise DomainError(f"Image sizes differ: {grid_a.shape} vs {grid_b.shape}.")

    if linear:
        grid_a = pad_for_linear(grid_a)
        grid_b = pad_for_linear(grid_b)

    surface = cross_correlate(grid_a, grid_b)
    classification = classify(surface, peak_threshold=peak_threshold)
    row, col, peak_value = find_peak(surface)
    dy, dx = peak_shift(surface)
    spectrum_a = forward_2d(grid_a)
    classification_rgb = to_rgb(classification)

    record = {
        "image_a": path_a,
        "image_b": path_b,
        "grid_size": grid_a.shape[0],
        "channel": channel,
        "peak_threshold": peak_threshold,
        "linear": linear,
        "peak_value": peak_value,
        "peak_row": row,
        "peak_col": col,
        "shift_dy": dy,
        "shift_dx": dx,
    }

    run_dir = make_run_dirname(PROJECT_NAME, path_a, path_b, outdir=outdir)

    def _name(desc: str) -> str:
        return make_result_filename(PROJECT_NAME, path_a, desc, peak_threshold, outdir=run_dir)

    # a failed write removes the whole run directory
    try:
        class_path = write_classification_image(_name("classification"), classification)
        surface_path = plot_correlation_surface(surface, out_path=_name("surface"))
        spectrum_path = plot_magnitude_spectrum(spectrum_a, out_path=_name("spectrum"))
        compare_path = compare_and_save(arr_a, arr_b, classification_rgb, out_path=_name("comparison"))
        save_parameters_txt(run_dir, record)
    except OSError:
        shutil.rmtree(run_dir, ignore_errors=True)
        raise

    record.update({
        "run_dir": run_dir,
        "classification_path": class_path,
        "surface_path": surface_path,
        "spectrum_path": spectrum_path,
        "comparison_path": compare_path,
    })
    return record


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="FFT cross-correlation of two equally sized images.",
    )
    parser.add_argument("image_a", help="Reference image (square, power-of-two size)")
    parser.add_argument("image_b", help="Image correlated against image_a")
    parser.add_argument("--outdir", default="results", help="Parent directory for run outputs")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Required image size; default is the size of image_a")
    parser.add_argument("--threshold", type=float, default=DEFAULT_PEAK_THRESHOLD,
                        help="Fraction of the peak value marking the peak band (default 0.9)")
    parser.add_argument("--channel", type=int, default=0,
                        help="Color channel sampled from RGB images (0 = red)")
    parser.add_argument("--linear", action="store_true",
                        help="Zero-pad to twice the size for linear instead of circular correlation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("Correlating:", args.image_a, "with", args.image_b)
    try:
        rec = process_pair(
            args.image_a,
            args.image_b,
            outdir=args.outdir,
            grid_size=args.grid_size,
            peak_threshold=args.threshold,
            channel=args.channel,
            linear=args.linear,
        )
    except (DomainError, ValueError, OSError) as e:
        print("Error:", e, file=sys.stderr)
        return 1

    print("max =", rec["peak_value"], "at", (rec["peak_row"], rec["peak_col"]),
          "shift:", (rec["shift_dy"], rec["shift_dx"]))
    print("Done. Results in:", rec["run_dir"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
