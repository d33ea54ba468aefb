# io/__init__.py
"""
I/O helpers package for the FFT cross-correlation project.
"""
from .image_handler import (
    read_image,
    save_image,
    sample_intensity,
    read_intensity_grid,
    intensity_grid,
    new_output_image,
    set_classified_sample,
    write_classification_image,
)
from .file_utils import make_run_dirname, make_result_filename, save_parameters_txt

__all__ = [
    "read_image",
    "save_image",
    "sample_intensity",
    "read_intensity_grid",
    "intensity_grid",
    "new_output_image",
    "set_classified_sample",
    "write_classification_image",
    "make_run_dirname",
    "make_result_filename",
    "save_parameters_txt",
]
