# visuals/__init__.py
"""
Visual helpers for the FFT cross-correlation project.
Provides plotting and export utilities used by the CLI.
"""
from .plots import (
    plot_magnitude_spectrum,
    plot_correlation_surface,
    compare_and_save,
)
__all__ = [
    "plot_magnitude_spectrum",
    "plot_correlation_surface",
    "compare_and_save",
]
