"""
Core package init for the FFT cross-correlation project.
Exposes public modules for import in tests and CLI.
"""
__all__ = ["errors", "complex_number", "fft_engine", "transform2d", "correlation", "classifier"]
