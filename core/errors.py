"""
core/errors.py

Error types raised by the correlation core.
"""


class DomainError(ValueError):
    """
    Raised when an input lies outside the domain the transforms accept:
    a length or grid dimension that is not a power of two, grids of
    mismatched shape, or an undefined intensity sample.
    """
