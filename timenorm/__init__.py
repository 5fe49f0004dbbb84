"""Normalise broken-down date/time values and convert them to Unix timestamps."""

__version__ = "0.1.0"
__all__ = ["model", "normalize"]