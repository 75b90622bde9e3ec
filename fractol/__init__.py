"""Interactive Mandelbrot and Julia set explorer with helper utilities."""

__version__ = "0.1.0"