"""Accelerometer CSV loading, merge sort with sums, SVG drawing and result charts."""

__version__ = "0.1.0"