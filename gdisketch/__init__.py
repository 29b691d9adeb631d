"""Sketching workspace for lines, circles and rotated ellipses on a grid, with a rubber-band drawer."""

__version__ = "0.1.0"