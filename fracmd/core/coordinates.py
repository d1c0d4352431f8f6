"""Pixel to complex-plane coordinate mapping."""

import numpy as np
from typing import Tuple

from .complex_math import Complex


def normalize_coords(x: int, y: int, width: int, height: int, zoom: float) -> Complex:
    """
    Map a pixel position to the complex plane, centred on the origin.

    Both axes are normalized to [-1, 1] and divided by ``zoom``; the
    imaginary axis is additionally scaled by height/width so that zoom is
    isotropic on screen. Positions outside the grid are not clamped.
    """
    w = np.float32(width)
    h = np.float32(height)
    z = np.float32(zoom)
    nx = np.float32(2.0) * (np.float32(x) / w) - np.float32(1.0)
    ny = np.float32(2.0) * (np.float32(y) / h) - np.float32(1.0)
    return Complex(nx / z, ny * (h / w) / z)


def pixel_step(width: int, height: int, zoom: float) -> Complex:
    """Size of one pixel in the complex plane."""
    return normalize_coords(1, 1, width, height, zoom) - normalize_coords(0, 0, width, height, zoom)


def pixel_position(index: int, height: int) -> Tuple[int, int]:
    """
    Split a linear pixel index into (col, row).

    The index is column-major: consecutive indices walk down a column.
    """
    return index // height, index % height
