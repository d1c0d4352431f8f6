"""
Coloring functions for escape-time results.

Each coloring is a pure function
``(iterations, smooth_sum, final_z, limit, exponent) -> Color``. The
renderer does not care which one is used, so alternative colorings can be
plugged into a function set without touching the pipeline.
"""

import numpy as np
from typing import Callable, Dict

from ..core.complex_math import Complex
from .color import Color

ColorFunction = Callable[[float, np.float32, Complex, float, float], Color]


def hue_ramp(iterations: float, smooth_sum: np.float32, final_z: Complex,
             limit: float, exponent: float) -> Color:
    """
    Default coloring: map the smoothing sum onto the hue wheel.

    The hue is raised to ``exponent`` and then to 1.5, two chained powers,
    so larger exponents wind the ramp around the wheel faster.
    """
    base = (np.float32(1.0) - smooth_sum / np.float32(limit)) * np.float32(360.0)
    hue = np.power(np.power(base, np.float32(exponent)), np.float32(1.5))
    return Color.from_hsv(hue, 0.5, 1.0, 1.0).with_alpha(1.0)


def grayscale(iterations: float, smooth_sum: np.float32, final_z: Complex,
              limit: float, exponent: float) -> Color:
    """Brightness ramp from the smoothing sum."""
    t = np.float32(1.0) - smooth_sum / np.float32(limit)
    value = np.power(np.clip(t, np.float32(0.0), np.float32(1.0)), np.float32(exponent))
    return Color(value, value, value, 1.0)


def escape_bands(iterations: float, smooth_sum: np.float32, final_z: Complex,
                 limit: float, exponent: float) -> Color:
    """Banded hue from the raw iteration count."""
    hue = np.float32(iterations) / np.float32(limit) * np.float32(360.0) * np.float32(exponent)
    return Color.from_hsv(hue, 0.75, 1.0, 1.0)


COLORINGS: Dict[str, ColorFunction] = {
    'hue_ramp': hue_ramp,
    'grayscale': grayscale,
    'escape_bands': escape_bands,
}


def get_coloring(name: str) -> ColorFunction:
    """Look up a coloring function by name."""
    coloring = COLORINGS.get(name.lower())
    if coloring is None:
        available = ', '.join(COLORINGS.keys())
        raise ValueError(f"Unknown coloring '{name}'. Available: {available}")
    return coloring
