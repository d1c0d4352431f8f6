"""
Supersampled pixel evaluation.

Each pixel is evaluated ``samples`` times with a random sub-pixel offset.
Samples are gamma-encoded, squared, averaged and square-rooted, which
blends them as a root-mean-square rather than a plain linear mean.
"""

import numpy as np
from typing import Optional, Tuple

from ..config import RenderConfig
from ..core.coordinates import normalize_coords, pixel_position, pixel_step
from ..core.complex_math import Complex
from ..core.fractal_types import FunctionSet
from ..core.math_functions import escape_time
from .color import Color, TRANSPARENT

U16_MAX = np.float32(65535.0)

Pixel = Tuple[int, int, int, int]


def to_u16(color: Color) -> Pixel:
    """Square root each channel and scale into the 16-bit range."""
    with np.errstate(invalid='ignore'):
        channels = np.sqrt(np.array(color.to_tuple(), dtype=np.float32)) * U16_MAX
    channels = np.clip(np.nan_to_num(channels, nan=0.0), 0.0, U16_MAX)
    return tuple(int(v) for v in channels.astype(np.uint16))


def render_pixel(index: int, config: RenderConfig, functions: FunctionSet,
                 rng: Optional[np.random.Generator] = None) -> Pixel:
    """
    Compute the final 16-bit RGBA value of one pixel.

    Args:
        index: Column-major linear pixel index
        config: Render configuration
        functions: Fractal function set
        rng: Private random generator for the jitter offsets; may be None
            when ``config.jitter`` is off

    Returns:
        (r, g, b, a) tuple of 16-bit channel values
    """
    width, height = config.width, config.height
    d = pixel_step(width, height, config.zoom)
    col, row = pixel_position(index, height)
    spread = np.float32(config.sample_spread)
    set_sq = config.set_color * config.set_color

    jitter = config.jitter
    if jitter and rng is None:
        raise ValueError("A random generator is required when jitter is enabled")

    out = TRANSPARENT
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        for _ in range(config.samples):
            c = normalize_coords(col, row, width, height, config.zoom) + config.origin
            if jitter:
                jx = np.float32(rng.uniform(-1.0, 1.0))
                jy = np.float32(rng.uniform(-1.0, 1.0))
                c = Complex(c.re + d.re * (jx / spread), c.im + d.im * (jy / spread))
            c = functions.cmap(c)

            result = escape_time(c, functions, config.bail, config.limit)
            color = functions.color(result.iterations, result.smooth_sum, result.final_z,
                                    config.limit, config.exponent)
            color = color.to_srgb()

            if result.escaped:
                out = out + color * color
            else:
                out = out + set_sq

        out = out / config.samples
    return to_u16(out)
