"""
Supersampled escape-time fractal rendering.

This library renders Mandelbrot-family fractals pixel by pixel with a
pluggable set of iteration, initialization, domain-transform and coloring
functions, jittered supersampling and a multi-threaded render backend.

Example usage:
    >>> from fracmd import RenderConfig, render, FractalRegistry
    >>> config = RenderConfig(width=320, height=280, samples=4)
    >>> raster = render(config, FractalRegistry.create('mandelbrot'))
"""

__version__ = "1.0.0"
__author__ = "fracmd developers"

from fracmd.core.complex_math import Complex
from fracmd.rendering.color import Color
from fracmd.config import RenderConfig
from fracmd.core.fractal_types import FractalRegistry, FunctionSet
from fracmd.acceleration.parallel import ParallelRenderer, render
from fracmd.rendering.image_output import ImageExporter
from fracmd.io.config import ConfigManager

# Main API class
from fracmd.api import FractalRenderer

__all__ = [
    "Complex",
    "Color",
    "RenderConfig",
    "FunctionSet",
    "FractalRegistry",
    "ParallelRenderer",
    "render",
    "FractalRenderer",
    "ImageExporter",
    "ConfigManager",
]
