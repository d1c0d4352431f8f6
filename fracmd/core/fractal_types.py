"""
Fractal function sets and the registry used to select them.

A fractal is described by four pure functions bundled in a
``FunctionSet``: the iteration step, the orbit initializer, a domain
transform applied to c before iterating, and a coloring function.
Swapping any of them changes the fractal without touching the renderer.
"""

import numpy as np
from typing import Callable, Dict, NamedTuple, Optional, Tuple
import logging

from .complex_math import Complex
from ..rendering.coloring import ColorFunction, get_coloring, hue_ramp

logger = logging.getLogger(__name__)


class FunctionSet(NamedTuple):
    """The four functions that define a fractal."""
    iterate: Callable[[Complex, Complex], Complex]
    init: Callable[[Complex], Complex]
    cmap: Callable[[Complex], Complex]
    color: ColorFunction


def identity(c: Complex) -> Complex:
    return c


def quadratic(z: Complex, c: Complex) -> Complex:
    return z * z + c


def cubic(z: Complex, c: Complex) -> Complex:
    return z * z * z + c


def burning_ship(z: Complex, c: Complex) -> Complex:
    folded = Complex(np.abs(z.re), np.abs(z.im))
    return folded * folded + c


def tricorn(z: Complex, c: Complex) -> Complex:
    conj = z.conjugate()
    return conj * conj + c


def reciprocal(c: Complex) -> Complex:
    return c.reciprocal()


def mandelbrot_functions(color: ColorFunction = hue_ramp) -> FunctionSet:
    """The classic z^2 + c Mandelbrot set, starting from z0 = c."""
    return FunctionSet(iterate=quadratic, init=identity, cmap=identity, color=color)


def multibrot3_functions(color: ColorFunction = hue_ramp) -> FunctionSet:
    return FunctionSet(iterate=cubic, init=identity, cmap=identity, color=color)


def burning_ship_functions(color: ColorFunction = hue_ramp) -> FunctionSet:
    return FunctionSet(iterate=burning_ship, init=identity, cmap=identity, color=color)


def tricorn_functions(color: ColorFunction = hue_ramp) -> FunctionSet:
    return FunctionSet(iterate=tricorn, init=identity, cmap=identity, color=color)


def inverse_functions(color: ColorFunction = hue_ramp) -> FunctionSet:
    """Mandelbrot set viewed through the 1/c domain transform."""
    return FunctionSet(iterate=quadratic, init=identity, cmap=reciprocal, color=color)


class FractalRegistry:
    """Registry of named function-set factories."""

    _fractals: Dict[str, Tuple[Callable[..., FunctionSet], str]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., FunctionSet], description: str) -> None:
        """
        Register a function-set factory.

        Args:
            name: Identifier used on the command line and in config files
            factory: Callable taking a coloring function and returning a FunctionSet
            description: One-line description
        """
        cls._fractals[name.lower()] = (factory, description)
        logger.debug(f"Registered fractal type: {name}")

    @classmethod
    def get(cls, name: str) -> Callable[..., FunctionSet]:
        entry = cls._fractals.get(name.lower())
        if entry is None:
            available = ', '.join(cls._fractals.keys())
            raise ValueError(f"Unknown fractal type '{name}'. Available: {available}")
        return entry[0]

    @classmethod
    def list_fractals(cls) -> Dict[str, str]:
        """Names and descriptions of the registered fractals."""
        return {name: description for name, (_, description) in cls._fractals.items()}

    @classmethod
    def create(cls, name: str, coloring: Optional[str] = None) -> FunctionSet:
        """
        Build the function set for a fractal.

        Args:
            name: Registered fractal name
            coloring: Optional coloring name; defaults to the hue ramp

        Returns:
            FunctionSet ready to render
        """
        factory = cls.get(name)
        if coloring is None:
            return factory()
        return factory(get_coloring(coloring))


FractalRegistry.register('mandelbrot', mandelbrot_functions, "Mandelbrot set, z^2 + c")
FractalRegistry.register('multibrot3', multibrot3_functions, "Cubic Multibrot set, z^3 + c")
FractalRegistry.register('burning_ship', burning_ship_functions, "Burning Ship, (|Re z| + i|Im z|)^2 + c")
FractalRegistry.register('tricorn', tricorn_functions, "Tricorn, conj(z)^2 + c")
FractalRegistry.register('inverse', inverse_functions, "Mandelbrot set in the 1/c plane")

DEFAULT_FUNCTIONS = mandelbrot_functions()
