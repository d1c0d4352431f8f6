import pytest

from fracmd.core.complex_math import Complex, ZERO
from fracmd.core.fractal_types import (
    DEFAULT_FUNCTIONS, FractalRegistry, FunctionSet, burning_ship, cubic, quadratic,
    reciprocal, tricorn,
)
from fracmd.rendering.coloring import grayscale, hue_ramp


def test_default_function_set_is_mandelbrot():
    c = Complex(0.5, -0.25)
    assert DEFAULT_FUNCTIONS.init(c) == c
    assert DEFAULT_FUNCTIONS.cmap(c) == c
    assert DEFAULT_FUNCTIONS.iterate(ZERO, c) == c
    assert DEFAULT_FUNCTIONS.color is hue_ramp


def test_iteration_formulas():
    one_i = Complex(1.0, 1.0)
    assert quadratic(one_i, ZERO) == Complex(0.0, 2.0)
    assert cubic(one_i, ZERO) == Complex(-2.0, 2.0)
    assert burning_ship(Complex(-1.0, -1.0), ZERO) == Complex(0.0, 2.0)
    assert tricorn(one_i, ZERO) == Complex(0.0, -2.0)


def test_reciprocal_domain_transform():
    assert reciprocal(Complex(2.0, 0.0)) == Complex(0.5, 0.0)


def test_registry_lists_builtins():
    names = FractalRegistry.list_fractals()
    assert {'mandelbrot', 'multibrot3', 'burning_ship', 'tricorn', 'inverse'} <= set(names)


def test_registry_create_with_coloring():
    functions = FractalRegistry.create('Mandelbrot', 'grayscale')
    assert isinstance(functions, FunctionSet)
    assert functions.color is grayscale
    assert FractalRegistry.create('inverse').cmap is reciprocal


def test_registry_unknown_name():
    with pytest.raises(ValueError, match="Unknown fractal type"):
        FractalRegistry.create('koch')


def test_function_sets_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_FUNCTIONS.iterate = cubic
