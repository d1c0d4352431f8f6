import numpy as np
import pytest

from fracmd.core.complex_math import Complex
from fracmd.core.coordinates import normalize_coords, pixel_position, pixel_step


def test_corners_and_center_of_square_image():
    assert normalize_coords(0, 0, 4, 4, 1.0) == Complex(-1.0, -1.0)
    assert normalize_coords(2, 2, 4, 4, 1.0) == Complex(0.0, 0.0)
    assert normalize_coords(4, 4, 4, 4, 1.0) == Complex(1.0, 1.0)


def test_non_square_image_is_aspect_corrected():
    assert normalize_coords(8, 4, 8, 4, 1.0) == Complex(1.0, 0.5)


def test_zoom_divides_both_axes():
    z = normalize_coords(0, 0, 8, 4, 2.0)
    assert z.re == np.float32(-0.5)
    assert z.im == np.float32(-0.25)


def test_positions_outside_grid_are_not_clamped():
    z = normalize_coords(-4, 8, 4, 4, 1.0)
    assert z.re == -3.0
    assert z.im == 3.0


def test_pixel_step():
    assert pixel_step(4, 4, 1.0) == Complex(0.5, 0.5)
    d = pixel_step(8, 4, 2.0)
    assert d.re == np.float32(0.125)
    assert d.im == np.float32(0.125)


def test_pixel_position_is_column_major():
    assert pixel_position(0, 3) == (0, 0)
    assert pixel_position(1, 3) == (0, 1)
    assert pixel_position(3, 3) == (1, 0)


@pytest.mark.parametrize("width, height", [(1, 1), (4, 3), (3, 4), (7, 5)])
def test_pixel_position_round_trip(width, height):
    for i in range(width * height):
        col, row = pixel_position(i, height)
        assert col * height + row == i
        assert 0 <= row < height
        assert 0 <= col < width
