import numpy as np
import pytest

from fracmd.core.complex_math import ZERO
from fracmd.rendering.color import Color
from fracmd.rendering.coloring import COLORINGS, escape_bands, get_coloring, grayscale, hue_ramp


def test_hue_ramp_alpha_is_opaque():
    for s in (0.0, 10.0, 128.0, 256.0):
        color = hue_ramp(5.0, np.float32(s), ZERO, 256.0, 1.0)
        assert color.a == 1.0
        assert all(0.0 <= v <= 1.0 for v in color.to_tuple())


def test_hue_ramp_full_sum_is_hue_zero():
    # smooth_sum == limit gives hue 0: red at half saturation
    color = hue_ramp(256.0, np.float32(256.0), ZERO, 256.0, 1.0)
    np.testing.assert_allclose(color.to_tuple(), (1.0, 0.5, 0.5, 1.0), atol=1e-6)


def test_hue_ramp_chains_exponent_then_one_and_a_half():
    s = np.float32(100.0)
    base = (1.0 - 100.0 / 256.0) * 360.0
    expected = Color.from_hsv((base ** 0.5) ** 1.5, 0.5, 1.0, 1.0)
    color = hue_ramp(10.0, s, ZERO, 256.0, 0.5)
    np.testing.assert_allclose(color.to_tuple(), expected.to_tuple(), atol=1e-4)


def test_hue_ramp_has_saturation_half_value_one():
    color = hue_ramp(3.0, np.float32(1.5), ZERO, 256.0, 1.0)
    channels = sorted([color.r, color.g, color.b])
    assert channels[2] == pytest.approx(1.0)
    assert channels[0] == pytest.approx(0.5)


def test_grayscale():
    white = grayscale(0.0, np.float32(0.0), ZERO, 256.0, 1.0)
    assert white.to_tuple() == (1.0, 1.0, 1.0, 1.0)
    black = grayscale(256.0, np.float32(256.0), ZERO, 256.0, 1.0)
    assert black.r == 0.0


def test_escape_bands_uses_iteration_count():
    assert escape_bands(0.0, np.float32(0.0), ZERO, 256.0, 1.0) != escape_bands(
        64.0, np.float32(0.0), ZERO, 256.0, 1.0)


def test_get_coloring():
    assert get_coloring('HUE_RAMP') is hue_ramp
    assert set(COLORINGS) == {'hue_ramp', 'grayscale', 'escape_bands'}
    with pytest.raises(ValueError, match="Available"):
        get_coloring('rainbow')
