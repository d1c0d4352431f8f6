import numpy as np
import pytest

from fracmd.rendering.color import BLACK, Color


def test_channels_are_float32():
    c = Color(0.1, 0.2, 0.3)
    assert all(isinstance(v, np.float32) for v in c.to_tuple())
    assert c.a == 1.0


@pytest.mark.parametrize("hue, expected", [
    (0.0, (1.0, 0.0, 0.0)),
    (120.0, (0.0, 1.0, 0.0)),
    (240.0, (0.0, 0.0, 1.0)),
    (60.0, (1.0, 1.0, 0.0)),
    (360.0, (1.0, 0.0, 0.0)),
    (720.0 + 120.0, (0.0, 1.0, 0.0)),
])
def test_from_hsv_primaries(hue, expected):
    c = Color.from_hsv(hue, 1.0, 1.0, 1.0)
    np.testing.assert_allclose((c.r, c.g, c.b), expected, atol=1e-6)


@pytest.mark.parametrize("hue", [0.0, 37.0, 150.0, 299.0, 359.9, 5000.0])
def test_from_hsv_zero_saturation_is_gray(hue):
    c = Color.from_hsv(hue, 0.0, 1.0, 1.0)
    assert c.r == c.g == c.b


def test_from_hsv_keeps_alpha():
    assert Color.from_hsv(10.0, 0.5, 1.0, 0.25).a == np.float32(0.25)


@pytest.mark.parametrize("value", [0.0, 0.001, 0.0031308, 0.04, 0.2, 0.5, 0.9, 1.0])
def test_srgb_round_trip(value):
    c = Color(value, value / 2, value / 3, 0.5)
    back = c.to_srgb().to_linear()
    np.testing.assert_allclose(back.to_tuple(), c.to_tuple(), atol=1e-5)


def test_srgb_leaves_alpha_alone():
    assert Color(0.5, 0.5, 0.5, 0.3).to_srgb().a == np.float32(0.3)


def test_srgb_known_value():
    assert Color.splat(0.5).to_srgb().r == pytest.approx(0.7353569, abs=1e-5)


def test_arithmetic():
    a = Color(0.1, 0.2, 0.3, 0.4)
    b = Color.splat(2.0)
    np.testing.assert_allclose((a + b).to_tuple(), (2.1, 2.2, 2.3, 2.4), rtol=1e-6)
    np.testing.assert_allclose((a * b).to_tuple(), (0.2, 0.4, 0.6, 0.8), rtol=1e-6)
    np.testing.assert_allclose((a * 3).to_tuple(), (0.3, 0.6, 0.9, 1.2), rtol=1e-6)
    np.testing.assert_allclose((a / 2).to_tuple(), (0.05, 0.1, 0.15, 0.2), rtol=1e-6)


def test_parse():
    assert Color.parse("0,0,0,255") == BLACK
    np.testing.assert_allclose(Color.parse([255, 51, 0, 255]).to_tuple(), (1.0, 0.2, 0.0, 1.0), rtol=1e-6)


@pytest.mark.parametrize("value", ["0,0,0", "a,b,c,d"])
def test_parse_rejects_bad_values(value):
    with pytest.raises(ValueError):
        Color.parse(value)


def test_dict_keeps_full_channel_precision():
    color = Color(0.123, 0.456, 0.789, 0.5)
    assert Color.from_dict(color.to_dict()) == color
    assert Color.from_dict({'r': 1.0, 'g': 0.0, 'b': 0.0}) == Color(1.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("value", [{'r': 1.0, 'g': 0.0}, {'r': 1, 'g': 0, 'b': 0, 'alpha': 1}, {'r': 'x', 'g': 0, 'b': 0}])
def test_from_dict_rejects_bad_values(value):
    with pytest.raises(ValueError):
        Color.from_dict(value)
