"""
Floating point RGBA color model.

Colors hold four float32 channels in linear light unless they have been
explicitly gamma-encoded with ``to_srgb``.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union


def _srgb_encode(value: np.float32) -> np.float32:
    if value <= 0.0031308:
        return np.float32(value * np.float32(12.92))
    return np.float32(np.float32(1.055) * np.power(value, np.float32(1.0 / 2.4)) - np.float32(0.055))


def _srgb_decode(value: np.float32) -> np.float32:
    if value <= 0.04045:
        return np.float32(value / np.float32(12.92))
    return np.float32(np.power((value + np.float32(0.055)) / np.float32(1.055), np.float32(2.4)))


@dataclass(frozen=True)
class Color:
    """RGBA color with float32 components."""
    r: np.float32
    g: np.float32
    b: np.float32
    a: np.float32 = 1.0

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            object.__setattr__(self, name, np.float32(getattr(self, name)))

    @classmethod
    def splat(cls, value: float) -> 'Color':
        """Color with all four channels set to ``value``."""
        return cls(value, value, value, value)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float, alpha: float = 1.0) -> 'Color':
        """
        Build a color from HSV components.

        Args:
            hue: Hue in degrees; wrapped into [0, 360)
            saturation: Saturation in [0, 1]
            value: Value in [0, 1]
            alpha: Alpha in [0, 1]

        Returns:
            Color in the same space as the inputs
        """
        h = np.float32(hue) % np.float32(360.0)
        s = np.float32(saturation)
        v = np.float32(value)
        chroma = v * s
        x = chroma * (np.float32(1.0) - abs((h / np.float32(60.0)) % np.float32(2.0) - np.float32(1.0)))
        m = v - chroma

        if h < 60:
            r, g, b = chroma, x, 0.0
        elif h < 120:
            r, g, b = x, chroma, 0.0
        elif h < 180:
            r, g, b = 0.0, chroma, x
        elif h < 240:
            r, g, b = 0.0, x, chroma
        elif h < 300:
            r, g, b = x, 0.0, chroma
        else:
            r, g, b = chroma, 0.0, x

        return cls(r + m, g + m, b + m, alpha)

    @classmethod
    def parse(cls, value: Union[str, Sequence[float]]) -> 'Color':
        """Parse "r,g,b,a" (each 0-255) into a color with channels in [0, 1]."""
        if isinstance(value, str):
            parts = [p.strip() for p in value.split(',')]
        else:
            parts = list(value)
        if len(parts) != 4:
            raise ValueError(f"Expected 'r,g,b,a', got {value!r}")
        try:
            channels = [float(p) / 255.0 for p in parts]
        except (TypeError, ValueError):
            raise ValueError(f"Invalid color value: {value!r}") from None
        return cls(*channels)

    def to_srgb(self) -> 'Color':
        """Gamma-encode the color channels; alpha is left as is."""
        return Color(_srgb_encode(self.r), _srgb_encode(self.g), _srgb_encode(self.b), self.a)

    def to_linear(self) -> 'Color':
        """Inverse of ``to_srgb``."""
        return Color(_srgb_decode(self.r), _srgb_decode(self.g), _srgb_decode(self.b), self.a)

    def with_alpha(self, alpha: float) -> 'Color':
        return Color(self.r, self.g, self.b, alpha)

    def to_tuple(self) -> Tuple[np.float32, np.float32, np.float32, np.float32]:
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in ('r', 'g', 'b', 'a')}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> 'Color':
        """Build a color from float channels in [0, 1]; alpha defaults to 1."""
        unknown = set(data) - {'r', 'g', 'b', 'a'}
        if unknown:
            raise ValueError(f"Unknown color channels: {', '.join(sorted(unknown))}")
        try:
            return cls(float(data['r']), float(data['g']), float(data['b']), float(data.get('a', 1.0)))
        except KeyError as e:
            raise ValueError(f"Missing color channel: {e.args[0]}") from None
        except (TypeError, ValueError):
            raise ValueError(f"Invalid color value: {data!r}") from None

    def __add__(self, other: 'Color') -> 'Color':
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __mul__(self, other: Union['Color', float]) -> 'Color':
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        k = np.float32(other)
        return Color(self.r * k, self.g * k, self.b * k, self.a * k)

    def __truediv__(self, scalar: float) -> 'Color':
        k = np.float32(scalar)
        return Color(self.r / k, self.g / k, self.b / k, self.a / k)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
TRANSPARENT = Color.splat(0.0)
