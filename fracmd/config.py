"""
Render configuration.

A ``RenderConfig`` is immutable and validated when it is constructed, so
the render core can assume every value is in range.
"""

import math
import numbers
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict

from .core.complex_math import Complex
from .rendering.color import BLACK, Color


def _as_count(name: str, value: Any) -> int:
    """Return ``value`` as an int, accepting integral floats such as 4.0."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and math.isfinite(value) and float(value).is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


def default_thread_count() -> int:
    """Half the available cores, rounded up."""
    return max(1, math.ceil((os.cpu_count() or 1) * 0.5))


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a single render."""

    # Image parameters
    width: int = 1920
    height: int = 1680
    name: str = 'mandelbrot'

    # Performance
    threads: int = field(default_factory=default_thread_count)

    # View
    origin: Complex = Complex(-0.75, 0.0)
    zoom: float = 0.7

    # Supersampling
    samples: int = 1
    sample_spread: float = 2.0
    jitter: bool = True

    # Iteration
    limit: float = 256.0
    bail: float = 16.0

    # Coloring
    exponent: float = 1.0
    set_color: Color = BLACK

    def __post_init__(self):
        for key in ('width', 'height', 'threads', 'samples'):
            object.__setattr__(self, key, _as_count(key, getattr(self, key)))
        object.__setattr__(self, 'origin', Complex.parse(self.origin))
        if isinstance(self.set_color, dict):
            object.__setattr__(self, 'set_color', Color.from_dict(self.set_color))
        elif not isinstance(self.set_color, Color):
            object.__setattr__(self, 'set_color', Color.parse(self.set_color))
        self.validate()

    def validate(self):
        """Validate configuration parameters."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be positive")

        if self.threads < 1:
            raise ValueError("threads must be >= 1")

        if self.samples < 1:
            raise ValueError("samples must be >= 1")

        for key in ('zoom', 'sample_spread', 'limit', 'bail'):
            value = getattr(self, key)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{key} must be a positive finite number, got {value}")

        if not math.isfinite(self.exponent):
            raise ValueError("exponent must be finite")

        if not all(math.isfinite(float(v)) for v in (self.origin.re, self.origin.im)):
            raise ValueError("origin must be finite")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def with_overrides(self, **overrides: Any) -> 'RenderConfig':
        """Return a copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['origin'] = [float(self.origin.re), float(self.origin.im)]
        data['set_color'] = self.set_color.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RenderConfig':
        """Create configuration from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)
