"""
Fixed-width complex arithmetic for the escape-time loop.

All values are stored as 32-bit floats so that renders are reproducible
regardless of the platform's native float width.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class Complex:
    """Immutable complex value with float32 components."""
    re: np.float32
    im: np.float32

    def __post_init__(self):
        object.__setattr__(self, 're', np.float32(self.re))
        object.__setattr__(self, 'im', np.float32(self.im))

    def __add__(self, other: 'Complex') -> 'Complex':
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: 'Complex') -> 'Complex':
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other: 'Complex') -> 'Complex':
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re
        )

    def abs_sq(self) -> np.float32:
        """Squared magnitude; used instead of abs() to avoid a square root."""
        return self.re * self.re + self.im * self.im

    def conjugate(self) -> 'Complex':
        return Complex(self.re, -self.im)

    def reciprocal(self) -> 'Complex':
        """Return 1/z. Zero maps to non-finite components."""
        with np.errstate(divide='ignore', invalid='ignore'):
            norm = self.abs_sq()
            return Complex(self.re / norm, -self.im / norm)

    def to_complex(self) -> complex:
        return complex(float(self.re), float(self.im))

    @classmethod
    def parse(cls, value: Union[str, Sequence[float], complex, 'Complex']) -> 'Complex':
        """
        Build a complex value from "re,im", a pair of numbers or a Python complex.

        Args:
            value: Value to convert

        Returns:
            Complex instance
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return cls(value.real, value.imag)
        if isinstance(value, str):
            parts = [p.strip() for p in value.split(',')]
        else:
            parts = list(value)
        if len(parts) != 2:
            raise ValueError(f"Expected 're,im', got {value!r}")
        try:
            return cls(float(parts[0]), float(parts[1]))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid complex value: {value!r}") from None

    def __str__(self) -> str:
        return f"{float(self.re)},{float(self.im)}"


ZERO = Complex(0.0, 0.0)
