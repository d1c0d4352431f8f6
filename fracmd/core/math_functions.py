"""
Core escape-time iteration.

This module runs the per-point escape loop used by every fractal formula.
The formula itself comes from a ``FunctionSet``; this code only owns the
bail-out test, the iteration cap and the smooth-coloring accumulator.
"""

import numpy as np
from typing import NamedTuple, TYPE_CHECKING

from .complex_math import Complex

if TYPE_CHECKING:
    from .fractal_types import FunctionSet


class EscapeResult(NamedTuple):
    """Outcome of iterating a single point."""
    iterations: float
    smooth_sum: np.float32
    final_z: Complex
    limit: float

    @property
    def escaped(self) -> bool:
        """True if the orbit left the bail-out radius before the cap."""
        return self.iterations < self.limit


def escape_time(c: Complex, functions: 'FunctionSet', bail: float, limit: float) -> EscapeResult:
    """
    Iterate ``functions.iterate`` from ``functions.init(c)`` until escape.

    Args:
        c: Point in the complex plane, already domain-transformed
        functions: Function set providing ``init`` and ``iterate``
        bail: Squared-magnitude escape threshold
        limit: Iteration cap

    Returns:
        EscapeResult with the iteration count, the exp(-|z|^2) smoothing
        sum and the final z
    """
    iterate = functions.iterate
    z = functions.init(c)
    i = 0.0
    s = np.float32(0.0)

    # Overflow/underflow in the smoothing term is an accepted approximation.
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        while z.abs_sq() < bail and i < limit:
            z = iterate(z, c)
            i += 1.0
            s = s + np.exp(-z.abs_sq())

    return EscapeResult(i, np.float32(s), z, limit)
