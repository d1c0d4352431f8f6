import pytest

from fracmd.config import RenderConfig
from fracmd.core.fractal_types import mandelbrot_functions


@pytest.fixture
def tiny_config():
    """4x4 single-sample render of the default view with jitter off."""
    return RenderConfig(
        width=4, height=4, threads=1, origin=(-0.75, 0.0), zoom=0.7,
        samples=1, jitter=False, limit=256.0, bail=16.0,
    )


@pytest.fixture
def functions():
    return mandelbrot_functions()
