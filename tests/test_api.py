import numpy as np

from fracmd import FractalRenderer, RenderConfig, render as core_render
from fracmd.core.fractal_types import mandelbrot_functions
from fracmd.rendering.coloring import grayscale


def small_config(**kwargs):
    values = dict(width=6, height=4, threads=2, jitter=False, limit=32.0)
    values.update(kwargs)
    return RenderConfig(**values)


def test_render_returns_raster():
    raster = FractalRenderer(small_config()).render()
    assert raster.shape == (4, 6, 4)
    assert raster.dtype == np.uint16


def test_renderer_matches_core_render():
    config = small_config()
    np.testing.assert_array_equal(FractalRenderer(config).render(), core_render(config, mandelbrot_functions()))


def test_package_render_is_the_core_entry_point():
    import fracmd
    import fracmd.api
    from fracmd.acceleration import parallel

    assert fracmd.render is parallel.render
    assert not hasattr(fracmd.api, 'render')


def test_explicit_function_set_is_labelled_custom():
    functions = mandelbrot_functions(color=grayscale)
    metadata = FractalRenderer(small_config(), functions=functions).build_metadata()
    assert metadata.fractal_type == 'custom'
    assert metadata.coloring == 'custom'

    labelled = FractalRenderer(small_config(), functions=functions, fractal='my_set', coloring='gray')
    assert labelled.functions is functions
    assert labelled.build_metadata().fractal_type == 'my_set'
    assert labelled.build_metadata().coloring == 'gray'


def test_registered_names_are_recorded_by_default():
    metadata = FractalRenderer(small_config()).build_metadata()
    assert (metadata.fractal_type, metadata.coloring) == ('mandelbrot', 'hue_ramp')


def test_fractal_and_coloring_selection():
    renderer = FractalRenderer(small_config(), fractal='tricorn', coloring='grayscale')
    assert renderer.functions.color is grayscale
    assert renderer.build_metadata().fractal_type == 'tricorn'


def test_render_to_file(tmp_path):
    renderer = FractalRenderer(small_config())
    metadata = renderer.render_to_file(tmp_path / "out.png")
    assert (tmp_path / "out.png").exists()
    assert (tmp_path / "out.json").exists()
    assert metadata.resolution == (6, 4)
    assert metadata.config['width'] == 6
    assert metadata.render_time_seconds >= 0.0
