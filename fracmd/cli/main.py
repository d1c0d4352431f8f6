"""
Command-line interface for fractal generation.
"""

import click
import sys
import logging
import time
from pathlib import Path

from .. import __version__
from ..api import FractalRenderer
from ..core.fractal_types import FractalRegistry
from ..io.config import BUILTIN_PRESETS, load_job
from ..rendering.coloring import COLORINGS
from ..rendering.image_output import default_output_path

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name='fracmd')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress most output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    fracmd - supersampled escape-time fractal renderer.
    """
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO,
                            format='%(levelname)s: %(message)s')

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose


@main.command()
@click.option('--width', '-w', type=int, help='Image width [1920]')
@click.option('--height', '-h', type=int, help='Image height [1680]')
@click.option('--name', '-n', help='Name used for the output file [mandelbrot]')
@click.option('--threads', '-t', type=int, help='Worker processes [half the CPUs]')
@click.option('--origin', '-o', help='View center as "re,im" [-0.75,0]')
@click.option('--zoom', '-z', type=float, help='Zoom factor [0.7]')
@click.option('--samples', '-s', type=int, help='Samples per pixel [1]')
@click.option('--sampled', 'sample_spread', type=float, help='Jitter spread divisor [2.0]')
@click.option('--limit', '-l', type=float, help='Iteration limit [256]')
@click.option('--bail', '-b', type=float, help='Squared escape radius [16]')
@click.option('--cexp', '-c', 'exponent', type=float, help='Color exponent [1.0]')
@click.option('--set-color', help='Color of points in the set as "r,g,b,a" [0,0,0,255]')
@click.option('--fractal', type=click.Choice(sorted(FractalRegistry.list_fractals())),
              help='Fractal formula [mandelbrot]')
@click.option('--coloring', type=click.Choice(sorted(COLORINGS)), help='Coloring function [hue_ramp]')
@click.option('--no-jitter', is_flag=True, help='Disable sub-pixel jitter')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON configuration file')
@click.option('--preset', help='Configuration preset to use')
@click.option('--output', type=click.Path(dir_okay=False), help='Output path [out/<generated name>.png]')
@click.pass_context
def render(ctx, config_file, preset, output, no_jitter, **kwargs):
    """
    Render a single fractal image.
    """
    try:
        overrides = dict(kwargs)
        if no_jitter:
            overrides['jitter'] = False
        job = load_job(config_file, preset, overrides)
        config = job.config

        output_path = Path(output) if output else default_output_path(config)
        click.echo(f"Now processing {output_path} with {config.threads} threads...")

        start_time = time.time()
        renderer = FractalRenderer(config, fractal=job.fractal, coloring=job.coloring)
        renderer.render_to_file(output_path)
        elapsed_ms = int((time.time() - start_time) * 1000)

        message = f"Finished in: {elapsed_ms}ms!"
        logger.info(f"fracmd rendered {output_path}")
        click.echo(message)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        if ctx.obj.get('verbose'):
            import traceback
            traceback.print_exc()
        sys.exit(1)


@main.command(name='list')
def list_options():
    """List available fractals, colorings and presets."""
    click.echo("Fractals:")
    for name, description in FractalRegistry.list_fractals().items():
        click.echo(f"  {name:<14} {description}")

    click.echo("Colorings:")
    for name, func in COLORINGS.items():
        summary = (func.__doc__ or '').strip().splitlines()[0] if func.__doc__ else ''
        click.echo(f"  {name:<14} {summary}")

    click.echo("Presets:")
    for name in BUILTIN_PRESETS:
        click.echo(f"  {name}")


if __name__ == '__main__':
    main()
