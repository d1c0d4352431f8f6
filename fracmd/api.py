"""
Main API classes for fractal generation.

This module ties the render core, the function-set registry and the image
exporter together behind one class.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .acceleration.parallel import ParallelRenderer
from .config import RenderConfig
from .core.fractal_types import FractalRegistry, FunctionSet
from .rendering.image_output import ImageExporter, RenderMetadata, default_output_path

logger = logging.getLogger(__name__)


class FractalRenderer:
    """Main fractal rendering engine."""

    def __init__(self, config: Optional[RenderConfig] = None,
                 functions: Optional[FunctionSet] = None,
                 fractal: Optional[str] = None, coloring: Optional[str] = None):
        """
        Initialize fractal renderer.

        Args:
            config: Rendering configuration (uses defaults if None)
            functions: Explicit function set; overrides ``fractal``/``coloring``
            fractal: Registered fractal name, or a label for ``functions``
            coloring: Registered coloring name, or a label for ``functions``
        """
        self.config = config or RenderConfig()
        self.config.validate()
        if functions is not None:
            # names only label the metadata of a caller-supplied function set
            self.fractal = fractal or 'custom'
            self.coloring = coloring or 'custom'
            self.functions = functions
        else:
            self.fractal = fractal or 'mandelbrot'
            self.coloring = coloring or 'hue_ramp'
            self.functions = FractalRegistry.create(self.fractal, coloring)
        self.backend = ParallelRenderer(self.config.threads)
        self.image_exporter = ImageExporter()
        self.last_render_time = 0.0

        logger.info(f"FractalRenderer initialized: {self.config.width}x{self.config.height}, "
                    f"threads={self.config.threads}, samples={self.config.samples}")

    def render(self) -> np.ndarray:
        """
        Render the configured fractal.

        Returns:
            uint16 RGBA raster of shape (height, width, 4)
        """
        logger.info(f"Starting render: {self.fractal} ({self.config.pixel_count} pixels)")
        start_time = time.time()

        raster = self.backend.render(self.config, self.functions)

        self.last_render_time = time.time() - start_time
        logger.info(f"Render complete: {self.last_render_time:.2f}s")
        return raster

    def render_to_file(self, output_path: Optional[Union[str, Path]] = None) -> RenderMetadata:
        """
        Render and save the image.

        Args:
            output_path: Destination; defaults to ``default_output_path``

        Returns:
            Metadata describing the render, also written next to the image
        """
        output_path = Path(output_path) if output_path else default_output_path(self.config)
        raster = self.render()
        metadata = self.build_metadata()
        self.image_exporter.save_image(raster, output_path, metadata)
        return metadata

    def build_metadata(self) -> RenderMetadata:
        return RenderMetadata(
            fractal_type=self.fractal,
            coloring=self.coloring,
            resolution=(self.config.width, self.config.height),
            config=self.config.to_dict(),
            render_time_seconds=self.last_render_time,
            threads=self.config.threads,
        )
