"""
Process-pool backend for rendering the full raster.

The pixel index range is split into contiguous chunks which are evaluated
independently on a fixed-size pool of worker processes. Every chunk builds
its own random generator inside the worker, so no mutable state is shared
between workers. The function set and the generator factory are sent to the
workers by pickling, so they must be module-level callables.
"""

import numpy as np
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config import RenderConfig
from ..core.coordinates import pixel_position
from ..core.fractal_types import FunctionSet
from ..rendering.sampling import Pixel, render_pixel

RngFactory = Callable[[], np.random.Generator]


def fresh_rng() -> np.random.Generator:
    """Default generator factory, seeded from OS entropy."""
    return np.random.default_rng()


@dataclass(frozen=True)
class ChunkSpec:
    """A contiguous run of linear pixel indices."""
    chunk_id: int
    start: int
    end: int

    def indices(self) -> range:
        return range(self.start, self.end)


@dataclass
class ChunkResult:
    """Pixels computed for one chunk, in index order."""
    chunk_id: int
    start: int
    pixels: List[Pixel]


def create_index_chunks(total: int, num_chunks: int) -> List[ChunkSpec]:
    """
    Split ``range(total)`` into at most ``num_chunks`` contiguous chunks.

    Args:
        total: Number of pixels
        num_chunks: Target number of chunks

    Returns:
        List of ChunkSpec objects covering every index exactly once
    """
    num_chunks = max(1, min(num_chunks, total))
    size, remainder = divmod(total, num_chunks)
    chunks = []
    start = 0
    for chunk_id in range(num_chunks):
        end = start + size + (1 if chunk_id < remainder else 0)
        chunks.append(ChunkSpec(chunk_id, start, end))
        start = end
    return chunks


def process_chunk(chunk: ChunkSpec, config: RenderConfig, functions: FunctionSet,
                  rng_factory: RngFactory) -> ChunkResult:
    """Evaluate every pixel of a chunk with a generator owned by this task."""
    rng = rng_factory() if config.jitter else None
    pixels = [render_pixel(i, config, functions, rng) for i in chunk.indices()]
    return ChunkResult(chunk.chunk_id, chunk.start, pixels)


def assemble_raster(chunk_results: List[ChunkResult], width: int, height: int) -> np.ndarray:
    """
    Scatter chunk results into a (height, width, 4) uint16 raster.

    Indices whose row falls outside [0, height) are dropped.
    """
    raster = np.zeros((height, width, 4), dtype=np.uint16)
    for chunk_result in chunk_results:
        for offset, pixel in enumerate(chunk_result.pixels):
            col, row = pixel_position(chunk_result.start + offset, height)
            if 0 <= row < height:
                raster[row, col] = pixel
    return raster


class ParallelRenderer:
    """Fixed-size process pool renderer."""

    def __init__(self, workers: int, chunks_per_worker: int = 4,
                 rng_factory: Optional[RngFactory] = None):
        """
        Initialize the renderer.

        Args:
            workers: Number of worker processes
            chunks_per_worker: How many chunks to queue per worker
            rng_factory: Builds one private generator per chunk
        """
        if workers < 1:
            raise ValueError("workers must be >= 1")
        if chunks_per_worker < 1:
            raise ValueError("chunks_per_worker must be >= 1")
        self.workers = workers
        self.chunks_per_worker = chunks_per_worker
        self.rng_factory = rng_factory or fresh_rng

    def render(self, config: RenderConfig, functions: FunctionSet) -> np.ndarray:
        """
        Render every pixel and assemble the raster.

        A single worker evaluates the chunks in the calling process.

        Args:
            config: Render configuration
            functions: Fractal function set

        Returns:
            uint16 array of shape (height, width, 4)
        """
        chunks = create_index_chunks(config.pixel_count, self.workers * self.chunks_per_worker)

        if self.workers == 1:
            results = [process_chunk(chunk, config, functions, self.rng_factory) for chunk in chunks]
            return assemble_raster(results, config.width, config.height)

        results: List[Optional[ChunkResult]] = [None] * len(chunks)
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                executor.submit(process_chunk, chunk, config, functions, self.rng_factory): chunk.chunk_id
                for chunk in chunks
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return assemble_raster(results, config.width, config.height)


def render(config: RenderConfig, functions: FunctionSet) -> np.ndarray:
    """Render ``config`` with ``functions`` on ``config.threads`` worker processes."""
    return ParallelRenderer(config.threads).render(config, functions)
