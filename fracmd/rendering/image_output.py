"""
Image export for rendered rasters.

Rasters are (height, width, 4) uint16 arrays. PNG and TIFF keep the full
16 bits per channel and are written with OpenCV; 8-bit formats go through
Pillow. Render metadata is stored in a JSON sidecar next to the image.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import cv2
import numpy as np
from PIL import Image

from .. import __version__
from ..config import RenderConfig

logger = logging.getLogger(__name__)


@dataclass
class RenderMetadata:
    """Metadata for fractal renders."""

    fractal_type: str
    coloring: str
    resolution: tuple  # width, height
    config: Dict[str, Any]

    render_time_seconds: float
    threads: int

    timestamp: str = ""
    software_version: str = __version__
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Set default timestamp if not provided."""
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RenderMetadata':
        return cls(**data)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> 'RenderMetadata':
        data = json.loads(json_str)
        data['resolution'] = tuple(data['resolution'])
        return cls.from_dict(data)


def _format_number(value: float) -> str:
    return f"{value:g}"


def default_output_path(config: RenderConfig, directory: Union[str, Path] = 'out') -> Path:
    """
    Build the default output path for a render.

    The name encodes the tag, resolution, zoom and sampling settings, e.g.
    ``out/mandelbrot_1920x1680-0.7_s1-2.png``.
    """
    filename = (f"{config.name}_{config.width}x{config.height}-{_format_number(config.zoom)}"
                f"_s{config.samples}-{_format_number(config.sample_spread)}.png")
    return Path(directory) / filename


class ImageExporter:
    """Write rasters to disk."""

    def __init__(self):
        self.supported_formats = {
            '.png': self._save_16bit,
            '.tiff': self._save_16bit,
            '.tif': self._save_16bit,
            '.jpg': self._save_8bit,
            '.jpeg': self._save_8bit,
            '.bmp': self._save_8bit,
            '.webp': self._save_8bit,
            '.npy': self._save_raw,
        }

    def save_image(self, raster: np.ndarray, filepath: Union[str, Path],
                   metadata: Optional[RenderMetadata] = None) -> Path:
        """
        Save a raster to file, with an optional metadata sidecar.

        Args:
            raster: uint16 array of shape (height, width, 4)
            filepath: Output file path; the suffix selects the format
            metadata: Render metadata to store as <stem>.json

        Returns:
            The path written
        """
        filepath = Path(filepath)
        suffix = filepath.suffix.lower()

        if suffix not in self.supported_formats:
            supported = ', '.join(self.supported_formats.keys())
            raise ValueError(f"Unsupported format '{suffix}'. Supported: {supported}")

        raster = self._prepare_raster(raster)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        save_method = self.supported_formats[suffix]
        save_method(raster, filepath)
        logger.info(f"Saved image: {filepath} ({raster.shape[1]}x{raster.shape[0]})")

        if metadata:
            json_path = filepath.with_suffix('.json')
            json_path.write_text(metadata.to_json())
            logger.info(f"Saved metadata: {json_path}")

        return filepath

    def _prepare_raster(self, raster: np.ndarray) -> np.ndarray:
        """Validate the raster shape and dtype."""
        if raster.ndim != 3 or raster.shape[2] != 4:
            raise ValueError(f"Expected RGBA raster (H, W, 4), got {raster.shape}")
        if raster.dtype != np.uint16:
            raise ValueError(f"Expected uint16 raster, got {raster.dtype}")
        return raster

    def _save_16bit(self, raster: np.ndarray, filepath: Path) -> None:
        bgra = cv2.cvtColor(raster, cv2.COLOR_RGBA2BGRA)
        if not cv2.imwrite(str(filepath), bgra):
            raise OSError(f"Could not write image: {filepath}")

    def _save_8bit(self, raster: np.ndarray, filepath: Path) -> None:
        image = Image.fromarray((raster >> 8).astype(np.uint8))
        if filepath.suffix.lower() in ('.jpg', '.jpeg'):
            image = image.convert('RGB')
            image.save(filepath, quality=95, optimize=True)
        else:
            image.save(filepath)

    def _save_raw(self, raster: np.ndarray, filepath: Path) -> None:
        np.save(filepath, raster)


def load_image(filepath: Union[str, Path]) -> np.ndarray:
    """Read a raster written by ``ImageExporter`` back as (H, W, 4) RGBA."""
    filepath = Path(filepath)
    if filepath.suffix.lower() == '.npy':
        return np.load(filepath)
    bgra = cv2.imread(str(filepath), cv2.IMREAD_UNCHANGED)
    if bgra is None:
        raise OSError(f"Could not read image: {filepath}")
    return cv2.cvtColor(bgra, cv2.COLOR_BGRA2RGBA)
