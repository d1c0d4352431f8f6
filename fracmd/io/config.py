"""
Configuration file handling.

Config files are JSON objects whose keys are ``RenderConfig`` fields plus
optional ``fractal`` and ``coloring`` names. A ``presets`` mapping may hold
named sets of overrides alongside the built-in presets.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import RenderConfig

logger = logging.getLogger(__name__)

SELECTION_KEYS = ('fractal', 'coloring')

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    'default': {},
    'preview': {'width': 480, 'height': 420, 'samples': 1, 'limit': 128.0},
    'seahorse': {'origin': [-0.745, 0.11], 'zoom': 40.0, 'samples': 4, 'limit': 1024.0},
    'elephant': {'origin': [0.28, 0.008], 'zoom': 60.0, 'samples': 4, 'limit': 1024.0},
}


@dataclass
class RenderJob:
    """A fully resolved render: configuration plus function-set selection."""
    config: RenderConfig
    fractal: str = 'mandelbrot'
    coloring: str = 'hue_ramp'


class ConfigManager:
    """Load config files and resolve presets into a ``RenderJob``."""

    def __init__(self, presets: Optional[Dict[str, Dict[str, Any]]] = None):
        self.presets = dict(BUILTIN_PRESETS)
        if presets:
            self.presets.update(presets)

    def load_config(self, filepath: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a JSON config file.

        Any ``presets`` section is merged into this manager's presets and
        removed from the returned dictionary.
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        try:
            data = json.loads(filepath.read_text())
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {filepath} must contain a JSON object")

        presets = data.pop('presets', {})
        if not isinstance(presets, dict):
            raise ValueError("'presets' must be a mapping of name to overrides")
        self.presets.update(presets)

        logger.info(f"Loaded config: {filepath}")
        return data

    def get_preset(self, name: str) -> Dict[str, Any]:
        preset = self.presets.get(name)
        if preset is None:
            available = ', '.join(self.presets.keys())
            raise ValueError(f"Unknown preset '{name}'. Available: {available}")
        return dict(preset)

    def build_job(self, data: Optional[Dict[str, Any]] = None, preset: Optional[str] = None,
                  overrides: Optional[Dict[str, Any]] = None) -> RenderJob:
        """
        Merge defaults, file values, a preset and explicit overrides.

        Later sources win: file values < preset < overrides. ``None``
        overrides are ignored.

        Args:
            data: Values loaded from a config file
            preset: Preset name
            overrides: Explicit values, e.g. from the command line

        Returns:
            RenderJob with a validated RenderConfig
        """
        merged: Dict[str, Any] = {}
        merged.update(data or {})
        if preset:
            merged.update(self.get_preset(preset))
            logger.info(f"Using preset: {preset}")
        merged.update({k: v for k, v in (overrides or {}).items() if v is not None})

        selection = {key: merged.pop(key) for key in SELECTION_KEYS if key in merged}
        config = RenderConfig.from_dict(merged)
        return RenderJob(config, **selection)


def load_job(config_file: Optional[Union[str, Path]] = None, preset: Optional[str] = None,
             overrides: Optional[Dict[str, Any]] = None) -> RenderJob:
    """Convenience wrapper around ``ConfigManager`` for a single job."""
    manager = ConfigManager()
    data = manager.load_config(config_file) if config_file else {}
    return manager.build_job(data, preset, overrides)
