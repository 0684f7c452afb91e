"""Public entrypoint for the ramps palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``ramps`` instead of individual
submodules.
"""

from .color_types import Color
from .config import RampConfig, default_config, load_ramp_config
from .errors import ConfigError
from .palette import Palette, Ramp
from .generator import generate_palette
from .cache import PaletteCache
from .export import (
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    describe_config,
    export_palette,
)

__all__ = [
    "Color",
    "ConfigError",
    "RampConfig",
    "default_config",
    "load_ramp_config",
    "Palette",
    "Ramp",
    "generate_palette",
    "PaletteCache",
    "ExportFormat",
    "export_palette",
    "describe_config",
    "EXPORT_FORMAT_OPTIONS",
]
