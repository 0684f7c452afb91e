from __future__ import annotations

"""Helper utilities for handing palettes to external consumers.

This module exposes the supported export formats and a public
`export_palette` helper that converts a Palette into nested color lists
(HSV/sRGB/HEX), plus a one-line text summary of a config for status
displays. Nothing here writes files.
"""

from enum import Enum
from typing import List

from util.color import to_u8_rgb

from .config import RampConfig
from .palette import Palette


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HSV = "hsv"
    SRGB_01 = "srgb_01"
    SRGB_255 = "srgb_255"
    HEX = "hex"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HSV", ExportFormat.HSV),
    ("sRGB (0-1)", ExportFormat.SRGB_01),
    ("sRGB (0-255)", ExportFormat.SRGB_255),
    ("HEX", ExportFormat.HEX),
]


def export_palette(palette: Palette, fmt: ExportFormat | str) -> List[List[object]]:
    """Convert a Palette to one list of colors per ramp in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HSV:
        return [[c.to_hsv() for c in ramp] for ramp in palette]
    if export_fmt == ExportFormat.SRGB_01:
        return [[c.to_srgb() for c in ramp] for ramp in palette]
    if export_fmt == ExportFormat.SRGB_255:
        return [[to_u8_rgb(c.to_srgb()) for c in ramp] for ramp in palette]
    if export_fmt == ExportFormat.HEX:
        return [[c.to_hex() for c in ramp] for ramp in palette]
    raise ValueError(f"Unsupported export format: {fmt}")


def describe_config(config: RampConfig) -> str:
    """Return a one-line summary of the settings a palette is built from."""
    base = config.base_color
    r, g, b = to_u8_rgb(base.to_srgb())
    return (
        f"base color: (HSV=({base.hue:.1f}, {base.saturation:.2f}, {base.value:.2f}), "
        f"RGB=({r}, {g}, {b})); {config.ramps_per_palette} ramps with "
        f"{config.colors_per_ramp} colors/ramp"
    )


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "export_palette",
    "describe_config",
]
