from __future__ import annotations

"""Color conversion engine for HSV and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between HSV (hue in degrees) and sRGB in
[0, 1] using the standard library's :mod:`colorsys` formulas.
"""

import colorsys
import math
from typing import Protocol, Tuple


HSV = Tuple[float, float, float]
SRGB = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def hsv_to_srgb(self, h: float, s: float, v: float) -> SRGB: ...

    def srgb_to_hsv(self, r: float, g: float, b: float) -> HSV: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on the HSV hexcone model."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        h_norm = h % 360.0
        # -1e-17 % 360.0 rounds up to 360.0
        if h_norm >= 360.0:
            h_norm = 0.0
        return h_norm

    def hsv_to_srgb(self, h: float, s: float, v: float) -> SRGB:
        """Convert HSV (h in degrees, s/v in [0, 1]) to sRGB in [0, 1]."""
        h_unit = self.normalize_hue(h) / 360.0
        return colorsys.hsv_to_rgb(h_unit, clamp01(s), clamp01(v))

    def srgb_to_hsv(self, r: float, g: float, b: float) -> HSV:
        """Convert sRGB in [0, 1] to HSV with hue in degrees."""
        h_unit, s, v = colorsys.rgb_to_hsv(clamp01(r), clamp01(g), clamp01(b))
        return (self.normalize_hue(h_unit * 360.0), s, v)


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def is_finite(x: float) -> bool:
    return not (math.isnan(x) or math.isinf(x))
