from __future__ import annotations

"""Core color type used by the ramps library.

This module defines :class:`Color`, an immutable HSV triple, together with
the primitive transforms the ramp generator needs. Every transform returns
a new :class:`Color`; saturation and value are clamped into [0, 1] and hue
is wrapped into [0, 360).
"""

from dataclasses import dataclass, replace
from typing import Tuple

from util.color import parse_hex_color_str, to_hex

from .engine import ColorEngine, DefaultColorEngine, clamp01, is_finite
from .errors import ConfigError


HSV = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

_DEFAULT_ENGINE = DefaultColorEngine()


@dataclass(frozen=True)
class Color:
    """Concrete color representation in HSV.

    Attributes
    ----------
    hue:
        Hue angle in degrees, in [0, 360).
    saturation:
        Saturation in [0, 1].
    value:
        Value (brightness) in [0, 1].
    """

    hue: float
    saturation: float
    value: float

    def __post_init__(self) -> None:
        check_hsv(self.hue, self.saturation, self.value)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        """Create a Color from raw HSV values, rejecting out-of-range input.

        Raises
        ------
        ConfigError
            If any component is not a finite number or lies outside its
            declared range.
        """
        check_hsv(hue, saturation, value)
        return cls(hue=float(hue), saturation=float(saturation), value=float(value))

    @classmethod
    def from_hex(cls, hex_str: str, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from a hex string (#rrggbb, 0xrrggbb or rrggbb)."""
        if engine is None:
            engine = _DEFAULT_ENGINE
        try:
            r, g, b = parse_hex_color_str(hex_str)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        h, s, v = engine.srgb_to_hsv(r, g, b)
        return cls(hue=h, saturation=s, value=v)

    # --- transforms ---
    def shift_hue(self, degrees: float, engine: ColorEngine | None = None) -> "Color":
        """Rotate hue by ``degrees``, wrapping into [0, 360)."""
        if engine is None:
            engine = _DEFAULT_ENGINE
        return replace(self, hue=engine.normalize_hue(self.hue + degrees))

    def with_saturation(self, saturation: float) -> "Color":
        """Set saturation to an absolute value, clamped to [0, 1]."""
        return replace(self, saturation=clamp01(saturation))

    def desaturate(self, amount: float) -> "Color":
        """Lower saturation by ``amount`` (0.7 = 70 points), clamped at 0."""
        return replace(self, saturation=clamp01(self.saturation - amount))

    def with_value(self, value: float) -> "Color":
        """Set value (brightness) to an absolute value, clamped to [0, 1]."""
        return replace(self, value=clamp01(value))

    # --- conversions ---
    def to_hsv(self) -> HSV:
        """Return (h, s, v) with h in degrees."""
        return (self.hue, self.saturation, self.value)

    def to_srgb(self, engine: ColorEngine | None = None) -> SRGB:
        """Return sRGB representation as (r, g, b) in [0, 1]."""
        if engine is None:
            engine = _DEFAULT_ENGINE
        return engine.hsv_to_srgb(self.hue, self.saturation, self.value)

    def to_hex(self, engine: ColorEngine | None = None) -> str:
        """Return hex representation "#rrggbb"."""
        return to_hex(self.to_srgb(engine))


def check_hsv(hue: float, saturation: float, value: float) -> None:
    """Validate raw HSV components without clamping."""
    for name, v in (("hue", hue), ("saturation", saturation), ("value", value)):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ConfigError(f"{name} must be a number, got {type(v).__name__}.")
        if not is_finite(float(v)):
            raise ConfigError(f"{name} must be finite, got {v!r}.")
    if not (0.0 <= hue < 360.0):
        raise ConfigError(f"hue must be in [0, 360), got {hue!r}.")
    if not (0.0 <= saturation <= 1.0):
        raise ConfigError(f"saturation must be in [0, 1], got {saturation!r}.")
    if not (0.0 <= value <= 1.0):
        raise ConfigError(f"value must be in [0, 1], got {value!r}.")
