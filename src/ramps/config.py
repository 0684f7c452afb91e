from __future__ import annotations

"""Immutable, eagerly validated input to palette generation.

This module defines :class:`RampConfig`, the default configuration used by
the command-line tool, and helpers that build a config from plain mappings
or YAML files.
"""

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence, Tuple

from util.utils import load_config

from .color_types import Color, check_hsv
from .engine import is_finite
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_HUE_STEP_PER_INDEX = 20.0
DEFAULT_MIRROR_DESATURATION = 70.0

_KNOWN_KEYS = frozenset(
    {
        "base_color",
        "colors_per_ramp",
        "ramps_per_palette",
        "saturation_deltas",
        "brightness_deltas",
        "hue_step_per_index",
        "mirror_desaturation",
    }
)


@dataclass(frozen=True)
class RampConfig:
    """Parameters controlling palette generation.

    Attributes
    ----------
    base_color:
        Color in the horizontal middle of the base ramp. Anchors the whole
        palette.
    colors_per_ramp:
        Number of colors spanning light -> base -> dark before mirroring.
        Must be odd and at least 3 so a single middle index exists.
    ramps_per_palette:
        Number of hue-rotated ramps, excluding the grayscale ramp. If even,
        the base ramp is the top of the lower half rather than the center.
    saturation_deltas, brightness_deltas:
        Per-index offsets in percentage points, one per color in a ramp.
        The entry at the middle index must be 0.
    hue_step_per_index:
        Hue drift in degrees per index away from the middle of the base ramp.
    mirror_desaturation:
        Saturation points removed from each interior color when the ramp is
        mirrored.
    """

    base_color: Color
    colors_per_ramp: int
    ramps_per_palette: int
    saturation_deltas: Tuple[float, ...]
    brightness_deltas: Tuple[float, ...]
    hue_step_per_index: float = DEFAULT_HUE_STEP_PER_INDEX
    mirror_desaturation: float = DEFAULT_MIRROR_DESATURATION

    def __post_init__(self) -> None:
        if not isinstance(self.base_color, Color):
            raise ConfigError(
                f"base_color must be a Color, got {type(self.base_color).__name__}."
            )
        check_hsv(*self.base_color.to_hsv())

        n = _require_int("colors_per_ramp", self.colors_per_ramp)
        if n < 3 or n % 2 == 0:
            raise ConfigError(f"colors_per_ramp must be an odd integer >= 3, got {n}.")
        ramps = _require_int("ramps_per_palette", self.ramps_per_palette)
        if ramps < 1:
            raise ConfigError(f"ramps_per_palette must be >= 1, got {ramps}.")

        mid = n // 2
        for name in ("saturation_deltas", "brightness_deltas"):
            table = _as_float_tuple(name, getattr(self, name))
            if len(table) != n:
                raise ConfigError(
                    f"{name} must have colors_per_ramp={n} entries, got {len(table)}."
                )
            if table[mid] != 0.0:
                raise ConfigError(
                    f"{name}[{mid}] (middle index) must be 0, got {table[mid]!r}."
                )
            object.__setattr__(self, name, table)

        step = _require_number("hue_step_per_index", self.hue_step_per_index)
        object.__setattr__(self, "hue_step_per_index", step)
        mirror = _require_number("mirror_desaturation", self.mirror_desaturation)
        if not (0.0 <= mirror <= 100.0):
            raise ConfigError(f"mirror_desaturation must be in [0, 100], got {mirror!r}.")
        object.__setattr__(self, "mirror_desaturation", mirror)

    # --- derived values ---
    @property
    def mid_index(self) -> int:
        """Index of the base color within the unmirrored ramp."""
        return self.colors_per_ramp // 2

    @property
    def ramp_length(self) -> int:
        """Length of a mirrored ramp."""
        return 2 * self.colors_per_ramp - 2

    @property
    def base_ramp_index(self) -> int:
        """Position of the unrotated ramp among the hue-rotated ramps."""
        return self.ramps_per_palette // 2

    def replace(self, **changes: Any) -> "RampConfig":
        """Return a validated copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RampConfig":
        """Build a config from a plain mapping such as a YAML ``palette:`` section.

        ``base_color`` is either a hex string or a mapping with ``hue``
        (degrees), ``saturation`` and ``value`` (both in [0, 1]). Omitted
        keys fall back to :func:`default_config`.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"palette config must be a mapping, got {type(data).__name__}.")
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"unknown palette config keys: {', '.join(unknown)}.")

        defaults = default_config()
        kwargs: dict[str, Any] = {}
        for key in _KNOWN_KEYS - {"base_color"}:
            kwargs[key] = data.get(key, getattr(defaults, key))
        raw_base = data.get("base_color")
        kwargs["base_color"] = (
            defaults.base_color if raw_base is None else _parse_base_color(raw_base)
        )
        return cls(**kwargs)


def default_config() -> RampConfig:
    """Return the built-in configuration (teal base, 9 colors, 8 ramps)."""
    return RampConfig(
        base_color=Color.from_hsv(180.0, 0.87, 0.70),
        colors_per_ramp=9,
        ramps_per_palette=8,
        saturation_deltas=(-17.0, -20.0, -11.0, -5.0, 0.0, -15.0, -15.0, -15.0, -15.0),
        brightness_deltas=(-14.0, -14.0, -16.0, -16.0, 0.0, 10.0, 10.0, 5.0, 5.0),
    )


def load_ramp_config(path: Path | str | None = None) -> RampConfig:
    """Load a :class:`RampConfig` from the ``palette:`` section of a YAML file.

    Without ``path`` the fail-soft project lookup of :func:`util.utils.load_config`
    is used. A missing section yields :func:`default_config`.
    """
    try:
        data = load_config(path)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    section = data.get("palette")
    if section is None:
        logger.info("no 'palette' section found; using built-in defaults")
        return default_config()
    cfg = RampConfig.from_mapping(section)
    logger.debug("loaded palette config: %s", cfg)
    return cfg


def _parse_base_color(raw: Any) -> Color:
    if isinstance(raw, str):
        return Color.from_hex(raw)
    if isinstance(raw, Mapping):
        missing = [k for k in ("hue", "saturation", "value") if k not in raw]
        if missing:
            raise ConfigError(f"base_color is missing: {', '.join(missing)}.")
        extra = sorted(set(raw) - {"hue", "saturation", "value"})
        if extra:
            raise ConfigError(f"unknown base_color keys: {', '.join(extra)}.")
        return Color.from_hsv(raw["hue"], raw["saturation"], raw["value"])
    raise ConfigError(
        f"base_color must be a hex string or a mapping, got {type(raw).__name__}."
    )


def _require_int(name: str, v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ConfigError(f"{name} must be an integer, got {v!r}.")
    return v


def _require_number(name: str, v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ConfigError(f"{name} must be a number, got {v!r}.")
    if not is_finite(float(v)):
        raise ConfigError(f"{name} must be finite, got {v!r}.")
    return float(v)


def _as_float_tuple(name: str, values: Sequence[Any]) -> Tuple[float, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ConfigError(f"{name} must be a sequence of numbers, got {values!r}.")
    return tuple(_require_number(f"{name}[{i}]", v) for i, v in enumerate(values))
