from __future__ import annotations

"""High-level public API for generating ramp palettes.

This module provides :func:`generate_palette`, which accumulates the
per-index delta tables, builds and mirrors the base ramp, derives the
grayscale ramp, and distributes hue-rotated copies across the palette.
The function is pure: it reads the config and returns a new
:class:`ramps.palette.Palette`.
"""

import logging
from typing import List, Optional

from .color_types import Color
from .config import RampConfig
from .deltas import accumulate, hue_offsets
from .engine import ColorEngine, DefaultColorEngine
from .harmony import base_ramp_index, ramp_hue_offsets
from .palette import Palette, Ramp

logger = logging.getLogger(__name__)


def generate_palette(
    config: RampConfig,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate a ramp palette from a validated config.

    Parameters
    ----------
    config:
        RampConfig describing the base color, ramp geometry and delta tables.
    engine:
        Optional ColorEngine used for hue normalization. If None,
        DefaultColorEngine is used.

    Returns
    -------
    Palette
        ``[grayscale] + upper ramps + [base ramp] + lower ramps``.
    """
    if not isinstance(config, RampConfig):
        raise TypeError(f"config must be a RampConfig, got {type(config).__name__}.")
    if engine is None:
        engine = DefaultColorEngine()

    base = build_base_ramp(config, engine)
    mirrored = mirror_ramp(base, config.mirror_desaturation / 100.0)
    grayscale: Ramp = tuple(c.with_saturation(0.0) for c in mirrored)

    base_index = base_ramp_index(config.ramps_per_palette)
    ramps: List[Ramp] = [grayscale]
    for i, offset in enumerate(ramp_hue_offsets(config.ramps_per_palette)):
        if i == base_index:
            ramps.append(mirrored)
            continue
        ramps.append(tuple(c.shift_hue(offset, engine) for c in mirrored))

    logger.debug(
        "generated %d ramps x %d colors (base ramp at %d)",
        len(ramps),
        len(mirrored),
        1 + base_index,
    )
    return Palette(config=config, ramps=tuple(ramps))


def build_base_ramp(config: RampConfig, engine: Optional[ColorEngine] = None) -> Ramp:
    """Build the ``colors_per_ramp`` colors of the unmirrored base ramp.

    Each color is the base color rotated by its hue offset, then given an
    absolute saturation and value offset from the base, clamped to [0, 1].
    """
    base = config.base_color
    sat = accumulate(config.saturation_deltas)
    bri = accumulate(config.brightness_deltas)
    hue = hue_offsets(config.colors_per_ramp, config.hue_step_per_index)

    colors: List[Color] = []
    for dh, ds, dv in zip(hue, sat, bri):
        c = base.shift_hue(dh, engine)
        c = c.with_saturation(base.saturation + ds / 100.0)
        c = c.with_value(base.value + dv / 100.0)
        colors.append(c)
    return tuple(colors)


def mirror_ramp(ramp: Ramp, desaturation: float) -> Ramp:
    """Extend ``ramp`` into a horseshoe by mirroring its interior.

    Colors at indices ``1 .. len(ramp) - 2`` are appended in reverse order,
    each desaturated by ``desaturation`` (0.7 = 70 points). Endpoints are
    not duplicated, so the result has ``2 * len(ramp) - 2`` colors.
    """
    interior = ramp[1:-1]
    return tuple(ramp) + tuple(c.desaturate(desaturation) for c in reversed(interior))
