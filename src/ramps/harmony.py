from __future__ import annotations

"""Hue distribution across the ramps of a palette.

Ramps other than the base ramp are copies of it rotated around the color
wheel in equal steps of ``360 / ramps_per_palette`` degrees.
"""

from typing import List


def base_ramp_index(ramps_per_palette: int) -> int:
    """Position of the unrotated ramp among ``ramps_per_palette`` ramps.

    If ``ramps_per_palette`` is odd this is the vertical middle; if even,
    it is the top of the lower half.
    """
    if ramps_per_palette <= 0:
        raise ValueError("ramps_per_palette must be positive.")
    return ramps_per_palette // 2


def ramp_hue_offsets(ramps_per_palette: int) -> List[float]:
    """Compute hue offsets (in degrees) for each hue-rotated ramp.

    Ramps above the base are rotated backwards, ramps below forwards:
    ``(i - base) * 360 / ramps_per_palette``. The base ramp has offset 0.
    """
    base = base_ramp_index(ramps_per_palette)
    shift = 360.0 / ramps_per_palette
    return [(i - base) * shift for i in range(ramps_per_palette)]
