from __future__ import annotations

"""Container type for generated ramp palettes.

This module defines the :class:`Palette` dataclass, an immutable grid of
colors: one grayscale ramp followed by the hue-rotated ramps.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .color_types import Color
from .config import RampConfig


Ramp = Tuple[Color, ...]


@dataclass(frozen=True)
class Palette:
    """Generated ramp palette.

    Attributes
    ----------
    config:
        Configuration the palette was generated from.
    ramps:
        ``ramps_per_palette + 1`` ramps of ``2 * colors_per_ramp - 2``
        colors each. ``ramps[0]`` is the grayscale ramp; the remaining
        ramps are hue-rotated copies of the mirrored base ramp.
    """

    config: RampConfig
    ramps: Tuple[Ramp, ...]

    def __len__(self) -> int:
        return len(self.ramps)

    def __iter__(self) -> Iterator[Ramp]:
        return iter(self.ramps)

    def __getitem__(self, index: int) -> Ramp:
        return self.ramps[index]

    @property
    def grayscale(self) -> Ramp:
        return self.ramps[0]

    @property
    def hue_ramps(self) -> Tuple[Ramp, ...]:
        """Hue-rotated ramps, top to bottom, excluding the grayscale ramp."""
        return self.ramps[1:]

    @property
    def base_ramp_index(self) -> int:
        """Index of the unrotated base ramp within :attr:`ramps`."""
        return 1 + self.config.base_ramp_index

    @property
    def base_ramp(self) -> Ramp:
        return self.ramps[self.base_ramp_index]

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns) of the color grid."""
        return (len(self.ramps), len(self.ramps[0]) if self.ramps else 0)

    def cells(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield ``(row, column, color)`` in render order.

        Ramps are visited top to bottom and colors within a ramp left to
        right.
        """
        for row, ramp in enumerate(self.ramps):
            for col, color in enumerate(ramp):
                yield row, col, color
