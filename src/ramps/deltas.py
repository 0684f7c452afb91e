from __future__ import annotations

"""Cumulative per-index offsets for the base ramp.

Delta tables describe how each color differs from its neighbour closer to
the middle of the ramp. This module turns them into absolute offsets from
the base color by accumulating outward from the middle index.
"""

from typing import List, Sequence


def accumulate(deltas: Sequence[float]) -> List[float]:
    """Accumulate ``deltas`` outward from the middle index.

    Below the middle, ``acc[i] = acc[i + 1] + deltas[i]``; above it,
    ``acc[i] = acc[i - 1] + deltas[i]``. The middle entry is always 0.

    Parameters
    ----------
    deltas:
        Per-index offsets. The length must be odd.
    """
    n = len(deltas)
    if n % 2 == 0:
        raise ValueError("delta table length must be odd.")
    mid = n // 2
    acc = [0.0] * n
    for i in range(mid - 1, -1, -1):
        acc[i] = acc[i + 1] + deltas[i]
    for i in range(mid + 1, n):
        acc[i] = acc[i - 1] + deltas[i]
    return acc


def hue_offsets(n: int, step: float) -> List[float]:
    """Hue offsets (degrees) for each index of an ``n``-color base ramp.

    Indices below the middle drift by ``-step`` per index, indices above by
    ``+step``. Offsets are accumulated the same way as :func:`accumulate`.
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError("n must be a positive odd integer.")
    mid = n // 2
    return accumulate([-step] * mid + [0.0] + [step] * mid)
