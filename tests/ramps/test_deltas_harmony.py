from __future__ import annotations

import pytest

from ramps.deltas import accumulate, hue_offsets
from ramps.harmony import base_ramp_index, ramp_hue_offsets


def test_accumulate_walks_outward_from_middle() -> None:
    sat = accumulate([-17, -20, -11, -5, 0, -15, -15, -15, -15])
    assert sat == [-53, -36, -16, -5, 0, -15, -30, -45, -60]
    bri = accumulate([-14, -14, -16, -16, 0, 10, 10, 5, 5])
    assert bri == [-60, -46, -32, -16, 0, 10, 20, 25, 30]


def test_accumulate_ignores_middle_entry() -> None:
    # middle offset is 0 by construction
    assert accumulate([1.0, 99.0, 2.0]) == [1.0, 0.0, 2.0]


def test_accumulate_requires_odd_length() -> None:
    with pytest.raises(ValueError):
        accumulate([0.0, 0.0])


def test_hue_offsets_step_per_index() -> None:
    assert hue_offsets(9, 20.0) == [-80, -60, -40, -20, 0, 20, 40, 60, 80]
    assert hue_offsets(3, 7.5) == [-7.5, 0.0, 7.5]
    with pytest.raises(ValueError):
        hue_offsets(4, 20.0)


@pytest.mark.parametrize(
    "ramps, base, offsets",
    [
        (1, 0, [0.0]),
        (3, 1, [-120.0, 0.0, 120.0]),
        (4, 2, [-180.0, -90.0, 0.0, 90.0]),
        (8, 4, [-180.0, -135.0, -90.0, -45.0, 0.0, 45.0, 90.0, 135.0]),
    ],
)
def test_ramp_hue_offsets(ramps, base, offsets) -> None:
    assert base_ramp_index(ramps) == base
    assert ramp_hue_offsets(ramps) == pytest.approx(offsets)


def test_base_ramp_index_rejects_zero() -> None:
    with pytest.raises(ValueError):
        base_ramp_index(0)
