from __future__ import annotations

import pytest

from ramps import Color, ConfigError
from ramps.engine import DefaultColorEngine


def test_shift_hue_wraps_forward_and_backward() -> None:
    c = Color.from_hsv(350.0, 0.5, 0.5)
    assert c.shift_hue(20.0).hue == pytest.approx(10.0)
    assert Color.from_hsv(10.0, 0.5, 0.5).shift_hue(-40.0).hue == pytest.approx(330.0)
    assert c.shift_hue(720.0).hue == pytest.approx(350.0)
    assert c.shift_hue(0.0) == c


def test_transforms_return_new_colors() -> None:
    c = Color.from_hsv(120.0, 0.4, 0.6)
    s = c.with_saturation(0.9)
    assert s is not c
    assert c.saturation == 0.4
    assert (s.hue, s.saturation, s.value) == (120.0, 0.9, 0.6)


def test_saturation_and_value_are_clamped_not_wrapped() -> None:
    c = Color.from_hsv(120.0, 0.4, 0.6)
    assert c.with_saturation(1.7).saturation == 1.0
    assert c.with_saturation(-0.3).saturation == 0.0
    assert c.with_value(2.0).value == 1.0
    assert c.with_value(-1.0).value == 0.0


def test_desaturate_subtracts_points_and_clamps_at_zero() -> None:
    c = Color.from_hsv(0.0, 0.87, 0.7)
    assert c.desaturate(0.7).saturation == pytest.approx(0.17)
    assert Color.from_hsv(0.0, 0.5, 0.7).desaturate(0.7).saturation == 0.0
    d = c.desaturate(0.7)
    assert (d.hue, d.value) == (c.hue, c.value)


@pytest.mark.parametrize(
    "hsv",
    [
        (360.0, 0.5, 0.5),
        (-1.0, 0.5, 0.5),
        (0.0, 1.01, 0.5),
        (0.0, 0.5, -0.01),
        (float("nan"), 0.5, 0.5),
        ("red", 0.5, 0.5),
    ],
)
def test_from_hsv_rejects_out_of_range(hsv) -> None:
    with pytest.raises(ConfigError):
        Color.from_hsv(*hsv)


def test_from_hex_and_back() -> None:
    red = Color.from_hex("#FF0000")
    assert red.to_hsv() == pytest.approx((0.0, 1.0, 1.0))
    assert red.to_hex() == "#ff0000"
    assert Color.from_hex("0x00ffff").hue == pytest.approx(180.0)
    with pytest.raises(ConfigError):
        Color.from_hex("#12345")


def test_to_srgb_grayscale_has_equal_channels() -> None:
    r, g, b = Color.from_hsv(200.0, 0.0, 0.25).to_srgb()
    assert r == g == b == pytest.approx(0.25)


def test_engine_normalize_hue_range() -> None:
    engine = DefaultColorEngine()
    for h in (-720.0, -1e-17, 0.0, 359.999, 360.0, 1e6):
        out = engine.normalize_hue(h)
        assert 0.0 <= out < 360.0


@pytest.mark.parametrize(
    "hsv",
    [(400.0, 0.5, 0.5), (0.0, 1.5, 0.5), (0.0, 0.5, -0.2), (400.0, 1.5, -0.2)],
)
def test_direct_constructor_rejects_out_of_range(hsv) -> None:
    with pytest.raises(ConfigError):
        Color(*hsv)


def test_direct_constructor_accepts_valid_values() -> None:
    c = Color(359.5, 1.0, 0.0)
    assert c == Color.from_hsv(359.5, 1.0, 0.0)
