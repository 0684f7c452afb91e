from __future__ import annotations

"""export_palette / describe_config の基本動作テスト。"""

import pytest

from ramps import ExportFormat, RampConfig, describe_config, export_palette, generate_palette
from util.color import to_u8_rgb


def test_export_formats_shape(cfg_default: RampConfig) -> None:
    pal = generate_palette(cfg_default)
    for fmt in ExportFormat:
        rows = export_palette(pal, fmt)
        assert len(rows) == 9
        assert all(len(row) == 16 for row in rows)


def test_export_hex_and_255(cfg_small: RampConfig) -> None:
    pal = generate_palette(cfg_small)
    hex_rows = export_palette(pal, "hex")
    assert all(isinstance(h, str) and h.startswith("#") and len(h) == 7 for h in hex_rows[0])
    u8_rows = export_palette(pal, ExportFormat.SRGB_255)
    for row in u8_rows:
        for r, g, b in row:
            assert all(isinstance(v, int) and 0 <= v <= 255 for v in (r, g, b))
    # grayscale row has equal channels
    assert all(r == g == b for r, g, b in u8_rows[0])


def test_export_hsv_matches_palette(cfg_small: RampConfig) -> None:
    pal = generate_palette(cfg_small)
    rows = export_palette(pal, "hsv")
    assert rows[2][1] == pal[2][1].to_hsv()


def test_export_unknown_format() -> None:
    with pytest.raises(ValueError):
        ExportFormat.from_value("cmyk")


def test_describe_config(cfg_default: RampConfig) -> None:
    text = describe_config(cfg_default)
    r, g, b = to_u8_rgb(cfg_default.base_color.to_srgb())
    assert text == (
        f"base color: (HSV=(180.0, 0.87, 0.70), RGB=({r}, {g}, {b})); "
        "8 ramps with 9 colors/ramp"
    )
