"""
どこで: `util.color`。
何を: Hex 文字列と RGB(0–1)/RGB(0–255) の相互変換を一元化。
なぜ: 設定ファイル/CLI/エクスポートで同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> tuple[float, float, float]:
    """Hex 文字列から RGB(0–1) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0)


def to_u8_rgb(rgb: Sequence[float]) -> tuple[int, int, int]:
    """RGB(0–1) を RGB(0–255) へ変換する（範囲外はクランプ）。"""
    if len(rgb) != 3:
        raise ValueError("rgb must have exactly 3 components")
    r, g, b = (_clamp01(float(c)) for c in rgb)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def to_hex(rgb: Sequence[float]) -> str:
    """RGB(0–1) を "#rrggbb" へ変換する。"""
    r, g, b = to_u8_rgb(rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "parse_hex_color_str",
    "to_u8_rgb",
    "to_hex",
]
