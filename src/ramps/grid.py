"""
どこで: `ramps.grid`。
何を: Palette を一様サイズの矩形グリッドへ配置し、RGB 配列へラスタライズする。
なぜ: 描画側（ウィンドウ/端末プレビュー）が同じレイアウト規約で矩形を塗れるようにするため。

設計メモ:
- ランプ（外側ループ）を上から下、ランプ内の色（内側ループ）を左から右へ並べる。
- `padding` はセル間・ランプ間・外周の全てに同じ幅で入る。
- 画像ファイルへの書き出しは行わない（配列を返すのみ）。
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from util.color import to_u8_rgb

from .palette import Palette


class Cell(NamedTuple):
    row: int
    column: int
    x: int
    y: int
    width: int
    height: int
    rgb: Tuple[int, int, int]


def _check_geometry(cell_size: int, padding: int) -> None:
    if cell_size < 1:
        raise ValueError(f"cell_size must be >= 1, got {cell_size}")
    if padding < 0:
        raise ValueError(f"padding must be >= 0, got {padding}")


def grid_size(palette: Palette, cell_size: int, padding: int = 0) -> Tuple[int, int]:
    """キャンバスの (width, height) をピクセル単位で返す。"""
    _check_geometry(cell_size, padding)
    rows, cols = palette.shape
    width = cols * cell_size + (cols + 1) * padding
    height = rows * cell_size + (rows + 1) * padding
    return width, height


def layout_cells(palette: Palette, cell_size: int, padding: int = 0) -> List[Cell]:
    """各色の矩形（左上原点）を描画順に返す。"""
    _check_geometry(cell_size, padding)
    stride = cell_size + padding
    cells: List[Cell] = []
    for row, col, color in palette.cells():
        cells.append(
            Cell(
                row=row,
                column=col,
                x=padding + col * stride,
                y=padding + row * stride,
                width=cell_size,
                height=cell_size,
                rgb=to_u8_rgb(color.to_srgb()),
            )
        )
    return cells


def rasterize(
    palette: Palette,
    cell_size: int = 16,
    padding: int = 0,
    background: Sequence[int] = (0, 0, 0),
) -> np.ndarray:
    """Palette を (height, width, 3) の uint8 配列へ塗り分ける。

    Parameters
    ----------
    palette : Palette
        対象パレット。
    cell_size : int, default 16
        セル一辺のピクセル数。
    padding : int, default 0
        セル間/外周の余白ピクセル数。
    background : Sequence[int], default (0, 0, 0)
        余白部分の RGB(0–255)。

    Returns
    -------
    np.ndarray
        RGB 画像配列（C 連続, dtype=uint8）。
    """
    if len(background) != 3:
        raise ValueError("background must be an RGB triple")
    width, height = grid_size(palette, cell_size, padding)
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[...] = np.asarray(background, dtype=np.uint8)
    for cell in layout_cells(palette, cell_size, padding):
        img[cell.y : cell.y + cell.height, cell.x : cell.x + cell.width] = cell.rgb
    return img


__all__ = ["Cell", "grid_size", "layout_cells", "rasterize"]
