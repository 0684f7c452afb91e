"""共通フィクスチャ。

- 既定設定と小さな RampConfig 試料
- 環境変数由来の settings を各テスト後に再読込
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from ramps import Color, RampConfig, default_config


@pytest.fixture()
def cfg_default() -> RampConfig:
    return default_config()


@pytest.fixture()
def cfg_small() -> RampConfig:
    """3 色/ランプ、3 ランプ。飽和/明度が両端でクランプされる。"""
    return RampConfig(
        base_color=Color.from_hsv(10.0, 0.5, 0.5),
        colors_per_ramp=3,
        ramps_per_palette=3,
        saturation_deltas=(-80.0, 0.0, 80.0),
        brightness_deltas=(90.0, 0.0, -90.0),
    )


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """RAMPS_* を除去した状態で settings を読み直し、終了後も読み直す。"""
    for name in ("RAMPS_LOG_LEVEL", "RAMPS_CACHE_MAXSIZE", "RAMPS_CONFIG_PATH", "RAMPS_ANSI_PREVIEW"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
