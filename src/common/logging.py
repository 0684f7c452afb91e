"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """レベル名/数値をロギングレベル値へ正規化する（不明な名前は INFO）。"""
    if isinstance(level, str):
        lvl = getattr(logging, level.strip().upper(), None)
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - CLI から呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=resolve_level(level), format=_FORMAT)


__all__ = ["resolve_level", "setup_default_logging"]
