"""
どこで: `ramps.cache`。
何を: RampConfig をキーに生成済み Palette を保持する LRU メモ化。
なぜ: 描画側が設定変更時だけ再生成し、それ以外は前回結果を再利用できるようにするため。

設計メモ（前提と落とし穴）:
- キーは RampConfig の等価性（frozen dataclass なので hashable）。
- `maxsize=0` で無効化（常に再生成）。未指定時は `RAMPS_CACHE_MAXSIZE`。
- 生成器自体は純粋関数のまま。キャッシュは呼び出し側が所有する。
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Optional

from common import settings

from .config import RampConfig
from .engine import ColorEngine
from .generator import generate_palette
from .palette import Palette

logger = logging.getLogger(__name__)


class PaletteCache:
    """設定ごとの Palette を保持する LRU キャッシュ"""

    def __init__(self, maxsize: Optional[int] = None, engine: Optional[ColorEngine] = None):
        if maxsize is None:
            maxsize = settings.get().CACHE_MAXSIZE
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")
        self._maxsize = maxsize
        self._engine = engine
        self._cache: "OrderedDict[RampConfig, Palette]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, config: object) -> bool:
        return config in self._cache

    def get(self, config: RampConfig) -> Palette:
        """config に対応する Palette を返す（未生成なら生成して保存）。"""
        cached = self._cache.get(config)
        if cached is not None:
            self._cache.move_to_end(config)
            self.hits += 1
            return cached

        self.misses += 1
        palette = generate_palette(config, self._engine)
        if self._maxsize == 0:
            return palette

        self._cache[config] = palette
        if len(self._cache) > self._maxsize:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug("evicted cached palette for %s", evicted)
        return palette

    def clear(self) -> None:
        """キャッシュを空にする（カウンタは保持）。"""
        self._cache.clear()


__all__ = ["PaletteCache"]
