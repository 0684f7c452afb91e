"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Palette cache（0 で無効）
    CACHE_MAXSIZE: int = 32

    # 設定ファイル（未指定時は configs/default.yaml + config.yaml）
    CONFIG_PATH: str | None = None

    # CLI
    ANSI_PREVIEW: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、文字列は `env_str` を使用。
    - キャッシュサイズは下限 0 に丸める。
    """
    _settings.LOG_LEVEL = (env_str("RAMPS_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.CACHE_MAXSIZE = env_int("RAMPS_CACHE_MAXSIZE", 32, min_value=0) or 0
    _settings.CONFIG_PATH = env_str("RAMPS_CONFIG_PATH")
    _settings.ANSI_PREVIEW = env_bool("RAMPS_ANSI_PREVIEW", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
