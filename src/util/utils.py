import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def read_yaml(path: Path | str) -> Dict[str, Any]:
    """YAML ファイルを厳格に読み込む。

    - ファイルが無い場合は `FileNotFoundError`
    - YAML として不正、またはトップレベルが辞書でない場合は `ValueError`
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {p}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"top-level of {p} must be a mapping, got {type(data).__name__}")
    return data


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/` 配下から呼ばれることを想定し、上位に `.git` や `pyproject.toml`、`configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(path: Path | str | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す。

    `path` 未指定時（フェイルソフト）の優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。

    `path` 指定時はそのファイルのみを `read_yaml` で厳格に読み込む。
    """
    if path is not None:
        return read_yaml(path)

    project_root = _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base
