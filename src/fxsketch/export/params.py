# どこで: `src/fxsketch/export/params.py`。
# 何を: スケッチのパラメータセットを JSON として保存する。
# なぜ: 書き出した画像と同じ設定をあとから再現できるようにするため。

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def export_params(params: Mapping[str, Any], path: str | Path) -> Path:
    """パラメータ mapping をインデント付き JSON で保存し、保存先パスを返す。"""

    _path = Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(dict(params), ensure_ascii=False, indent=2, sort_keys=True, default=str)
    _path.write_text(text + "\n", encoding="utf-8")
    return _path


__all__ = ["export_params"]
