# どこで: `src/fxsketch/api/__init__.py`。
# 何を: スケッチから使う公開 API（SketchParams / SketchContext / run）を再エクスポートする。
# なぜ: スケッチ側が `from fxsketch.api import ...` の 1 行で済むようにするため。

from __future__ import annotations

from .run import RunResult, run
from .sketch import SketchContext, SketchParams

__all__ = ["RunResult", "SketchContext", "SketchParams", "run"]
