# どこで: `src/fxsketch/core/errors.py`。
# 何を: fxsketch 全体で使う例外型を定義する。
# なぜ: 呼び出し側が設定ミス・引数ミス・出力ミスを型で区別できるようにするため。

from __future__ import annotations


class ConfigurationError(ValueError):
    """構築時に検出できる設定ミス（幅 0 の座標レンジなど）。"""


class InvalidArgument(ValueError):
    """演算の引数が契約を満たさない場合の例外。"""


class ExportError(RuntimeError):
    """未対応の出力組み合わせ（ベクタ描画中のフレーム連番出力など）。"""


__all__ = ["ConfigurationError", "ExportError", "InvalidArgument"]
