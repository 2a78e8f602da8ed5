# どこで: `src/fxsketch/core/random_source.py`。
# 何を: 名前付きシードから再現できる一様乱数源 `RandomSource` を提供する。
# なぜ: グローバル乱数状態を書き換えず、スケッチごとに同じ乱数列を明示的に共有するため。

from __future__ import annotations

import hashlib

import numpy as np

Seed = int | float | str | None


def seed_to_int(seed: Seed) -> int | None:
    """シード値を numpy の Generator が受け付ける非負整数へ正規化して返す。

    Notes
    -----
    - None はそのまま None（OS エントロピー）。
    - 非負の整数（整数値の float を含む）はそのまま使う。
    - それ以外（文字列・小数・負数）は SHA-256 の先頭 8 byte を使う。
    """

    if seed is None:
        return None
    if isinstance(seed, bool):
        raise TypeError(f"seed に bool は使えません: got={seed!r}")
    if isinstance(seed, int) and seed >= 0:
        return int(seed)
    if isinstance(seed, float) and seed.is_integer() and seed >= 0:
        return int(seed)
    digest = hashlib.sha256(repr(seed).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class RandomSource:
    """シード付きの一様乱数源。

    Parameters
    ----------
    seed : int | float | str | None
        乱数列のシード。文字列もそのまま使える（例: ``"hello world"``）。
    """

    def __init__(self, seed: Seed = None) -> None:
        self._seed: Seed = seed
        self._rng = np.random.default_rng(seed_to_int(seed))

    @property
    def seed(self) -> Seed:
        """生成時（または直近の reseed）のシードを返す。"""

        return self._seed

    def reseed(self, seed: Seed) -> None:
        """乱数列を指定シードで初期化し直す。"""

        self._seed = seed
        self._rng = np.random.default_rng(seed_to_int(seed))

    def random(self) -> float:
        """[0, 1) の一様乱数を返す。"""

        return float(self._rng.random())

    def random_between(self, min: float, max: float, *, integer: bool = False) -> float | int:
        """[min, max) の一様乱数を返す。

        `integer=True` の場合は結果を floor した値（float 型ではなく int）を返す。
        """

        value = float(min) + self.random() * (float(max) - float(min))
        if integer:
            return int(np.floor(value))
        return value


__all__ = ["RandomSource", "Seed", "seed_to_int"]
