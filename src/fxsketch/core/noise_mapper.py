"""
どこで: `src/fxsketch/core/noise_mapper.py`。
何を: キャンバス座標をノイズ空間へアフィン写像し、深度 z 付きでノイズを引く `RangeMapper` を提供する。
なぜ: スケッチ側が「ピクセル座標 → ノイズ値」を 1 呼び出しで扱えるようにするため。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Union

from fxsketch.core.errors import ConfigurationError
from fxsketch.core.noise import NoiseField
from fxsketch.core.random_source import RandomSource

NoiseFn = Callable[[float, float, float], float]


@dataclass(frozen=True, slots=True)
class Range:
    """閉じた数値レンジ `[min, max]`。"""

    min: float
    max: float

    @property
    def size(self) -> float:
        """レンジ幅 `abs(max - min)` を返す。"""

        return abs(float(self.max) - float(self.min))


RangeLike = Union[Range, Mapping[str, float], Sequence[float]]


def as_range(value: RangeLike) -> Range:
    """Range / `{"min", "max"}` mapping / `(min, max)` を Range に正規化して返す。"""

    if isinstance(value, Range):
        return value
    if isinstance(value, Mapping):
        try:
            return Range(min=float(value["min"]), max=float(value["max"]))
        except KeyError as exc:
            raise ConfigurationError(f"range mapping には min/max が必要です: got={value!r}") from exc
    try:
        lo, hi = value  # type: ignore[misc]
    except Exception as exc:
        raise ConfigurationError(f"range は (min, max) である必要があります: got={value!r}") from exc
    return Range(min=float(lo), max=float(hi))


class RangeMapper:
    """ソースレンジ → 出力レンジの写像とノイズ標本化。

    Parameters
    ----------
    source_x, source_y : RangeLike
        入力座標のレンジ（例: キャンバス幅・高さ）。幅 0 は不可。
    dest_x, dest_y : RangeLike
        ノイズ空間側のレンジ。
    noise : Callable[[float, float, float], float] | None
        3D ノイズ関数。None の場合は `NoiseField()`。
    random : RandomSource | None
        `randomize_depth` が使う乱数源。スケッチと同じ乱数列を渡すこと。

    Raises
    ------
    ConfigurationError
        source_x / source_y の幅が 0 の場合。
    """

    def __init__(
        self,
        source_x: RangeLike,
        source_y: RangeLike,
        dest_x: RangeLike,
        dest_y: RangeLike,
        *,
        noise: NoiseFn | None = None,
        random: RandomSource | None = None,
    ) -> None:
        self._src_x = as_range(source_x)
        self._src_y = as_range(source_y)
        self._dest_x = as_range(dest_x)
        self._dest_y = as_range(dest_y)

        if self._src_x.max == self._src_x.min:
            raise ConfigurationError(f"source_x の幅が 0 です: got={self._src_x}")
        if self._src_y.max == self._src_y.min:
            raise ConfigurationError(f"source_y の幅が 0 です: got={self._src_y}")

        self._src_x_size = self._src_x.size
        self._src_y_size = self._src_y.size
        self._dest_x_size = self._dest_x.size
        self._dest_y_size = self._dest_y.size

        self._noise: NoiseFn = noise if noise is not None else NoiseField()
        self._random = random if random is not None else RandomSource()
        self._depth = 0.0

    @property
    def depth(self) -> float:
        """現在の深度 z を返す。"""

        return self._depth

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        """(x, y) をノイズ空間の座標へ写像して返す。"""

        mx = (float(x) - self._src_x.min) / self._src_x_size * self._dest_x_size + self._dest_x.min
        my = (float(y) - self._src_y.min) / self._src_y_size * self._dest_y_size + self._dest_y.min
        return mx, my

    def sample_at(self, x: float, y: float) -> float:
        """(x, y) に対応するノイズ値（[0, 1]）を返す。"""

        mx, my = self.map_point(x, y)
        return self._noise(mx, my, self._depth)

    def set_depth(self, z: float) -> None:
        self._depth = float(z)

    def advance_depth(self, amount: float = 0.01) -> None:
        """深度を相対的に進める（折り返しなし）。"""

        self._depth += float(amount)

    def randomize_depth(self, min: float = 0.0, max: float = 20.0) -> None:
        """深度を [min, max) の一様乱数に置き換える。"""

        self._depth = float(self._random.random_between(min, max))


NoiseMapper = RangeMapper

__all__ = ["NoiseMapper", "Range", "RangeLike", "RangeMapper", "as_range"]
