"""
どこで: `src/fxsketch/core/color_ramp.py`。
何を: 基準色から暗→明の対称な色ランプを作る関数群と、明度変更に伴う色相シフトを提供する。
なぜ: ノイズ値 [0, 1] をランプの添字へ写すだけで陰影のある配色を得られるようにするため。
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from fxsketch.core.color import HSBColor
from fxsketch.core.errors import InvalidArgument

ColorRamp: TypeAlias = tuple[HSBColor, ...]

# 明るくするときは黄色、暗くするときは紫へ色相を寄せる。
YELLOW_HUE = 60.0
PURPLE_HUE = 280.0

# ランプ両端の明度目標（0..100）。
LIGHT_BRIGHTNESS_TARGET = 95.0
DARK_BRIGHTNESS_TARGET = 5.0

SATURATION_FLOOR = 5.0
SATURATION_CEIL = 95.0
BRIGHTNESS_FLOOR = 15.0
BRIGHTNESS_CEIL = 95.0


def clamp(x: float, lo: float, hi: float) -> float:
    """x を [lo, hi] に収めて返す。"""

    return max(min(x, hi), lo)


def lerp(a: float, b: float, t: float) -> float:
    """a → b の線形補間。t は [0, 1] にクランプする。"""

    return a + (b - a) * clamp(t, 0.0, 1.0)


def adjust_brightness_with_hue_shift(c: HSBColor, shift_amount: float) -> HSBColor:
    """明度を shift_amount だけ動かし、同時に色相・彩度も寄せた色を返す。

    Parameters
    ----------
    c : HSBColor
        元の色。
    shift_amount : float
        正なら明るく（色相は 60° へ）、0 以下なら暗く（色相は 280° へ）する量。
        1.0 が明度 100 ぶんに相当する。

    Returns
    -------
    HSBColor
        調整後の色。alpha は元の値を引き継ぐ。

    Notes
    -----
    - 色相は 0/360 の折り返しを考慮しない単純な線形補間。
      補間係数は `clamp(2 * |shift_amount|, 0, 1)` で、|shift| >= 0.5 で飽和する。
    - 彩度は [5, 95]、明度は [15, 95] にクランプする。
    """

    amount = float(shift_amount)
    target_hue = YELLOW_HUE if amount > 0 else PURPLE_HUE

    hue = lerp(c.hue, target_hue, clamp(2.0 * abs(amount), 0.0, 1.0))
    saturation = clamp(c.saturation + amount * 75.0, SATURATION_FLOOR, SATURATION_CEIL)
    brightness = clamp(c.brightness + amount * 100.0, BRIGHTNESS_FLOOR, BRIGHTNESS_CEIL)

    return HSBColor(hue, saturation, brightness, c.alpha)


def _coerce_color(base: HSBColor | Mapping[str, float] | Sequence[float]) -> HSBColor:
    if isinstance(base, HSBColor):
        return base
    try:
        if isinstance(base, Mapping):
            return HSBColor(**base)
        return HSBColor(*base)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"base は HSBColor か (h, s, b[, a]) である必要があります: got={base!r}") from exc


def build_ramp(
    base: HSBColor | Mapping[str, float] | Sequence[float], requested_steps: int
) -> ColorRamp:
    """基準色を中心に暗→明へ並ぶ色ランプを返す。

    Parameters
    ----------
    base : HSBColor or sequence
        ランプ中央に置く基準色。
    requested_steps : int
        要求する色数（>= 1）。偶数なら +1 して奇数にする。

    Returns
    -------
    tuple[HSBColor, ...]
        長さが奇数で、中央が base、添字が増えるほど明るいランプ。

    Raises
    ------
    InvalidArgument
        requested_steps が 1 以上の整数でない場合。
    """

    if isinstance(requested_steps, bool) or not isinstance(requested_steps, numbers.Integral):
        raise InvalidArgument(f"requested_steps は整数である必要があります: got={requested_steps!r}")
    requested_steps = int(requested_steps)
    if requested_steps < 1:
        raise InvalidArgument(f"requested_steps は 1 以上である必要があります: got={requested_steps}")

    color = _coerce_color(base)

    # 偶数なら奇数に揃え、base の両側に同数の色を置く。
    ramp_length = requested_steps + 1 if requested_steps % 2 == 0 else requested_steps
    half = (ramp_length - 1) // 2

    brightness = color.brightness
    lighter: list[HSBColor] = []
    darker: list[HSBColor] = []
    for i in range(1, half + 1):
        fraction = i / half
        light_amount = (LIGHT_BRIGHTNESS_TARGET - brightness) * fraction / 100.0
        dark_amount = (DARK_BRIGHTNESS_TARGET - brightness) * fraction / 100.0
        lighter.append(adjust_brightness_with_hue_shift(color, light_amount))
        darker.append(adjust_brightness_with_hue_shift(color, dark_amount))

    return tuple(reversed(darker)) + (color,) + tuple(lighter)


def map_unit_to_index(unit_value: float, length: int) -> int:
    """[0, 1] の値を長さ length の列の添字へ写して返す。"""

    if int(length) < 1:
        raise InvalidArgument(f"length は 1 以上である必要があります: got={length!r}")
    if math.isnan(unit_value):
        return 0
    return int(clamp(math.floor(float(unit_value) * int(length)), 0, int(length) - 1))


class ColorRampBuilder:
    """`build_ramp` と `adjust_brightness_with_hue_shift` をまとめた名前空間。"""

    build_ramp = staticmethod(build_ramp)
    adjust_brightness_with_hue_shift = staticmethod(adjust_brightness_with_hue_shift)


__all__ = [
    "ColorRamp",
    "ColorRampBuilder",
    "adjust_brightness_with_hue_shift",
    "build_ramp",
    "clamp",
    "lerp",
    "map_unit_to_index",
]
