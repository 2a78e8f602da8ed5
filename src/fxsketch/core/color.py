"""
どこで: `src/fxsketch/core/color.py`。
何を: HSB（hue/saturation/brightness）色の値型 `HSBColor` と RGB / hex 変換を提供する。
なぜ: 色ランプの計算を HSB のまま行い、出力直前だけ RGB に落とすため。
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass, replace

HUE_MAX = 360.0
SATURATION_MAX = 100.0
BRIGHTNESS_MAX = 100.0


@dataclass(frozen=True, slots=True)
class HSBColor:
    """HSB 色。

    Parameters
    ----------
    hue : float
        色相 [deg]。0..360。
    saturation : float
        彩度。0..100。
    brightness : float
        明度。0..100。
    alpha : float
        不透明度。0..1（描画時のみ使用）。
    """

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "brightness", "alpha"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if not 0.0 <= self.hue <= HUE_MAX:
            raise ValueError(f"hue は 0..360 である必要があります: got={self.hue}")
        if not 0.0 <= self.saturation <= SATURATION_MAX:
            raise ValueError(f"saturation は 0..100 である必要があります: got={self.saturation}")
        if not 0.0 <= self.brightness <= BRIGHTNESS_MAX:
            raise ValueError(f"brightness は 0..100 である必要があります: got={self.brightness}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha は 0..1 である必要があります: got={self.alpha}")

    def with_alpha(self, alpha: float) -> HSBColor:
        return replace(self, alpha=float(alpha))

    def to_rgb01(self) -> tuple[float, float, float]:
        """0..1 float の RGB に変換して返す。"""

        h = (self.hue % HUE_MAX) / HUE_MAX
        r, g, b = colorsys.hsv_to_rgb(h, self.saturation / SATURATION_MAX, self.brightness / BRIGHTNESS_MAX)
        return float(r), float(g), float(b)

    @classmethod
    def from_rgb01(cls, rgb: tuple[float, float, float], alpha: float = 1.0) -> HSBColor:
        """0..1 float の RGB から HSBColor を作る。"""

        r, g, b = (min(max(float(v), 0.0), 1.0) for v in rgb)
        h, s, v = colorsys.rgb_to_hsv(r, g, b)
        return cls(h * HUE_MAX, s * SATURATION_MAX, v * BRIGHTNESS_MAX, alpha)

    @classmethod
    def from_hex(cls, text: str, alpha: float = 1.0) -> HSBColor:
        """`#RRGGBB` 形式の文字列から HSBColor を作る。"""

        s = str(text).strip().lstrip("#")
        if len(s) != 6:
            raise ValueError(f"hex color は #RRGGBB である必要があります: got={text!r}")
        try:
            r, g, b = (int(s[i : i + 2], 16) for i in (0, 2, 4))
        except ValueError as exc:
            raise ValueError(f"hex color は #RRGGBB である必要があります: got={text!r}") from exc
        return cls.from_rgb01(rgb255_to_rgb01((r, g, b)), alpha)

    @classmethod
    def gray(cls, level: float, alpha: float = 1.0) -> HSBColor:
        """明度 level（0..100）の無彩色を返す。"""

        return cls(0.0, 0.0, level, alpha)


def rgb01_to_rgb255(rgb: tuple[float, float, float]) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def rgb255_to_rgb01(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    """0..255 int の RGB を 0..1 float の RGB に変換して返す。"""

    r, g, b = rgb
    return float(r) / 255.0, float(g) / 255.0, float(b) / 255.0


def to_hex(color: HSBColor) -> str:
    """HSBColor を `#RRGGBB` に変換して返す。"""

    r, g, b = rgb01_to_rgb255(color.to_rgb01())
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = ["HSBColor", "rgb01_to_rgb255", "rgb255_to_rgb01", "to_hex"]
