"""
どこで: `src/fxsketch/export/svg.py`。
何を: Canvas に記録された図形列を SVG として保存する関数を提供する。
なぜ: ウィンドウ依存なしの headless export（SVG）を正とし、PNG もここから作れるようにするため。
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from fxsketch.core.canvas import Canvas, Shape
from fxsketch.core.color import HSBColor, to_hex

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _paint_attrs(shape: Shape) -> list[str]:
    """fill / stroke 関連の属性文字列を返す。"""
    attrs: list[str] = []
    attrs.extend(_color_attrs("fill", shape.fill))
    attrs.extend(_color_attrs("stroke", shape.stroke))
    if shape.stroke is not None:
        attrs.append(f'stroke-width="{_fmt(shape.stroke_weight)}"')
        attrs.append('stroke-linecap="round"')
        attrs.append('stroke-linejoin="round"')
    if shape.transform:
        attrs.append(f'transform="{shape.transform}"')
    return attrs


def _color_attrs(name: str, color: HSBColor | None) -> list[str]:
    if color is None:
        return [f'{name}="none"']
    attrs = [f'{name}="{to_hex(color)}"']
    if color.alpha < 1.0:
        attrs.append(f'{name}-opacity="{_fmt(color.alpha)}"')
    return attrs


def _points_to_d(points: np.ndarray, *, closed: bool) -> str:
    """パス頂点（shape (N,2)）を SVG path の d 属性へ変換して返す。"""
    parts = [f"M {_fmt(points[0, 0])} {_fmt(points[0, 1])}"]
    for xy in points[1:]:
        parts.append(f"L {_fmt(xy[0])} {_fmt(xy[1])}")
    if closed:
        parts.append("Z")
    return " ".join(parts)


def _shape_element(shape: Shape) -> str:
    attrs = " ".join(_paint_attrs(shape))
    if shape.kind == "rect":
        return (
            f'  <rect x="{_fmt(shape.x)}" y="{_fmt(shape.y)}" '
            f'width="{_fmt(shape.w)}" height="{_fmt(shape.h)}" {attrs} />'
        )
    if shape.kind == "circle":
        return (
            f'  <circle cx="{_fmt(shape.x)}" cy="{_fmt(shape.y)}" '
            f'r="{_fmt(shape.w * 0.5)}" {attrs} />'
        )
    if shape.kind == "path" and shape.points is not None:
        d = _points_to_d(np.asarray(shape.points, dtype=np.float64), closed=shape.closed)
        return f'  <path d="{d}" {attrs} />'
    raise ValueError(f"未対応の shape kind: {shape.kind!r}")


def canvas_to_svg(canvas: Canvas) -> str:
    """Canvas を SVG 文字列に変換して返す。"""
    w = int(canvas.width)
    h = int(canvas.height)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">')
    if canvas.background_color is not None:
        lines.append(
            f'  <rect x="0" y="0" width="{w}" height="{h}" '
            + " ".join(_color_attrs("fill", canvas.background_color))
            + " />"
        )
    for shape in canvas.shapes:
        lines.append(_shape_element(shape))
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(canvas: Canvas, path: str | Path) -> Path:
    """Canvas を SVG として保存する。

    Parameters
    ----------
    canvas : Canvas
        描画済みのキャンバス。
    path : str or Path
        出力先パス。親ディレクトリは作成する。

    Returns
    -------
    Path
        保存先パス。
    """
    _path = Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(canvas_to_svg(canvas))
    return _path


__all__ = ["canvas_to_svg", "export_svg"]
