"""
どこで: `src/fxsketch/core/canvas.py`。
何を: p5 風の描画呼び出し（fill/stroke/rect/circle/vertex/push/pop など）を図形列として記録する `Canvas` を提供する。
なぜ: ウィンドウを持たずにスケッチを描画し、SVG/PNG へ書き出せるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np

from fxsketch.core.color import HSBColor

RECT_MODE_CORNER = "corner"
RECT_MODE_CENTER = "center"

_DEFAULT_FILL = HSBColor.gray(100.0)
_DEFAULT_STROKE = HSBColor.gray(0.0)


@dataclass(frozen=True, slots=True, eq=False)
class Shape:
    """記録済みの図形 1 つ。

    Notes
    -----
    - kind="rect": (x, y) は左上、(w, h) は寸法。
    - kind="circle": (x, y) は中心、w は直径。
    - kind="path": points は float64 shape (N, 2)。closed で閉路かを表す。
    - transform は SVG の transform 属性文字列（恒等なら空文字）。
    """

    kind: str
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    points: np.ndarray | None = None
    closed: bool = False
    fill: HSBColor | None = None
    stroke: HSBColor | None = None
    stroke_weight: float = 1.0
    transform: str = ""


@dataclass(frozen=True, slots=True)
class _DrawState:
    fill: HSBColor | None = _DEFAULT_FILL
    stroke: HSBColor | None = _DEFAULT_STROKE
    stroke_weight: float = 1.0
    rect_mode: str = RECT_MODE_CORNER
    transforms: tuple[str, ...] = field(default_factory=tuple)


def _num(value: float) -> str:
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class Canvas:
    """図形列を記録するヘッドレスなキャンバス。

    Parameters
    ----------
    width, height : int
        キャンバス寸法（ピクセル）。
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"canvas size は正の値である必要があります: got={(width, height)!r}")
        self.width = int(width)
        self.height = int(height)
        self.background_color: HSBColor | None = None
        self.shapes: list[Shape] = []
        self._state = _DrawState()
        self._stack: list[_DrawState] = []
        self._vertices: list[tuple[float, float]] | None = None

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def clear(self) -> None:
        """図形・背景・描画状態をすべて初期化する。"""

        self.background_color = None
        self.shapes = []
        self._state = _DrawState()
        self._stack = []
        self._vertices = None

    # --- style ---

    def background(self, color: HSBColor) -> None:
        """背景色を設定し、それまでの図形を塗りつぶす（破棄する）。"""

        self.background_color = color
        self.shapes = []

    def fill(self, color: HSBColor) -> None:
        self._state = replace(self._state, fill=color)

    def no_fill(self) -> None:
        self._state = replace(self._state, fill=None)

    def stroke(self, color: HSBColor) -> None:
        self._state = replace(self._state, stroke=color)

    def no_stroke(self) -> None:
        self._state = replace(self._state, stroke=None)

    def stroke_weight(self, weight: float) -> None:
        self._state = replace(self._state, stroke_weight=float(weight))

    def rect_mode(self, mode: str) -> None:
        m = str(mode).lower().strip()
        if m not in (RECT_MODE_CORNER, RECT_MODE_CENTER):
            raise ValueError(f"未対応の rect_mode: {mode!r}")
        self._state = replace(self._state, rect_mode=m)

    # --- transform ---

    def push(self) -> None:
        self._stack.append(self._state)

    def pop(self) -> None:
        if not self._stack:
            raise RuntimeError("push() と対応しない pop() です")
        self._state = self._stack.pop()

    def _append_transform(self, op: str) -> None:
        self._state = replace(self._state, transforms=self._state.transforms + (op,))

    def translate(self, x: float, y: float) -> None:
        self._append_transform(f"translate({_num(x)} {_num(y)})")

    def rotate(self, degrees: float) -> None:
        self._append_transform(f"rotate({_num(degrees)})")

    def scale(self, sx: float, sy: float | None = None) -> None:
        sy_ = sx if sy is None else sy
        self._append_transform(f"scale({_num(sx)} {_num(sy_)})")

    def shear_x(self, degrees: float) -> None:
        self._append_transform(f"skewX({_num(degrees)})")

    def shear_y(self, degrees: float) -> None:
        self._append_transform(f"skewY({_num(degrees)})")

    # --- shapes ---

    def _add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def _styled(self, kind: str, **kwargs) -> Shape:
        state = self._state
        return Shape(
            kind=kind,
            fill=state.fill,
            stroke=state.stroke,
            stroke_weight=state.stroke_weight,
            transform=" ".join(state.transforms),
            **kwargs,
        )

    def rect(self, x: float, y: float, w: float, h: float | None = None) -> Shape:
        """矩形を描く。h 省略時は正方形。"""

        h_ = w if h is None else h
        x_, y_ = float(x), float(y)
        if self._state.rect_mode == RECT_MODE_CENTER:
            x_ -= float(w) * 0.5
            y_ -= float(h_) * 0.5
        return self._add(self._styled("rect", x=x_, y=y_, w=float(w), h=float(h_)))

    def circle(self, x: float, y: float, diameter: float) -> Shape:
        d = abs(float(diameter))
        return self._add(self._styled("circle", x=float(x), y=float(y), w=d, h=d))

    def begin_shape(self) -> None:
        if self._vertices is not None:
            raise RuntimeError("begin_shape() が閉じられていません")
        self._vertices = []

    def vertex(self, x: float, y: float) -> None:
        if self._vertices is None:
            raise RuntimeError("vertex() は begin_shape() の後で呼ぶ必要があります")
        self._vertices.append((float(x), float(y)))

    def end_shape(self, close: bool = False) -> Shape | None:
        """begin_shape 以降の頂点を 1 本のパスとして記録する。頂点 2 未満なら何もしない。"""

        if self._vertices is None:
            raise RuntimeError("end_shape() は begin_shape() の後で呼ぶ必要があります")
        vertices = self._vertices
        self._vertices = None
        if len(vertices) < 2:
            return None
        points = np.asarray(vertices, dtype=np.float64)
        points.setflags(write=False)
        return self._add(self._styled("path", points=points, closed=bool(close)))


__all__ = ["Canvas", "RECT_MODE_CENTER", "RECT_MODE_CORNER", "Shape"]
