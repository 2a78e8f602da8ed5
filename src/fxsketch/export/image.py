"""
どこで: `src/fxsketch/export/image.py`。
何を: Canvas を拡張子に応じて SVG / PNG で保存する。PNG は SVG を書いてから resvg で焼く。
なぜ: フレーム連番も静止画も、SVG を元データとして同じ経路で書き出すため。
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from fxsketch.core.canvas import Canvas
from fxsketch.core.color import HSBColor, to_hex
from fxsketch.core.runtime_config import runtime_config
from fxsketch.export.svg import export_svg

RESVG = "resvg"


def png_output_size(canvas_size: tuple[int, int], *, scale: float | None = None) -> tuple[int, int]:
    """PNG のピクセル寸法 `(width * scale, height * scale)` を返す。

    scale 省略時は `export.png.scale` を使う。
    """

    width, height = (int(v) for v in canvas_size)
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas_size は正の (width, height) である必要があります: got={canvas_size!r}")
    factor = float(runtime_config().png_scale if scale is None else scale)
    if factor <= 0:
        raise ValueError(f"scale は正の値である必要があります: got={scale!r}")
    return int(width * factor), int(height * factor)


def _resvg_command(
    svg_path: Path,
    png_path: Path,
    size: tuple[int, int],
    background: HSBColor | None,
) -> list[str]:
    width, height = (int(v) for v in size)
    if width <= 0 or height <= 0:
        raise ValueError(f"output_size は正の (width, height) である必要があります: got={size!r}")
    options = ["--width", str(width), "--height", str(height)]
    if background is not None:
        # 透過 PNG にしない場合だけ背景を焼き込む。
        options += ["--background", to_hex(background)]
    return [RESVG, *options, str(svg_path), str(png_path)]


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color: HSBColor | None = None,
) -> Path:
    """resvg で SVG を PNG にラスタライズし、PNG のパスを返す。

    Raises
    ------
    RuntimeError
        resvg が PATH に無い、または非ゼロ終了した場合。
    """

    src = Path(svg_path)
    dst = Path(png_path)
    dst.parent.mkdir(parents=True, exist_ok=True)

    cmd = _resvg_command(src, dst, output_size, background_color)
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise RuntimeError(f"{RESVG} が見つかりません。インストールして PATH を通してください") from exc

    if proc.returncode != 0:
        message = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"{RESVG} が失敗しました: code={proc.returncode} {message}".rstrip())
    return dst


def export_image(canvas: Canvas, path: str | Path, *, scale: float | None = None) -> Path:
    """Canvas を `.svg` か `.png` で保存し、保存先を返す。

    Notes
    -----
    `.png` の場合は同じ stem の `.svg` も残る。背景色は canvas.background_color を使い、
    未設定なら透過のまま焼く。
    """

    target = Path(path)
    suffix = target.suffix.lower()
    if suffix not in (".svg", ".png"):
        raise ValueError(f"未対応の画像フォーマット: {suffix!r}")

    svg_path = export_svg(canvas, target.with_suffix(".svg"))
    if suffix == ".svg":
        return svg_path
    return rasterize_svg_to_png(
        svg_path,
        target,
        output_size=png_output_size(canvas.size, scale=scale),
        background_color=canvas.background_color,
    )


__all__ = ["export_image", "png_output_size", "rasterize_svg_to_png"]
