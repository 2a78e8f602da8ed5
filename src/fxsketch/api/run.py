"""
どこで: `src/fxsketch/api/run.py`。公開 API のランナー実装。
何を: `setup(ctx)` を 1 回、`draw(ctx)` をフレームごとに呼び、必要ならフレーム画像とパラメータ JSON を保存する。
なぜ: ウィンドウなしでスケッチを回し、連番 PNG や静止画を同じ手順で書き出せるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from fxsketch.api.sketch import SketchContext, SketchParams
from fxsketch.core.errors import ExportError
from fxsketch.core.frame_clock import FrameClock
from fxsketch.core.output_paths import (
    config_output_path,
    output_path,
    output_stem,
    run_timestamp,
    sketch_subdir,
)
from fxsketch.core.runtime_config import runtime_config, set_config_path
from fxsketch.export.image import export_image
from fxsketch.export.params import export_params

_logger = logging.getLogger(__name__)

DrawFn = Callable[[SketchContext], None]
SetupFn = Callable[[SketchContext], None]


@dataclass(slots=True)
class RunResult:
    """run の結果。"""

    frames_rendered: int
    written: list[Path] = field(default_factory=list)
    context: SketchContext | None = None


def _frame_total(params: SketchParams, max_frames: int | None) -> int:
    total = int(params.duration_in_frames) if (params.is_animated or params.export_frames) else 1
    if max_frames is not None:
        total = min(total, int(max_frames))
    return max(total, 0)


def run(
    draw: DrawFn,
    params: SketchParams,
    *,
    setup: SetupFn | None = None,
    config_path: str | Path | None = None,
    max_frames: int | None = None,
    save: bool = False,
) -> RunResult:
    """スケッチをヘッドレスに実行する。

    Parameters
    ----------
    draw : Callable[[SketchContext], None]
        1 フレームを `ctx.canvas` に描くコールバック。
    params : SketchParams
        パラメータセット。
    setup : Callable[[SketchContext], None] | None
        最初のフレームの前に 1 回だけ呼ぶコールバック。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    max_frames : int | None
        描画フレーム数の上限（動作確認用）。
    save : bool
        True の場合、最終フレームの画像（render_as_vector なら SVG、それ以外は PNG）と
        パラメータ JSON を保存する。

    Returns
    -------
    RunResult
        描画フレーム数・保存したパス・最終コンテキスト。

    Raises
    ------
    ExportError
        export_frames と render_as_vector を同時に指定した場合。
    """

    if params.export_frames and params.render_as_vector:
        raise ExportError("ベクタ描画（render_as_vector）ではフレーム書き出しできません")

    set_config_path(config_path)
    cfg = runtime_config()

    ctx = SketchContext.create(
        params,
        default_octaves=cfg.noise_octaves,
        default_falloff=cfg.noise_falloff,
    )
    clock = FrameClock(fps=params.fps)

    stem = output_stem(params.name, params.seed, run_timestamp())
    subdir = sketch_subdir(draw)
    result = RunResult(frames_rendered=0, context=ctx)

    if setup is not None:
        setup(ctx)

    total = _frame_total(params, max_frames)
    if params.export_frames:
        _logger.info("Recording %d frames: %s", total, stem)

    for _ in range(total):
        ctx.frame_count = clock.frame_count
        ctx.t = clock.t()
        ctx.canvas.clear()
        draw(ctx)
        result.frames_rendered += 1

        if params.export_frames:
            path = output_path(kind="png", subdir=subdir, stem=stem, ext="png", frame=clock.frame_count)
            result.written.append(export_image(ctx.canvas, path))
            _logger.debug("Saved frame %d: %s", clock.frame_count, path)

        clock.tick()

    if save and result.frames_rendered > 0:
        ext = "svg" if params.render_as_vector else "png"
        path = output_path(kind=ext, subdir=subdir, stem=stem, ext=ext)
        result.written.append(export_image(ctx.canvas, path))

    if params.export_frames or save:
        result.written.append(
            export_params(params.to_dict(), config_output_path(subdir=subdir, stem=stem))
        )

    if params.export_frames:
        _logger.info("Done.")

    return result


__all__ = ["RunResult", "run"]
