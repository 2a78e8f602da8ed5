# どこで: `src/fxsketch/core/frame_clock.py`。
# 何を: 固定 fps のフレームタイムライン（frame_count と t）を提供する。
# なぜ: 実時間と切り離し、書き出したフレーム列が常に同じ間隔になるようにするため。

from __future__ import annotations


class FrameClock:
    """固定 fps のフレーム時計。

    Notes
    -----
    `frame_count` は p5 と同じく 1 始まり。`t` は `(frame_count - 1) / fps` 秒。
    """

    def __init__(self, *, fps: float) -> None:
        _fps = float(fps)
        if _fps <= 0:
            raise ValueError(f"fps は正の値である必要があります: got={fps!r}")
        self._fps = _fps
        self._frame_count = 1

    @property
    def fps(self) -> float:
        return float(self._fps)

    @property
    def frame_count(self) -> int:
        """現在のフレーム番号（1-based）を返す。"""

        return int(self._frame_count)

    def t(self) -> float:
        """現在のフレーム時刻 `t`（秒）を返す。"""

        return float(self._frame_count - 1) / float(self._fps)

    def tick(self) -> None:
        """フレームを 1 つ進める。"""

        self._frame_count += 1


__all__ = ["FrameClock"]
