"""core.frame_clock をテスト。"""

from __future__ import annotations

import pytest

from fxsketch.core.frame_clock import FrameClock


def test_frame_clock_starts_at_frame_one() -> None:
    clock = FrameClock(fps=24)
    assert clock.fps == 24.0
    assert clock.frame_count == 1
    assert clock.t() == 0.0


def test_frame_clock_tick_advances_fixed_step() -> None:
    clock = FrameClock(fps=4)
    for _ in range(3):
        clock.tick()
    assert clock.frame_count == 4
    assert clock.t() == pytest.approx(0.75)


@pytest.mark.parametrize("fps", [0, -1.0])
def test_frame_clock_rejects_non_positive_fps(fps: float) -> None:
    with pytest.raises(ValueError):
        FrameClock(fps=fps)
