"""
どこで: `sketch/day1and2.py`。
何を: ノイズで明度を揺らしたセルのグリッドを描く。円の内側だけ色相シフト付きで明暗を付ける。
"""

import logging
import math

from fxsketch import HSBColor, SketchParams, adjust_brightness_with_hue_shift, run

PARAMS = SketchParams(
    name="set one",
    seed="hello world",
    fps=24,
    duration_in_frames=30 * 10,
    is_animated=True,
)

GRID_SIZE = 54
NOISE_INCREMENT = 0.015
# 2 本目のノイズ場を 1 本目から十分離すための z オフセット。
SECOND_FIELD_OFFSET = 87594.0


def _hue_wave(frame: int) -> float:
    s = math.sin(math.radians(2 * frame))
    c = math.cos(math.radians(4 * frame))
    return 0.5 + 0.5 * s * c * c


def draw(ctx):
    canvas = ctx.canvas
    canvas.background(HSBColor.gray(0))
    canvas.no_stroke()

    cell_size = ctx.width / GRID_SIZE
    cxy = ctx.width * 0.5 - ((ctx.width * 0.5) % (cell_size + 1))
    noise_z = ctx.frame_count * NOISE_INCREMENT
    hue = _hue_wave(ctx.frame_count) * 360

    rows = math.ceil(ctx.height / cell_size)
    cols = math.ceil(ctx.width / cell_size)
    for row in range(rows):
        y = row * cell_size
        dy = cxy - y
        noise_y = row * NOISE_INCREMENT
        for col in range(cols):
            x = col * cell_size
            dx = cxy - x
            noise_x = col * NOISE_INCREMENT

            value = ctx.noise(noise_x, noise_y, noise_z)
            value2 = ctx.noise(noise_x, noise_y, noise_z + SECOND_FIELD_OFFSET)
            base = HSBColor(hue, 100, value2 * 100)

            if dx * dx + dy * dy > cxy * cxy:
                paint = base
            else:
                paint = adjust_brightness_with_hue_shift(base, (value - 0.5) * 1.5)

            canvas.fill(paint)
            canvas.rect(x, y, cell_size)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(draw, PARAMS, save=True)
