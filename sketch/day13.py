"""
どこで: `sketch/day13.py`。
何を: 2 つのサイン波の和で揺れる半透明の円を左右対称に積み、ゆらぐリボンを描く。
"""

import logging
import math

from fxsketch import HSBColor, SketchParams, run

PARAMS = SketchParams(
    name="set one",
    seed="hello world",
    fps=24,
    duration_in_frames=30 * 10,
    is_animated=True,
)

SATURATION = 64.0
BRIGHTNESS = 75.0
ALPHA = 0.25
AMPLITUDE = 100.0
AMP_X2 = 2 * AMPLITUDE * 0.8
ROW_STEP = 4
MARGIN = 10


def wobble1(x, t):
    return 0.5 * (math.sin(math.radians(2 * x + 3 * t + 5)) + math.sin(math.radians(3 * x + 2 * t + 4)))


def wobble2(x, t):
    return 0.5 * (math.sin(math.radians(7 * x + 3 * t + 5)) + math.sin(math.radians(2 * x + 4 * t + 2)))


def draw(ctx):
    canvas = ctx.canvas
    canvas.background(HSBColor.gray(0))
    canvas.no_stroke()

    cx = ctx.width * 0.5
    for y in range(MARGIN, ctx.height - MARGIN, ROW_STEP):
        x1 = wobble1(y, ctx.frame_count)
        x2 = wobble2(y, ctx.frame_count)

        canvas.fill(HSBColor(abs(x1 * 180 + 180) % 360, SATURATION, BRIGHTNESS, ALPHA))

        offset = x1 * AMPLITUDE
        taper = (ctx.height - y) / ctx.height
        diameter = abs(0.5 * AMPLITUDE * (x1 + x2))
        canvas.circle(cx + (offset - AMP_X2) * taper, y, diameter)
        canvas.circle(cx + (-offset + AMP_X2) * taper, y, diameter)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(draw, PARAMS, save=True)
