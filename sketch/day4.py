"""
どこで: `sketch/day4.py`。
何を: ノイズ値で色ランプを引き、各セルを RGB サブピクセル 3 本で描く "pixel fire"。
"""

import logging

from fxsketch import HSBColor, SketchParams, build_ramp, run
from fxsketch.core.color_ramp import map_unit_to_index

PARAMS = SketchParams(
    name="pixel fire 003",
    seed="lets find a good one...",
    fps=10,
    duration_in_frames=20 * 10,
    is_animated=True,
    export_frames=True,
    extra={"color_ramp_item_count": 17},
)

RAMP_COUNT = 4
GRID_SIZE = 54
NOISE_INCREMENT = 0.0255
LINE_WIDTH = 2
LINE_HEIGHT = 6


def setup(ctx):
    steps = int(ctx.params.extra["color_ramp_item_count"])
    base_hue = ctx.random.random_between(0, 360, integer=True)
    ramps = []
    for _ in range(RAMP_COUNT):
        ramp = build_ramp(HSBColor(base_hue, ctx.random.random_between(40, 60), 60), steps)
        complement = build_ramp(
            HSBColor((base_hue + 180) % 360, ctx.random.random_between(50, 80), 80),
            steps,
        )
        ramps.append(ramp + complement)
        base_hue = (base_hue + 60) % 360
    ctx.state["ramps"] = ramps


def draw_pixel(canvas, color, x, y, rotate=False):
    r, g, b = color.to_rgb01()
    channels = (
        HSBColor.from_rgb01((r, 0.0, 0.0)),
        HSBColor.from_rgb01((0.0, g, 0.0)),
        HSBColor.from_rgb01((0.0, 0.0, b)),
    )
    for i, sub in enumerate(channels):
        canvas.fill(sub)
        if rotate:
            canvas.rect(x + 1, y + 1 + i * LINE_WIDTH, LINE_HEIGHT, LINE_WIDTH)
        else:
            canvas.rect(x + 1 + i * LINE_WIDTH, y + 1, LINE_WIDTH, LINE_HEIGHT)


def draw_field(ctx, ramp, origin=(0.0, 0.0)):
    cell_size = ctx.width / GRID_SIZE
    noise_z = ctx.frame_count * NOISE_INCREMENT
    ox, oy = origin
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = ctx.noise(col * NOISE_INCREMENT, row * NOISE_INCREMENT, noise_z)
            color = ramp[map_unit_to_index(value, len(ramp))]
            draw_pixel(
                ctx.canvas,
                color,
                ox + col * cell_size,
                oy + row * cell_size,
                rotate=(col + row) % 2 == 0,
            )


def draw(ctx):
    ctx.canvas.background(HSBColor(280, 20, 20))
    ctx.canvas.no_stroke()
    draw_field(ctx, ctx.state["ramps"][0])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(draw, PARAMS, setup=setup)
