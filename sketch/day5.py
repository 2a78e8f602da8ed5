"""
どこで: `sketch/day5.py`。
何を: Vera Molnár へのオマージュ。揺らいだ正方形のグリッド（(Des)Ordres, 1974）の上に、
回転する矩形の輪（Mouvement giratoire, 1959）を重ねる。
"""

import logging
import math

from fxsketch import HSBColor, SketchParams, run

PARAMS = SketchParams(
    name="VeraMolnar-002",
    seed="Vera Molnar",
    fps=9,
    duration_in_frames=9 * 4 * 4,
    is_animated=True,
    export_frames=True,
)

MAIN_COLOR = HSBColor.from_hex("#B11F22")
BACKGROUND = HSBColor.from_hex("#F2F0EF")
GRID_STROKE = HSBColor.from_hex("#D4D4D4")

SQUARE_JITTER = 6
MAX_SQUARES = 6
RECT_SIZE = (76, 14)


def draw_square(ctx, cx, cy, size):
    canvas = ctx.canvas
    rnd = ctx.random
    canvas.push()
    canvas.translate(cx, cy)
    canvas.rotate(rnd.random_between(-SQUARE_JITTER, SQUARE_JITTER))
    canvas.shear_x(rnd.random_between(-SQUARE_JITTER, SQUARE_JITTER))
    canvas.shear_y(rnd.random_between(-SQUARE_JITTER, SQUARE_JITTER))
    canvas.rect(0, 0, size)
    canvas.pop()


def draw_des_ordres(ctx, grid_size=18):
    cell = ctx.width / grid_size
    for row in range(grid_size):
        for col in range(grid_size):
            cx = col * cell + cell * 0.5
            cy = row * cell + cell * 0.5
            count = ctx.random.random_between(0.5 * MAX_SQUARES, MAX_SQUARES)
            n = 0
            while n < count:
                draw_square(ctx, cx, cy, ctx.random.random_between(cell * 0.1, cell))
                n += 1


def draw_ring(ctx, center, radius, steps, angle_offset):
    canvas = ctx.canvas
    step = 360 / steps
    focus = max(1, steps // 3)

    canvas.fill(MAIN_COLOR)
    canvas.no_stroke()
    for n in range(steps):
        angle = step * n - 90
        x = center[0] + math.cos(math.radians(angle)) * radius
        y = center[1] + math.sin(math.radians(angle)) * radius

        canvas.push()
        canvas.translate(x, y)
        canvas.rotate(angle + angle_offset)
        if ctx.frame_count % focus == (steps - n) % focus:
            canvas.scale(1.2)
        canvas.rect(0, 0, *RECT_SIZE)
        canvas.pop()


def draw(ctx):
    canvas = ctx.canvas
    canvas.background(BACKGROUND)
    canvas.rect_mode("center")

    canvas.push()
    canvas.stroke(GRID_STROKE)
    canvas.no_fill()
    draw_des_ordres(ctx, 27)
    canvas.pop()

    draw_ring(
        ctx,
        (ctx.width * 0.5, ctx.height * 0.5),
        radius=ctx.width * 0.4,
        steps=int(ctx.params.fps * 4),
        angle_offset=-18,
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(draw, PARAMS)
