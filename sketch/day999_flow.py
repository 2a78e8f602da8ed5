"""
どこで: `sketch/day999_flow.py`。
何を: 輪（またはグリッド）状に並べた点をノイズ場の角度・距離で繰り返し動かし、その軌跡を線で描く。
"""

import logging
import math

from fxsketch import HSBColor, NoiseMapper, SketchParams, run

PARAM_SETS = [
    SketchParams(
        name="warble",
        seed="0000000stripey cask and stuff or whatever!",
        fps=30,
        duration_in_frames=30 * 10,
        extra={
            "noise_range": (1.0, 1.0),
            "ring": {"steps": 45, "radius_fraction": 0.2},
            "grid": None,
        },
    ),
    SketchParams(
        name="warble",
        seed="stripey cask",
        fps=30,
        duration_in_frames=30 * 10,
        extra={
            "noise_range": (4.0, 4.0),
            "ring": {"steps": 90, "radius_fraction": 0.2},
            "grid": None,
        },
    ),
]

PARAMS = PARAM_SETS[-1]

ITERATIONS = 40
STEP_DISTANCE = 8
ANGLE_SCALE = 720
DEPTH_STEP = 0.001


def setup(ctx):
    noise_x, noise_y = ctx.params.extra["noise_range"]
    ctx.state["mapper"] = NoiseMapper(
        (0, ctx.width),
        (0, ctx.height),
        (0, noise_x),
        (0, noise_y),
        noise=ctx.noise,
        random=ctx.random,
    )
    # 毎フレーム空にして詰め直す点バッファ。
    ctx.state["points"] = []


def fill_grid(points, width, height, steps, spacing):
    for row in range(steps):
        for col in range(steps):
            points.append(
                [
                    width * 0.5 - steps * 0.5 * spacing + col * spacing,
                    height * 0.5 - steps * 0.5 * spacing + row * spacing,
                ]
            )


def fill_ring(points, width, height, steps, radius_fraction):
    step = 360 / steps
    radius = width * radius_fraction
    for i in range(steps):
        a = math.radians(i * step)
        points.append([round(math.cos(a) * radius) + width * 0.5, round(math.sin(a) * radius) + height * 0.5])


def draw(ctx):
    canvas = ctx.canvas
    canvas.background(HSBColor.gray(0))
    canvas.no_fill()
    canvas.stroke(HSBColor.gray(180 / 255 * 100))

    mapper = ctx.state["mapper"]
    points = ctx.state["points"]
    points.clear()

    ring = ctx.params.extra.get("ring")
    grid = ctx.params.extra.get("grid")
    if grid:
        fill_grid(points, ctx.width, ctx.height, grid["steps"], grid["spacing"])
    if ring:
        points.clear()
        fill_ring(points, ctx.width, ctx.height, ring["steps"], ring["radius_fraction"])

    for _ in range(ITERATIONS):
        canvas.begin_shape()
        for pt in points:
            distance = STEP_DISTANCE * mapper.sample_at(2 * pt[0], pt[1])
            angle = math.radians(ANGLE_SCALE * mapper.sample_at(pt[0], pt[1]))
            pt[0] += distance * math.cos(angle)
            pt[1] += distance * math.sin(angle)
            canvas.vertex(pt[0], pt[1])
        canvas.end_shape(close=bool(ring))
        mapper.advance_depth(DEPTH_STEP)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run(draw, PARAMS, setup=setup, save=True)
