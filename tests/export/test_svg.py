from __future__ import annotations

from pathlib import Path

from fxsketch.core.canvas import Canvas
from fxsketch.core.color import HSBColor
from fxsketch.export.svg import canvas_to_svg, export_svg


# `fxsketch.export.svg`（Canvas → SVG）をテストする。

def test_empty_canvas_svg_has_header_and_viewbox() -> None:
    text = canvas_to_svg(Canvas(300, 200))
    lines = text.splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert lines[1] == '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 200" width="300" height="200">'
    assert lines[-1] == "</svg>"
    assert text.endswith("\n")


def test_background_is_emitted_as_full_rect() -> None:
    canvas = Canvas(10, 20)
    canvas.background(HSBColor.gray(0))
    lines = canvas_to_svg(canvas).splitlines()
    assert lines[2] == '  <rect x="0" y="0" width="10" height="20" fill="#000000" />'


def test_rect_with_fill_and_transform() -> None:
    canvas = Canvas(10, 10)
    canvas.fill(HSBColor(0.0, 100.0, 100.0))
    canvas.no_stroke()
    canvas.translate(5, 5)
    canvas.rect(0, 0, 2, 3)

    line = canvas_to_svg(canvas).splitlines()[2]
    assert line == (
        '  <rect x="0.000" y="0.000" width="2.000" height="3.000" '
        'fill="#FF0000" stroke="none" transform="translate(5 5)" />'
    )


def test_circle_with_stroke_and_alpha() -> None:
    canvas = Canvas(10, 10)
    canvas.no_fill()
    canvas.stroke(HSBColor.gray(100.0, alpha=0.25))
    canvas.stroke_weight(2)
    canvas.circle(4, 5, 6)

    line = canvas_to_svg(canvas).splitlines()[2]
    assert line.startswith('  <circle cx="4.000" cy="5.000" r="3.000" fill="none" ')
    assert 'stroke="#FFFFFF" stroke-opacity="0.250" stroke-width="2.000"' in line
    assert 'stroke-linecap="round"' in line


def test_path_is_emitted_with_close_command() -> None:
    canvas = Canvas(10, 10)
    canvas.begin_shape()
    canvas.vertex(0, 0)
    canvas.vertex(1.5, -0.0001)
    canvas.vertex(2, 3)
    canvas.end_shape(close=True)

    line = canvas_to_svg(canvas).splitlines()[2]
    assert 'd="M 0.000 0.000 L 1.500 0.000 L 2.000 3.000 Z"' in line


def test_export_svg_creates_parent_directories(tmp_path: Path) -> None:
    canvas = Canvas(10, 10)
    canvas.rect(0, 0, 1)
    out = export_svg(canvas, tmp_path / "a" / "b" / "out.svg")
    assert out.is_file()
    assert out.read_text(encoding="utf-8") == canvas_to_svg(canvas)
