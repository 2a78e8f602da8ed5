# どこで: `src/fxsketch/__init__.py`。
# 何を: ルート `fxsketch` パッケージを定義し、よく使う名前を再エクスポートする。
# なぜ: import 起点を `fxsketch` に統一するため。

from __future__ import annotations

from fxsketch.api import RunResult, SketchContext, SketchParams, run
from fxsketch.core.color import HSBColor
from fxsketch.core.color_ramp import ColorRampBuilder, adjust_brightness_with_hue_shift, build_ramp
from fxsketch.core.errors import ConfigurationError, ExportError, InvalidArgument
from fxsketch.core.noise import NoiseField
from fxsketch.core.noise_mapper import NoiseMapper, Range, RangeMapper
from fxsketch.core.random_source import RandomSource

__all__ = [
    "ColorRampBuilder",
    "ConfigurationError",
    "ExportError",
    "HSBColor",
    "InvalidArgument",
    "NoiseField",
    "NoiseMapper",
    "RandomSource",
    "Range",
    "RangeMapper",
    "RunResult",
    "SketchContext",
    "SketchParams",
    "adjust_brightness_with_hue_shift",
    "build_ramp",
    "run",
]
