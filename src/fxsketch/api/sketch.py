"""
どこで: `src/fxsketch/api/sketch.py`。
何を: スケッチのパラメータセット `SketchParams` と、setup/draw に渡す実行コンテキスト `SketchContext` を定義する。
なぜ: 乱数源・ノイズ源・キャンバスをスケッチごとに明示的に所有させ、グローバル状態に頼らないため。
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from fxsketch.core.canvas import Canvas
from fxsketch.core.noise import NoiseField
from fxsketch.core.random_source import RandomSource

# noise_seed 未指定時に乱数列から引くシードの上限。
NOISE_SEED_RANGE = 17.0


@dataclass(frozen=True, slots=True)
class SketchParams:
    """1 つのスケッチ実行を決めるパラメータセット。

    Parameters
    ----------
    name : str
        パラメータセット名。出力ファイル名に使う。
    seed : str | int
        乱数列のシード。
    width, height : int
        キャンバス寸法。
    fps : float
        フレームレート。`t` の計算に使う。
    duration_in_frames : int
        アニメーション / フレーム書き出し時の総フレーム数。
    is_animated : bool
        False かつ export_frames=False なら 1 フレームだけ描く。
    export_frames : bool
        True なら各フレームを PNG で保存する。
    render_as_vector : bool
        True なら保存形式を SVG にする（フレーム書き出しとは併用不可）。
    noise_seed : int | float | str | None
        ノイズのシード。None なら乱数列から引く。
    noise_octaves, noise_falloff : int | float | None
        ノイズのディテール。None なら runtime config の値。
    extra : Mapping[str, Any]
        スケッチ固有の値。
    """

    name: str
    seed: str | int
    width: int = 540
    height: int = 540
    fps: float = 24.0
    duration_in_frames: int = 300
    is_animated: bool = False
    export_frames: bool = False
    render_as_vector: bool = False
    noise_seed: int | float | str | None = None
    noise_octaves: int | None = None
    noise_falloff: float | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if int(self.width) <= 0 or int(self.height) <= 0:
            raise ValueError(f"width/height は正の値である必要があります: got={(self.width, self.height)!r}")
        if float(self.fps) <= 0:
            raise ValueError(f"fps は正の値である必要があります: got={self.fps!r}")
        if int(self.duration_in_frames) < 1:
            raise ValueError(f"duration_in_frames は 1 以上である必要があります: got={self.duration_in_frames!r}")

    def to_dict(self) -> dict[str, Any]:
        """JSON 保存向けの dict を返す。"""

        out = asdict(self)
        out["extra"] = dict(self.extra)
        return out


@dataclass(slots=True)
class SketchContext:
    """setup / draw に渡す実行コンテキスト。

    `frame_count` は 1 始まり、`t` は秒。`state` はスケッチが自由に使う入れ物。
    """

    params: SketchParams
    canvas: Canvas
    random: RandomSource
    noise: NoiseField
    frame_count: int = 1
    t: float = 0.0
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    @classmethod
    def create(
        cls,
        params: SketchParams,
        *,
        default_octaves: int,
        default_falloff: float,
    ) -> SketchContext:
        """params から乱数源・ノイズ源・キャンバスを組み立てて返す。

        Notes
        -----
        noise_seed が未指定の場合は、シード済み乱数列の最初の 1 値からノイズのシードを決める。
        これによりノイズ場も params.seed だけで再現できる。
        """

        random = RandomSource(params.seed)
        noise_seed = params.noise_seed
        if noise_seed is None:
            noise_seed = random.random_between(0.0, NOISE_SEED_RANGE)
        noise = NoiseField(
            noise_seed,
            octaves=params.noise_octaves if params.noise_octaves is not None else default_octaves,
            falloff=params.noise_falloff if params.noise_falloff is not None else default_falloff,
        )
        canvas = Canvas(params.width, params.height)
        return cls(params=params, canvas=canvas, random=random, noise=noise)


__all__ = ["NOISE_SEED_RANGE", "SketchContext", "SketchParams"]
