"""
どこで: `src/fxsketch/core/noise.py`。
何を: シード付き 3D フラクタル Perlin ノイズ `NoiseField` を提供する（出力は [0, 1]）。
なぜ: RangeMapper やスケッチへ注入できる、決定的で連続なノイズ源を用意するため。
"""

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[import-untyped]

from fxsketch.core.errors import InvalidArgument
from fxsketch.core.random_source import Seed, seed_to_int

# Ken Perlin improved noise の標準テーブル。
_PERM_256 = [
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
]

_GRAD3_12 = [
    [1, 1, 0],
    [-1, 1, 0],
    [1, -1, 0],
    [-1, -1, 0],
    [1, 0, 1],
    [-1, 0, 1],
    [1, 0, -1],
    [-1, 0, -1],
    [0, 1, 1],
    [0, -1, 1],
    [0, 1, -1],
    [0, -1, -1],
]

NOISE_GRADIENTS_3D = np.asarray(_GRAD3_12, dtype=np.float64)

DEFAULT_OCTAVES = 4
DEFAULT_FALLOFF = 0.5


def permutation_table(seed: Seed = None) -> np.ndarray:
    """長さ 512 の permutation テーブルを返す。

    Notes
    -----
    seed=None なら標準テーブル、それ以外は seed で 0..255 を並べ替えたものを使う。
    どちらも 2 周分を連結して返す（`& 511` の添字をそのまま引けるようにする）。
    """

    if seed is None:
        base = np.asarray(_PERM_256, dtype=np.int32)
    else:
        rng = np.random.default_rng(seed_to_int(seed))
        base = rng.permutation(256).astype(np.int32)
    return np.concatenate([base, base])


@njit(fastmath=True, cache=True)
def fade(t):
    """Perlin ノイズ用のフェード関数。"""
    return t * t * t * (t * (t * 6 - 15) + 10)


@njit(fastmath=True, cache=True)
def _lerp(a, b, t):
    return a + t * (b - a)


@njit(fastmath=True, cache=True)
def grad(hash_val, x, y, z, grad3_array):
    """勾配ベクトルと距離ベクトルの内積。"""
    idx = int(hash_val) % 12
    g = grad3_array[idx]
    return g[0] * x + g[1] * y + g[2] * z


@njit(fastmath=True, cache=True)
def perlin_noise_3d(x, y, z, perm_table, grad3_array):
    """3 次元 Perlin ノイズ（おおよそ [-1, 1]）。"""
    X = int(np.floor(x)) & 255
    Y = int(np.floor(y)) & 255
    Z = int(np.floor(z)) & 255

    x -= np.floor(x)
    y -= np.floor(y)
    z -= np.floor(z)

    u = fade(x)
    v = fade(y)
    w = fade(z)

    A = perm_table[X] + Y
    AA = perm_table[A & 511] + Z
    AB = perm_table[(A + 1) & 511] + Z
    B = perm_table[(X + 1) & 255] + Y
    BA = perm_table[B & 511] + Z
    BB = perm_table[(B + 1) & 511] + Z

    gAA = grad(perm_table[AA & 511], x, y, z, grad3_array)
    gBA = grad(perm_table[BA & 511], x - 1, y, z, grad3_array)
    gAB = grad(perm_table[AB & 511], x, y - 1, z, grad3_array)
    gBB = grad(perm_table[BB & 511], x - 1, y - 1, z, grad3_array)
    gAA1 = grad(perm_table[(AA + 1) & 511], x, y, z - 1, grad3_array)
    gBA1 = grad(perm_table[(BA + 1) & 511], x - 1, y, z - 1, grad3_array)
    gAB1 = grad(perm_table[(AB + 1) & 511], x, y - 1, z - 1, grad3_array)
    gBB1 = grad(perm_table[(BB + 1) & 511], x - 1, y - 1, z - 1, grad3_array)

    return _lerp(
        _lerp(_lerp(gAA, gBA, u), _lerp(gAB, gBB, u), v),
        _lerp(_lerp(gAA1, gBA1, u), _lerp(gAB1, gBB1, u), v),
        w,
    )


@njit(fastmath=True, cache=True)
def fractal_noise_3d(x, y, z, octaves, falloff, perm_table, grad3_array):
    """オクターブ合成した Perlin ノイズを [0, 1] で返す。

    各オクターブで周波数を 2 倍、振幅を falloff 倍し、総振幅で正規化する。
    """
    total = 0.0
    norm = 0.0
    amp = 1.0
    freq = 1.0
    for _ in range(octaves):
        n = perlin_noise_3d(x * freq, y * freq, z * freq, perm_table, grad3_array)
        total += amp * (n + 1.0) * 0.5
        norm += amp
        amp *= falloff
        freq *= 2.0

    value = total / norm
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


class NoiseField:
    """シード付きの 3D コヒーレントノイズ。

    Parameters
    ----------
    seed : int | float | str | None
        permutation テーブルのシード。None は標準テーブル。
    octaves : int
        合成するオクターブ数（>= 1）。
    falloff : float
        オクターブごとの振幅減衰率（> 0）。

    Notes
    -----
    `field(x, y, z)` は同じシード・同じ座標に対して常に同じ [0, 1] の値を返す。
    """

    def __init__(
        self,
        seed: Seed = None,
        *,
        octaves: int = DEFAULT_OCTAVES,
        falloff: float = DEFAULT_FALLOFF,
    ) -> None:
        self._seed: Seed = seed
        self._perm = permutation_table(seed)
        self._octaves = DEFAULT_OCTAVES
        self._falloff = DEFAULT_FALLOFF
        self.detail(octaves, falloff)

    @property
    def seed(self) -> Seed:
        return self._seed

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def falloff(self) -> float:
        return self._falloff

    def reseed(self, seed: Seed) -> None:
        """permutation テーブルを作り直す。"""

        self._seed = seed
        self._perm = permutation_table(seed)

    def detail(self, octaves: int, falloff: float) -> None:
        """オクターブ数と減衰率を設定する。"""

        if isinstance(octaves, bool) or int(octaves) != octaves or int(octaves) < 1:
            raise InvalidArgument(f"octaves は 1 以上の整数である必要があります: got={octaves!r}")
        if not float(falloff) > 0.0:
            raise InvalidArgument(f"falloff は正の値である必要があります: got={falloff!r}")
        self._octaves = int(octaves)
        self._falloff = float(falloff)

    def __call__(self, x: float, y: float, z: float = 0.0) -> float:
        return float(
            fractal_noise_3d(
                float(x),
                float(y),
                float(z),
                self._octaves,
                self._falloff,
                self._perm,
                NOISE_GRADIENTS_3D,
            )
        )


__all__ = [
    "DEFAULT_FALLOFF",
    "DEFAULT_OCTAVES",
    "NoiseField",
    "fractal_noise_3d",
    "perlin_noise_3d",
    "permutation_table",
]
