"""core.noise_mapper（RangeMapper）をテスト。"""

from __future__ import annotations

import pytest

from fxsketch.core.errors import ConfigurationError
from fxsketch.core.noise import NoiseField
from fxsketch.core.noise_mapper import NoiseMapper, Range, RangeMapper, as_range
from fxsketch.core.random_source import RandomSource


class _RecordingNoise:
    def __init__(self, value: float = 0.25) -> None:
        self.calls: list[tuple[float, float, float]] = []
        self.value = value

    def __call__(self, x: float, y: float, z: float) -> float:
        self.calls.append((x, y, z))
        return self.value


def _canvas_mapper(noise=None, random=None) -> RangeMapper:
    return RangeMapper(
        Range(0, 540),
        Range(0, 540),
        Range(0, 4),
        Range(0, 4),
        noise=noise,
        random=random,
    )


def test_sample_at_forwards_mapped_coordinates_and_depth() -> None:
    noise = _RecordingNoise()
    mapper = _canvas_mapper(noise=noise)

    assert mapper.sample_at(270, 270) == 0.25
    assert noise.calls == [(2.0, 2.0, 0.0)]


def test_map_point_is_affine_at_endpoints_and_midpoint() -> None:
    mapper = RangeMapper(Range(-10, 30), Range(100, 300), Range(5, 7), Range(-1, 1))

    assert mapper.map_point(-10, 100) == pytest.approx((5.0, -1.0))
    assert mapper.map_point(10, 200) == pytest.approx((6.0, 0.0))
    assert mapper.map_point(30, 300) == pytest.approx((7.0, 1.0))


def test_map_point_uses_absolute_sizes_for_reversed_ranges() -> None:
    mapper = RangeMapper(Range(540, 0), Range(0, 540), Range(0, 4), Range(4, 0))

    x, y = mapper.map_point(0, 540)
    assert x == pytest.approx((0 - 540) / 540 * 4 + 0)
    assert y == pytest.approx(540 / 540 * 4 + 4)


@pytest.mark.parametrize(
    "source_x, source_y",
    [
        (Range(3, 3), Range(0, 1)),
        (Range(0, 1), Range(-2, -2)),
    ],
)
def test_zero_width_source_range_raises(source_x: Range, source_y: Range) -> None:
    with pytest.raises(ConfigurationError):
        RangeMapper(source_x, source_y, Range(0, 1), Range(0, 1))


def test_zero_width_destination_range_is_allowed() -> None:
    noise = _RecordingNoise()
    mapper = RangeMapper(Range(0, 10), Range(0, 10), Range(2, 2), Range(0, 1), noise=noise)
    mapper.sample_at(7, 5)
    assert noise.calls == [(2.0, 0.5, 0.0)]


def test_ranges_accept_pairs_and_mappings() -> None:
    assert as_range((1, 2)) == Range(1.0, 2.0)
    assert as_range({"min": -1, "max": 4}) == Range(-1.0, 4.0)
    with pytest.raises(ConfigurationError):
        as_range({"lo": 0, "hi": 1})
    with pytest.raises(ConfigurationError):
        as_range((1, 2, 3))


def test_depth_set_and_advance_accumulate_without_wrap() -> None:
    noise = _RecordingNoise()
    mapper = _canvas_mapper(noise=noise)

    assert mapper.depth == 0.0
    mapper.set_depth(3.5)
    assert mapper.depth == 3.5

    for _ in range(100):
        mapper.advance_depth()
    assert mapper.depth == pytest.approx(4.5)

    mapper.advance_depth(1000.0)
    assert mapper.depth == pytest.approx(1004.5)

    mapper.sample_at(0, 0)
    assert noise.calls[-1][2] == pytest.approx(1004.5)


def test_randomize_depth_uses_injected_random_source() -> None:
    a = _canvas_mapper(noise=_RecordingNoise(), random=RandomSource("hello world"))
    b = _canvas_mapper(noise=_RecordingNoise(), random=RandomSource("hello world"))

    a.randomize_depth()
    b.randomize_depth()
    assert a.depth == b.depth
    assert 0.0 <= a.depth < 20.0

    a.randomize_depth(5, 6)
    assert 5.0 <= a.depth < 6.0


def test_randomize_depth_shares_stream_with_caller() -> None:
    shared = RandomSource(42)
    reference = RandomSource(42)
    mapper = _canvas_mapper(noise=_RecordingNoise(), random=shared)

    mapper.randomize_depth(0, 20)
    expected_depth = reference.random_between(0, 20)
    assert mapper.depth == expected_depth
    # 呼び出し側の次の値も同じ列の続きになる。
    assert shared.random() == reference.random()


def test_sample_at_with_real_noise_is_deterministic_and_in_unit_interval() -> None:
    mapper_a = _canvas_mapper(noise=NoiseField(7))
    mapper_b = _canvas_mapper(noise=NoiseField(7))

    for x, y in [(0, 0), (13, 270), (270, 270), (539, 1), (540, 540)]:
        va = mapper_a.sample_at(x, y)
        vb = mapper_b.sample_at(x, y)
        assert va == vb
        assert 0.0 <= va <= 1.0


def test_noise_mapper_alias() -> None:
    assert NoiseMapper is RangeMapper
