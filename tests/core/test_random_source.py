"""core.random_source をテスト。"""

from __future__ import annotations

import pytest

from fxsketch.core.random_source import RandomSource, seed_to_int


def test_seed_to_int() -> None:
    assert seed_to_int(None) is None
    assert seed_to_int(7) == 7
    assert seed_to_int(7.0) == 7
    assert seed_to_int("hello world") == seed_to_int("hello world")
    assert seed_to_int("hello world") != seed_to_int("hello world!")
    assert seed_to_int(-3) >= 0
    assert seed_to_int(0.5) >= 0
    with pytest.raises(TypeError):
        seed_to_int(True)


def test_same_string_seed_gives_same_sequence() -> None:
    a = RandomSource("hello world")
    b = RandomSource("hello world")
    assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]
    assert a.seed == "hello world"


def test_reseed_restarts_sequence() -> None:
    rnd = RandomSource(11)
    first = [rnd.random() for _ in range(5)]
    rnd.reseed(11)
    assert [rnd.random() for _ in range(5)] == first
    rnd.reseed("other")
    assert rnd.seed == "other"


def test_random_between_bounds() -> None:
    rnd = RandomSource(3)
    for _ in range(200):
        v = rnd.random_between(-2.5, 4.0)
        assert -2.5 <= v < 4.0


def test_random_between_integer_floors() -> None:
    rnd = RandomSource(3)
    values = [rnd.random_between(0, 5, integer=True) for _ in range(200)]
    assert all(isinstance(v, int) for v in values)
    assert set(values) <= {0, 1, 2, 3, 4}


def test_random_between_reversed_bounds_stays_inside() -> None:
    rnd = RandomSource(4)
    for _ in range(50):
        v = rnd.random_between(10, 5)
        assert 5 < v <= 10
