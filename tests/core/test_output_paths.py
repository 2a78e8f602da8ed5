from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from fxsketch.core.output_paths import (
    config_output_path,
    encode_seed,
    output_path,
    output_stem,
    run_timestamp,
    sketch_subdir,
)
from fxsketch.core.runtime_config import set_config_path


# `fxsketch.core.output_paths`（出力ファイル名と保存先）をテストする。

@pytest.fixture(autouse=True)
def _reset_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    set_config_path(None)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    yield
    set_config_path(None)


def test_encode_seed_matches_uri_component_encoding() -> None:
    assert encode_seed("hello world") == "hello%20world"
    assert encode_seed("a/b?c") == "a%2Fb%3Fc"
    assert encode_seed("keep-_.!~*'()") == "keep-_.!~*'()"
    assert encode_seed(42) == "42"


def test_run_timestamp_is_utc() -> None:
    jst = timezone(timedelta(hours=9))
    assert run_timestamp(datetime(2024, 1, 2, 12, 4, 5, tzinfo=jst)) == "20240102T030405Z"
    assert run_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "20240102T030405Z"


def test_output_stem_contains_name_seed_and_timestamp() -> None:
    assert output_stem("set one", "hello world", "T") == "set_one-hello%20world-T"
    assert output_stem("///", 1, "T") == "sketch-1-T"


def test_output_path_layout() -> None:
    path = output_path(kind="png", subdir=Path("day4"), stem="s", ext=".png", frame=7)
    assert path == Path("data") / "output" / "png" / "day4" / "s_7.png"

    still = output_path(kind="svg", subdir=Path("misc") / "x", stem="s", ext="svg")
    assert still == Path("data") / "output" / "svg" / "misc" / "x" / "s.svg"

    with pytest.raises(ValueError):
        output_path(kind="png", subdir=Path("a"), stem="s", ext="")


def test_config_output_path_layout() -> None:
    path = config_output_path(subdir=Path("day4"), stem="s")
    assert path == Path("data") / "output" / "config" / "day4" / "s-config.json"


def test_sketch_subdir_falls_back_to_misc_for_files_outside_sketch_dir() -> None:
    def draw(ctx) -> None:
        return None

    assert sketch_subdir(draw) == Path("misc") / Path(__file__).stem


def test_sketch_subdir_is_relative_to_sketch_dir(tmp_path: Path) -> None:
    source = tmp_path / "sketch" / "series" / "day7.py"
    source.parent.mkdir(parents=True)
    source.write_text("def draw(ctx):\n    return None\n", encoding="utf-8")

    namespace: dict[str, object] = {}
    exec(compile(source.read_text(encoding="utf-8"), str(source), "exec"), namespace)

    assert sketch_subdir(namespace["draw"]) == Path("series") / "day7"
