from pathlib import Path

import pytest

from fxsketch.core.runtime_config import output_root_dir, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_output_root_dir_uses_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert output_root_dir() == Path("data") / "output"
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.output_dir == Path("data") / "output"
    assert cfg.sketch_dir == Path("sketch")
    assert cfg.png_scale == 2.0
    assert cfg.noise_octaves == 4
    assert cfg.noise_falloff == 0.5


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = _write(
        tmp_path / ".fxsketch" / "config.yaml",
        'paths:\n  output_dir: "./out_discovered"\nnoise:\n  octaves: 6\n',
    )

    assert output_root_dir() == Path("out_discovered")
    cfg = runtime_config()
    assert cfg.config_path == discovered
    # 入れ子の mapping は再帰マージされ、未指定キーは同梱値のまま。
    assert cfg.sketch_dir == Path("sketch")
    assert cfg.noise_octaves == 6
    assert cfg.noise_falloff == 0.5


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    home_cfg = _write(tmp_path / ".config" / "fxsketch" / "config.yaml", "export:\n  png:\n    scale: 3\n")

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.png_scale == 3.0


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    _write(tmp_path / ".fxsketch" / "config.yaml", 'paths:\n  output_dir: "./out_discovered"\n')
    explicit = _write(tmp_path / "explicit.yaml", 'paths:\n  output_dir: "./out_explicit"\n  sketch_dir: ""\n')
    set_config_path(explicit)

    assert output_root_dir() == Path("out_explicit")
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.sources == (tmp_path / ".fxsketch" / "config.yaml", explicit)
    assert cfg.sketch_dir is None


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = _write(tmp_path / "explicit.yaml", "noise:\n  falloff: 0.25\n")
    set_config_path(explicit)
    assert runtime_config() is not first
    assert runtime_config().noise_falloff == 0.25


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        output_root_dir()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "- a\n- b\n",
        "paths: [1, 2]\n",
        "paths:\n  output_dir: [unclosed\n",
        'paths:\n  output_dir: ""\n',
        "noise:\n  octaves: many\n",
    ],
)
def test_malformed_config_raises_runtime_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", text))

    with pytest.raises(RuntimeError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "export:\n  png:\n    scale: 0\n",
        "noise:\n  octaves: 0\n",
        "noise:\n  falloff: -0.5\n",
    ],
)
def test_out_of_range_values_raise_value_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", text))

    with pytest.raises(ValueError):
        runtime_config()
