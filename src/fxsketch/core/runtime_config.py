# どこで: `src/fxsketch/core/runtime_config.py`。
# 何を: config.yaml を重ね合わせて実行時設定 `RuntimeConfig` を作り、キャッシュする。
# なぜ: 出力先や PNG 倍率、ノイズの既定ディテールをスケッチのコード外から変えられるようにするため。

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

SUPPORTED_VERSION = 1
_PACKAGED_SOURCE = "fxsketch/resource/default_config.yaml"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """fxsketch の実行時設定。

    Attributes
    ----------
    config_path : Path | None
        最後に重ねたユーザー config（明示指定 > 探索）。同梱値だけなら None。
    sources : tuple[Path, ...]
        重ねた順のユーザー config 一覧。
    """

    config_path: Path | None
    output_dir: Path
    sketch_dir: Path | None
    png_scale: float
    noise_octaves: int
    noise_falloff: float
    sources: tuple[Path, ...] = ()


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを設定する（None で解除）。キャッシュは常に破棄する。"""

    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(str(path)).expanduser()
    _cached = None


def _discover() -> Path | None:
    """`./.fxsketch/config.yaml` → `~/.config/fxsketch/config.yaml` の順に最初の 1 つを返す。"""

    for candidate in (
        Path.cwd() / ".fxsketch" / "config.yaml",
        Path.home() / ".config" / "fxsketch" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _parse_yaml(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _read_packaged() -> dict[str, Any]:
    try:
        text = resources.files("fxsketch").joinpath("resource", "default_config.yaml").read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc
    return _parse_yaml(text, source=_PACKAGED_SOURCE)


def _overlay(base: Mapping[str, Any], top: Mapping[str, Any]) -> dict[str, Any]:
    """top を base に再帰的に重ねた新しい dict を返す（mapping 同士だけ潜る）。"""

    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(value, Mapping) and isinstance(below, Mapping):
            merged[key] = _overlay(below, value)
        else:
            merged[key] = value
    return merged


def _lookup(payload: Mapping[str, Any], dotted: str) -> Any:
    """`"export.png.scale"` のようなドット区切りキーで値を引く。途中が無ければ None。"""

    node: Any = payload
    walked: list[str] = []
    for part in dotted.split("."):
        if node is None:
            return None
        if not isinstance(node, Mapping):
            raise RuntimeError(f"{'.'.join(walked)} は mapping である必要があります: got={node!r}")
        node = node.get(part)
        walked.append(part)
    return node


def _required(payload: Mapping[str, Any], dotted: str) -> Any:
    value = _lookup(payload, dotted)
    if value is None:
        raise RuntimeError(f"{dotted} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def _path_or_none(value: Any) -> Path | None:
    text = "" if value is None else str(value).strip()
    if not text:
        return None
    return Path(os.path.expandvars(os.path.expanduser(text)))


def _number(value: Any, *, key: str, kind: type) -> Any:
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _build(payload: Mapping[str, Any], sources: tuple[Path, ...]) -> RuntimeConfig:
    version = _number(_required(payload, "version"), key="version", kind=int)
    if version != SUPPORTED_VERSION:
        raise RuntimeError(f"未対応の config.yaml version です: got={version}")

    output_dir = _path_or_none(_lookup(payload, "paths.output_dir"))
    if output_dir is None:
        raise RuntimeError("paths.output_dir が未設定です")

    png_scale = _number(_required(payload, "export.png.scale"), key="export.png.scale", kind=float)
    if png_scale <= 0:
        raise ValueError(f"export.png.scale は正の値である必要があります: got={png_scale}")

    octaves = _number(_required(payload, "noise.octaves"), key="noise.octaves", kind=int)
    if octaves < 1:
        raise ValueError(f"noise.octaves は 1 以上である必要があります: got={octaves}")
    falloff = _number(_required(payload, "noise.falloff"), key="noise.falloff", kind=float)
    if falloff <= 0:
        raise ValueError(f"noise.falloff は正の値である必要があります: got={falloff}")

    return RuntimeConfig(
        config_path=sources[-1] if sources else None,
        output_dir=output_dir,
        sketch_dir=_path_or_none(_lookup(payload, "paths.sketch_dir")),
        png_scale=png_scale,
        noise_octaves=octaves,
        noise_falloff=falloff,
        sources=sources,
    )


def runtime_config() -> RuntimeConfig:
    """同梱値 → 探索した config → 明示 config の順に重ねた設定を返す（キャッシュ）。

    Raises
    ------
    FileNotFoundError
        明示 config パスが存在しない場合。
    RuntimeError
        YAML が壊れている、型が合わない、必須キーが無い場合。
    ValueError
        数値が範囲外の場合。
    """

    global _cached
    if _cached is not None:
        return _cached

    explicit = _explicit_path
    if explicit is not None and not explicit.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit}")

    sources = tuple(p for p in (_discover(), explicit) if p is not None)
    payload = _read_packaged()
    for path in sources:
        payload = _overlay(payload, _parse_yaml(path.read_text(encoding="utf-8"), source=str(path)))

    _cached = _build(payload, sources)
    return _cached


def output_root_dir() -> Path:
    """出力ファイルのルートディレクトリ（`paths.output_dir`）を返す。"""

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
