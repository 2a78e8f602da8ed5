# どこで: `src/fxsketch/core/output_paths.py`。
# 何を: パラメータセット名・シード・実行時刻と draw 定義元から、出力ファイルの保存先パスを決める。
# なぜ: `output/{kind}/<スケッチ名>/` 配下に、どの設定で描いたかが分かる名前で整理して保存するため。

from __future__ import annotations

import contextlib
import inspect
import re
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

from fxsketch.core.runtime_config import output_root_dir, runtime_config

# encodeURIComponent 相当で残す記号。
_SEED_SAFE_CHARS = "-_.!~*'()"


def _sanitize(text: str) -> str:
    """ファイル名の一部として使える形に正規化して返す。"""

    return re.sub(r"[^A-Za-z0-9._-]+", "_", str(text)).strip("_")


def encode_seed(seed: object) -> str:
    """シードをパーセントエンコードした文字列を返す。"""

    return quote(str(seed), safe=_SEED_SAFE_CHARS)


def run_timestamp(now: datetime | None = None) -> str:
    """実行時刻をファイル名向けの UTC 文字列（例: `20240102T030405Z`）で返す。"""

    dt = now if now is not None else datetime.now(timezone.utc)
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y%m%dT%H%M%SZ")


def output_stem(name: str, seed: object, timestamp: str) -> str:
    """`{name}-{encoded seed}-{timestamp}` 形式のファイル名 stem を返す。"""

    name_part = _sanitize(name) or "sketch"
    return f"{name_part}-{encode_seed(seed)}-{timestamp}"


def _draw_source_path(draw: Callable[..., object]) -> Path | None:
    """draw を定義したファイルを返す。`<stdin>` や組み込み関数なら None。"""

    names = [getattr(getattr(draw, "__code__", None), "co_filename", None)]
    with contextlib.suppress(TypeError):
        names.append(inspect.getsourcefile(draw))
    for name in names:
        text = str(name or "").strip()
        if text and not (text.startswith("<") and text.endswith(">")):
            return Path(text)
    return None


def sketch_subdir(draw: Callable[..., object]) -> Path:
    """draw の定義元から出力サブディレクトリを決める。

    Notes
    -----
    `paths.sketch_dir` 配下なら `<相対 dir>/<stem>`、それ以外は `misc/<stem>`。
    """

    source = _draw_source_path(draw)
    if source is None:
        return Path("misc") / "unknown"

    sketch_dir = runtime_config().sketch_dir
    if sketch_dir is not None:
        root = Path(sketch_dir).resolve(strict=False)
        resolved = source.resolve(strict=False)
        if resolved.is_relative_to(root):
            rel = resolved.relative_to(root)
            return rel.parent / rel.stem
    return Path("misc") / source.stem


def output_path(
    *,
    kind: str,
    subdir: Path,
    stem: str,
    ext: str,
    frame: int | None = None,
) -> Path:
    """`output_root/{kind}/{subdir}/{stem}[_{frame}].{ext}` を返す。"""

    extension = str(ext).strip().lstrip(".")
    if not extension:
        raise ValueError(f"ext が空です: got={ext!r}")
    name = stem if frame is None else f"{stem}_{int(frame)}"
    return output_root_dir() / str(kind) / subdir / f"{name}.{extension}"


def config_output_path(*, subdir: Path, stem: str) -> Path:
    """パラメータ JSON の保存先 `output_root/config/{subdir}/{stem}-config.json` を返す。"""

    return output_root_dir() / "config" / subdir / f"{stem}-config.json"


__all__ = [
    "config_output_path",
    "encode_seed",
    "output_path",
    "output_stem",
    "run_timestamp",
    "sketch_subdir",
]
