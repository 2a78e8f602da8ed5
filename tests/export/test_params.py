from __future__ import annotations

import json
from pathlib import Path

from fxsketch.api.sketch import SketchParams
from fxsketch.export.params import export_params


# `fxsketch.export.params`（パラメータ JSON 保存）をテストする。

def test_export_params_writes_sorted_json(tmp_path: Path) -> None:
    params = SketchParams(name="色", seed="hello world", extra={"noise_range": (1.0, 2.0), "path": Path("x")})

    out = export_params(params.to_dict(), tmp_path / "config" / "p-config.json")

    text = out.read_text(encoding="utf-8")
    assert "色" in text
    data = json.loads(text)
    assert list(data) == sorted(data)
    assert data["name"] == "色"
    assert data["seed"] == "hello world"
    assert data["width"] == 540
    assert data["extra"] == {"noise_range": [1.0, 2.0], "path": "x"}
