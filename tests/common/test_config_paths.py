from __future__ import annotations

from pathlib import Path

import pytest

from common import settings
from util.paths import ensure_output_dir
from util.utils import load_config


def test_load_config_overlays_root_file(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "output:\n  demo_svg: demo.svg\ngcode:\n  cut_feed: 600\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("output:\n  demo_svg: mine.svg\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベルのキー単位で上書き（ネストはマージしない）
    assert cfg["output"] == {"demo_svg": "mine.svg"}
    assert cfg["gcode"]["cut_feed"] == 600


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("a: [1, 2\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


def test_repository_default_config_is_readable() -> None:
    cfg = load_config()
    assert cfg["output"]["demo_svg"].endswith(".svg")
    assert cfg["reference_panel"]["size"] == [900, 400]


def test_ensure_output_dir_honours_setting(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "out"
    monkeypatch.setenv("APN_OUTPUT_DIR", str(target))
    settings.reload_from_env()
    assert ensure_output_dir() == target
    assert ensure_output_dir("sheets") == target / "sheets"
    assert (target / "sheets").is_dir()
