"""共通フィクスチャ。

- 設定（`APN_*`）を既定値に戻す
- 小さな Region 試料
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.region import Region


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """各テストを `APN_*` 未設定の既定値で走らせる。"""
    for name in ("APN_CIRCLE_SEGMENTS", "APN_JIGSAW_GAP", "APN_OUTPUT_DIR", "APN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def unit_square() -> Region:
    return Region.rect(1.0, 1.0)


@pytest.fixture()
def plate() -> Region:
    # 200 x 100 の板に φ20 の穴 1 つ
    return Region.rect(200.0, 100.0) - Region.circle(10.0, center=(50.0, 50.0))
