"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- エントリポイント（`main.py` / `panel.demo`）だけが最小構成を 1 度だけ適用する。
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は設定 `LOG_LEVEL`（`APN_LOG_LEVEL`）を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    """
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
