"""
どこで: `common.settings`
何を: `APN_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 円弧分割数やジグソーの隙間などの既定値を一箇所で差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # 円近似（shapely の quad_segs = 四分円あたりの分割数）
    CIRCLE_SEGMENTS: int = 32

    # ジグソー分割時に左右ピースを離す距離 [mm]
    JIGSAW_GAP: float = 15.0

    # 出力
    OUTPUT_DIR: str | None = None
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 分割数は下限 1 に丸める。
    - 隙間は負値を 0 に丸める。
    """
    _settings.CIRCLE_SEGMENTS = env_int("APN_CIRCLE_SEGMENTS", 32, min_value=1) or 32
    _settings.JIGSAW_GAP = env_float("APN_JIGSAW_GAP", 15.0, min_value=0.0) or 0.0
    _settings.OUTPUT_DIR = env_str("APN_OUTPUT_DIR", None)
    _settings.LOG_LEVEL = env_str("APN_LOG_LEVEL", "INFO") or "INFO"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
