"""
どこで: `common` パッケージ。
何を: shapes/effects/panel が共有する軽量基盤（レジストリ・設定・型エイリアス）。
なぜ: 形状生成と加工の両層から同じ部品を使い、依存の向きを一方向に保つため。
"""

from .base_registry import BaseRegistry

__all__ = [
    "BaseRegistry",
]
