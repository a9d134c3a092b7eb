"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状 `G`・エフェクト `E`・装飾子 `shape/effect`・コア型・パネル組み立て関数を再輸出。
なぜ: 利用者が単一名前空間から形状生成→加工→積層→組み立てまで完結できるようにするため。

Usage:
    from api import G, E, panel, PanelSpec

    outline = E.offset(distance=2).outline(line_width=1)
    ring = outline(G.rounded_square(size=(100, 60), r=8))

    scene = panel(PanelSpec((900, 400), curve_radius=1000))
"""

from effects.registry import effect as effect  # 公開唯一経路（api.effect）

# コアクラス
from engine.core.region import Region
from engine.core.solid import Label, Scene, Solid
from panel import (
    PanelSpec,
    PlayerControls,
    panel,
    panel_controls,
    panel_multilayer,
    panel_profile,
)
from shapes.registry import shape as shape  # 公開唯一経路（api.shape）

from .effects import E, Pipeline
from .shapes import G, ShapesAPI

__all__ = [
    # メインAPI
    "G",  # 形状ファクトリ
    "E",  # エフェクトファクトリ
    "shape",  # ユーザー拡張用デコレータ
    "effect",  # ユーザー拡張用デコレータ
    # パネル
    "panel",
    "panel_profile",
    "panel_controls",
    "panel_multilayer",
    "PanelSpec",
    "PlayerControls",
    # クラス（高度な使用）
    "ShapesAPI",
    "Pipeline",
    "Region",
    "Solid",
    "Scene",
    "Label",
]

# バージョン情報
__version__ = "2026.10"
