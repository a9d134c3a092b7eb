"""
どこで: `panel.stack`。
何を: 1 つの外形 Region を、層リスト（下→上）の厚みで積み重ねた Solid 列にする。
なぜ: 積層の上面を z=0 に揃え、どの層の断面もカットシートとして取り出せるようにするため。

並びと Z:
- 出力は層リストと同じ順（先頭 = 最下層）。描画順は背面→前面で、透明層は最後になる。
- 層 i は `[-Σ_{j>=i} t_j, -Σ_{j>i} t_j]` を占める（上面 z=0、下向きに積む）。
"""

from __future__ import annotations

import logging
from typing import Sequence

from engine.core.region import Region
from engine.core.solid import Solid, linear_extrude

from .config import DEFAULT_LAYERS, Layer

logger = logging.getLogger(__name__)


def stack_thickness(layers: Sequence[Layer]) -> float:
    """層リストの総厚。"""
    return float(sum(float(layer.thickness) for layer in layers))


def panel_multilayer(profile: Region, layers: Sequence[Layer] = DEFAULT_LAYERS) -> tuple[Solid, ...]:
    """外形 `profile` を層ごとに押し出して積み重ねる。

    引数:
        profile: 全層共通の断面。
        layers: 下→上の層リスト。空なら空タプルを返す。

    例外:
    - ValueError: 厚みが 0 以下の層を含む場合。
    """
    for i, layer in enumerate(layers):
        if not float(layer.thickness) > 0.0:
            raise ValueError(f"層 {i} の厚みは正である必要があります: {layer.thickness}")

    # 下面 z0 は「総厚」から、下にある層の累積厚だけ上がった位置
    z = -stack_thickness(layers)
    solids: list[Solid] = []
    for i, layer in enumerate(layers):
        t = float(layer.thickness)
        solids.append(
            linear_extrude(profile, t, z0=z, color=layer.color, name=layer.name or f"layer{i}")
        )
        z += t
    logger.debug("panel_multilayer layers=%d total=%.3f", len(solids), -solids[0].z0 if solids else 0.0)
    return tuple(solids)


__all__ = ["panel_multilayer", "stack_thickness"]
