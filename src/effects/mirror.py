"""
どこで: `effects`
何を: 鏡映複製 `mirror_dup`（1 平面）と 4 象限複製 `fourcorners`。
なぜ: 左右対称・上下左右対称な部品（取付穴、隅片）を片側だけ描いて展開するため。

仕様:
- mirror_dup: 入力と、原点を通り法線 `normal` を持つ直線で鏡映したものの和集合。
  `normal=(1, 0)` は x → -x、`normal=(0, 1)` は y → -y。
- fourcorners: Y 方向の mirror_dup を X 方向の mirror_dup で包む（象限複製）。
- 鏡映線をまたぐ入力は重なり部分が 1 つに融合する（面積は 2 倍/4 倍未満）。
"""

from __future__ import annotations

from common.types import Vec2
from engine.core.region import Region

from .registry import effect


@effect()
def mirror_dup(g: Region, *, normal: Vec2 = (1.0, 0.0)) -> Region:
    """入力 + 鏡映像。"""
    return g + g.mirror(normal)


@effect()
def fourcorners(g: Region) -> Region:
    """4 象限への複製。"""
    return mirror_dup(mirror_dup(g, normal=(0.0, 1.0)), normal=(1.0, 0.0))


__all__ = ["mirror_dup", "fourcorners"]
