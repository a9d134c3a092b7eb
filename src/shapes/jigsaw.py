r"""
どこで: `shapes.jigsaw`。
何を: 左辺に蟻継ぎ状の歯を持つ矩形マスク `jigsaw_mask`。
なぜ: 素材寸法を超えるパネルを 2 枚の噛み合うピースに分けるため（`effects.jigsaw` が使用）。

歯の形（左辺、x<0 側へ突出）:

        ____
       /    |      根元幅 = pitch * ROOT_RATIO
      |     |<-    先端幅 = pitch * TIP_RATIO（根元より広い = 抜けない）
       \____|
"""

from __future__ import annotations

from common.types import Size2D
from effects.round_corners import round_corners
from engine.core.region import Region

from .registry import shape

ROOT_RATIO = 0.3
TIP_RATIO = 0.45


@shape
def jigsaw_mask(
    size: Size2D = (100.0, 400.0),
    tooth_count: int = 3,
    tooth_depth: float = 20.0,
    rounding_radius: float = 2.0,
) -> Region:
    """噛み合い歯付きの矩形マスク。

    引数:
        size: 矩形 `[0, w] x [0, h]` の (幅, 高さ)。
        tooth_count: 歯の数（0 で単純な矩形）。高さ方向に等間隔。
        tooth_depth: 歯の突出量（x < 0 側）。
        rounding_radius: 合成後に `round_corners` で丸める半径。
    """
    w, h = float(size[0]), float(size[1])
    count = int(tooth_count)
    if count < 0:
        raise ValueError(f"tooth_count は 0 以上である必要があります: {tooth_count}")
    mask = Region.rect(w, h)
    if count == 0 or tooth_depth <= 0:
        return round_corners(mask, radius=rounding_radius)

    pitch = h / count
    root = pitch * ROOT_RATIO / 2.0
    tip = pitch * TIP_RATIO / 2.0
    depth = float(tooth_depth)
    teeth = []
    for i in range(count):
        y = pitch * (i + 0.5)
        teeth.append(
            Region.polygon(
                [
                    (0.0, y - root),
                    (-depth, y - tip),
                    (-depth, y + tip),
                    (0.0, y + root),
                    # 根元を本体へ少し食い込ませて和集合の継ぎ目を消す
                    (1.0, y + root),
                    (1.0, y - root),
                ]
            )
        )
    mask = Region.union_all([mask, *teeth])
    return round_corners(mask, radius=rounding_radius)
