"""
jigsaw エフェクト（噛み合い分割）

- `jigsaw_split`: 縦の切断線 x = `cut_at` に沿って、`shapes.jigsaw_mask` の歯形で領域を
  左右 2 ピースに分ける。左 = 領域 − マスク、右 = 領域 ∩ マスク。
- `jigsaw_cut`: 分割した 2 ピースを左右へ `gap` ずつ離して 1 つの Region で返す。
  `cut_at=None` は分割しない（入力をそのまま返す）。

性質:
- 左右の面積の和は入力の面積に等しい（マスクで分割しているだけ）。
- マスクは入力の外接矩形を余白付きで覆う大きさで作る。
"""

from __future__ import annotations

import logging

from common.settings import get as _get_settings
from engine.core.region import Region

from .registry import effect

logger = logging.getLogger(__name__)

MARGIN = 10.0


def jigsaw_split(
    g: Region,
    cut_at: float,
    *,
    tooth_count: int = 3,
    tooth_depth: float = 20.0,
    rounding_radius: float = 2.0,
) -> tuple[Region, Region]:
    """`(左ピース, 右ピース)` を返す（移動はしない）。"""
    from shapes.jigsaw import jigsaw_mask  # local import（shapes → effects の循環回避）

    minx, miny, maxx, maxy = g.bounds
    # 丸めで削れるマスク外周が入力に掛からない余白
    margin = MARGIN + 2.0 * float(rounding_radius)
    width = max(maxx - float(cut_at), 0.0) + margin
    height = (maxy - miny) + 2.0 * margin
    mask = jigsaw_mask(
        (width, height),
        tooth_count=tooth_count,
        tooth_depth=tooth_depth,
        rounding_radius=rounding_radius,
    ).translate(float(cut_at), miny - margin)
    return g - mask, g & mask


@effect()
def jigsaw_cut(
    g: Region,
    *,
    cut_at: float | None = None,
    gap: float | None = None,
    tooth_count: int = 3,
    tooth_depth: float = 20.0,
    rounding_radius: float = 2.0,
) -> Region:
    """噛み合う 2 ピースへ分割し、左右へ `gap` ずつ離す。

    Parameters
    ----------
    g : Region
        分割対象。
    cut_at : float | None
        切断線の X 座標。None なら分割せず入力を返す。
    gap : float | None
        各ピースの移動量。None で設定 `JIGSAW_GAP`（既定 15）。
    """
    if cut_at is None:
        return Region(g.geom)
    d = float(_get_settings().JIGSAW_GAP if gap is None else gap)
    left, right = jigsaw_split(
        g,
        cut_at,
        tooth_count=tooth_count,
        tooth_depth=tooth_depth,
        rounding_radius=rounding_radius,
    )
    logger.debug(
        "jigsaw_cut at x=%.3f: left=%.1f mm^2 right=%.1f mm^2", cut_at, left.area, right.area
    )
    return left.translate(-d, 0.0) + right.translate(d, 0.0)
