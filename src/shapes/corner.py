"""
どこで: `shapes.corner`。
何を: 角丸めマスク `corner_mask` と角丸矩形 `rounded_square`。
なぜ: 矩形の凸角を差で、継ぎ目の凹角を和で丸めるための共通部品を 1 つにするため。

corner_mask(r) の形:
- 原点中心の 2r×2r の正方形から、4 つの角を中心とする半径 r の円を除いた残り（原点付近の星形）。
- 各象限には「角に対して四分円の外側」になる隅片が 1 つずつ入る。
- 矩形の角に置いて差し引けば凸角が半径 r で丸まり、
  内側の角に置いて外側の象限だけ足せば凹角に半径 r のフィレットが付く。
"""

from __future__ import annotations

from common.types import Size2D
from engine.core.region import Region

from .registry import shape


@shape
def corner_mask(r: float = 10.0, *, segments: int | None = None) -> Region:
    """半径 r の角丸めマスク。r = 0 は空領域（no-op マスク）。"""
    r = float(r)
    if r < 0.0:
        raise ValueError(f"角丸め半径は 0 以上である必要があります: {r}")
    if r == 0.0:
        return Region.empty()
    mask = Region.rect(2 * r, 2 * r, center=True)
    for sx in (-1.0, 1.0):
        for sy in (-1.0, 1.0):
            mask = mask - Region.circle(r, center=(sx * r, sy * r), segments=segments)
    return mask


@shape
def rounded_square(
    size: Size2D = (100.0, 100.0),
    r: float = 10.0,
    *,
    center: bool = False,
    segments: int | None = None,
) -> Region:
    """4 隅を半径 r で丸めた矩形。

    引数:
        size: (幅, 高さ)。
        r: 角丸め半径。0 で通常の矩形。
        center: True で原点中心、False で左下角が原点。
    """
    w, h = float(size[0]), float(size[1])
    base = Region.rect(w, h)
    mask = corner_mask(r, segments=segments)
    if not mask.is_empty:
        for x in (0.0, w):
            for y in (0.0, h):
                base = base - mask.translate(x, y)
    if center:
        base = base.translate(-w / 2.0, -h / 2.0)
    return base
