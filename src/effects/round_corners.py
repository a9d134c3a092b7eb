"""
round_corners エフェクト（オフセット連鎖による汎用角丸め）

- 収縮 r → 膨張 2r → 収縮 r の順に `offset` を適用する。
- 矩形以外（歯形や凸包の合成形状）でも角を半径 r で丸められる。

注意:
- 幅 2r 未満の部分（細いスロット、鋭い歯先など）は最初の収縮で消え、戻らない。
  これは想定どおりの挙動であり、細部を残したい場合は r を小さくする。
- r = 0 は no-op。
"""

from __future__ import annotations

from engine.core.region import Region

from .offset import offset
from .registry import effect


@effect()
def round_corners(g: Region, *, radius: float = 5.0, segments_per_circle: int | None = None) -> Region:
    """領域の角を半径 `radius` で丸める。"""
    r = float(radius)
    if r < 0.0:
        raise ValueError(f"radius は 0 以上である必要があります: {radius}")
    if r == 0.0 or g.is_empty:
        return Region(g.geom)
    out = offset(g, distance=-r, segments_per_circle=segments_per_circle)
    out = offset(out, distance=2.0 * r, segments_per_circle=segments_per_circle)
    return offset(out, distance=-r, segments_per_circle=segments_per_circle)
