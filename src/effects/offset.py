"""
offset エフェクト（形態学的オフセット）

- Shapely の `buffer` で領域の境界を一様に膨張（正）/収縮（負）する。
- 収縮で幅 2|d| 未満の部分は消える（空領域もあり得る）。

主なパラメータ:
- distance: オフセット距離 [mm]。0 は no-op（入力コピー）。
- join: 角の処理（`round` | `mitre` | `bevel`）。
- segments_per_circle: 四分円あたりの分割数。None で設定 `CIRCLE_SEGMENTS`。
"""

from __future__ import annotations

from engine.core.region import Region

from .registry import effect

JOINS = ("round", "mitre", "bevel")


@effect()
def offset(
    g: Region,
    *,
    distance: float = 1.0,
    join: str = "round",
    segments_per_circle: int | None = None,
) -> Region:
    """領域をオフセットした新しい Region を返す。

    例外:
    - ValueError: `join` が未知の値。
    """
    if join not in JOINS:
        raise ValueError(f"join は {JOINS} のいずれかです: {join!r}")
    return g.buffer(float(distance), join=join, segments=segments_per_circle)
