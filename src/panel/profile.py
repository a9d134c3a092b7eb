"""
どこで: `panel.profile`。
何を: パネル外形（角丸の本体 + 任意の円弧前縁 + 任意の背面インセット）を 1 つの Region に合成。
なぜ: 積層の各層の断面と、ジグソー分割やカットシートの元形状を同じ関数から得るため。

座標系:
- X: 0 .. 幅。Y: 背面 y=0 → 前縁 y=奥行（円弧がある場合はその頂点）。

前縁の円弧（曲率半径 r、角丸め c、幅 w、奥行 h）:
- 円の中心は (w/2, h - r)。本体の前側の角丸（半径 c）の円がこの円に内接するよう、
  本体の直線部分の長さ（前縁の位置）を決める:

      (r - c)^2 = (w/2 - c)^2 + (front - c - (h - r))^2
      front     = sqrt((r - c)^2 - (w/2 - c)^2) + c - (r - h)

- 右辺の根号内が負（r が幅に対して小さすぎる）なら実数解がなく、`InfeasibleCurveError`。
- 円は接点の X 範囲 [w/2 - x_t, w/2 + x_t]（x_t = (w/2 - c) r / (r - c)）に切り詰めてから
  本体と凸包を取る。接点の外まで残すと角丸の外側に尖りが出る。
"""

from __future__ import annotations

import logging
import math

from common.settings import get as _get_settings
from common.types import Size2D
from engine.core.region import Region
from shapes.corner import corner_mask, rounded_square

logger = logging.getLogger(__name__)


class InfeasibleCurveError(ValueError):
    """曲率半径がパネル幅・角丸めに対して小さすぎ、前縁の円弧が成立しない。"""


def _arc_segments(radius: float) -> int:
    # 大半径の円弧でも弦の偏差が ~0.1 mm 程度に収まる分割数
    base = int(_get_settings().CIRCLE_SEGMENTS)
    return max(base, int(math.ceil(math.pi / 2.0 / math.acos(max(0.0, 1.0 - 0.1 / radius)))))


def front_edge(size: Size2D, curve_radius: float, corner_radius: float = 10.0) -> float:
    """円弧前縁を持つ本体の直線部分の前端 Y を返す。

    例外:
    - InfeasibleCurveError: 根号内が負、または r <= corner_radius の場合。
    """
    w, h = float(size[0]), float(size[1])
    r = float(curve_radius)
    c = float(corner_radius)
    if r <= c:
        raise InfeasibleCurveError(
            f"前縁の曲率半径 {r} は角丸め半径 {c} より大きい必要があります"
        )
    radicand = (r - c) ** 2 - (w / 2.0 - c) ** 2
    if radicand < 0.0:
        raise InfeasibleCurveError(
            f"前縁の円弧が成立しません: 半径 {r} は幅 {w}・角丸め {c} に対して小さすぎます "
            f"(r - c = {r - c:.3f} < w/2 - c = {w / 2.0 - c:.3f})"
        )
    return math.sqrt(radicand) + c - (r - h)


def panel_profile(
    size: Size2D,
    inset: Size2D | None = None,
    curve_radius: float | None = None,
    corner_radius: float = 10.0,
) -> Region:
    """パネル外形を返す。

    Parameters
    ----------
    size : Size2D
        全体の (幅, 奥行)。
    inset : Size2D | None
        背面側インセットの (幅, 奥行)。X 中央に置く。None で無し。
    curve_radius : float | None
        前縁の曲率半径。None で直線。
    corner_radius : float, default 10.0
        角丸め半径（本体・インセット・継ぎ目のフィレット共通）。

    Raises
    ------
    InfeasibleCurveError
        円弧が成り立たない、または円弧の前縁がインセットの背面に届かない場合。
    ValueError
        直線の前縁でインセットの奥行が外形の奥行以上の場合。

    Notes
    -----
    inset も curve_radius も None なら `rounded_square(size, corner_radius)` と一致する。
    """
    w, h = float(size[0]), float(size[1])
    c = float(corner_radius)
    back = float(inset[1]) if inset is not None else 0.0
    front = front_edge(size, curve_radius, c) if curve_radius is not None else h
    if front <= back:
        if curve_radius is None:
            raise ValueError(
                f"インセットの奥行 {back:.3f} が外形の奥行 {front:.3f} 以上です（本体が残りません）"
            )
        raise InfeasibleCurveError(
            f"円弧の前縁 y={front:.3f} がインセット背面 y={back:.3f} 以下です（曲率半径 {curve_radius}）"
        )

    body = rounded_square((w, front - back), c).translate(0.0, back)
    if curve_radius is None:
        outline = body
    else:
        r = float(curve_radius)
        x_t = (w / 2.0 - c) * r / (r - c)
        band = Region.rect(2.0 * x_t, h - back, origin=(w / 2.0 - x_t, back))
        arc = Region.circle(r, center=(w / 2.0, h - r), segments=_arc_segments(r)) & band
        outline = Region.hull([body, arc])

    if inset is not None:
        iw = float(inset[0])
        left = w / 2.0 - iw / 2.0
        right = w / 2.0 + iw / 2.0
        # 本体と重ねて継ぎ目を消すため、上端を c だけ本体側へ伸ばす
        rear = rounded_square((iw, back + c), c).translate(left, 0.0)
        mask = corner_mask(c)
        fillets = Region.union_all(
            [
                mask.translate(left, back) & Region.rect(c, c, origin=(left - c, back - c)),
                mask.translate(right, back) & Region.rect(c, c, origin=(right, back - c)),
            ]
        )
        outline = Region.union_all([outline, rear, fillets])

    logger.debug(
        "panel_profile size=%s inset=%s r=%s corner=%s -> front=%.3f area=%.1f",
        size,
        inset,
        curve_radius,
        corner_radius,
        front,
        outline.area,
    )
    return outline


__all__ = ["InfeasibleCurveError", "front_edge", "panel_profile"]
