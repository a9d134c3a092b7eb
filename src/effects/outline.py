"""
outline エフェクト（輪郭線）

- 入力を `line_width` だけ膨張した形状から元の形状を差し引き、外周に沿う細い帯を返す。
- 図面・プレビュー用。帯の内側の縁は元形状そのものなので、切削パスには使わないこと。
"""

from __future__ import annotations

from engine.core.region import Region

from .offset import offset
from .registry import effect


@effect()
def outline(g: Region, *, line_width: float = 1.0) -> Region:
    """外周の帯（膨張形状 − 元形状）。`line_width` が 0 なら空領域。"""
    w = float(line_width)
    if w < 0.0:
        raise ValueError(f"line_width は 0 以上である必要があります: {line_width}")
    if w == 0.0:
        return Region.empty()
    return offset(g, distance=w) - g
