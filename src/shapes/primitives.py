from __future__ import annotations

from typing import Sequence

import numpy as np

from common.types import Size2D, Vec2
from engine.core.region import Region

from .registry import shape


@shape
def square(size: Size2D | float = (1.0, 1.0), *, center: bool = False) -> Region:
    """矩形。`size` はスカラーなら正方形。

    引数:
        size: (幅, 高さ)。
        center: True で原点中心、False で左下角が原点。
    """
    if isinstance(size, (int, float)):
        w = h = float(size)
    else:
        w, h = float(size[0]), float(size[1])
    return Region.rect(w, h, center=center)


@shape
def circle(r: float = 1.0, *, segments: int | None = None) -> Region:
    """原点中心の円。"""
    return Region.circle(r, segments=segments)


@shape
def polygon(points: Sequence[Vec2] = ()) -> Region:
    """頂点列から多角形を生成します（3 点未満は空）。"""
    return Region.polygon(points)


def _ngon_vertices(n_sides: int) -> np.ndarray:
    """直径 1 の円に内接する正多角形の頂点配列。"""
    t = np.linspace(0, 2 * np.pi, n_sides, endpoint=False)
    return np.stack([np.cos(t) * 0.5, np.sin(t) * 0.5], axis=1)


@shape
def ngon(n_sides: int | float = 6, *, diameter: float = 1.0, phase: float = 0.0) -> Region:
    """円に内接する正多角形を生成します。

    引数:
        n_sides: 辺の数（3–120 に丸める）。
        diameter: 外接円の直径。
        phase: 頂点開始角（度数法）。0 で +X 軸上に頂点を置く。
    """
    sides = max(3, min(120, int(round(float(n_sides)))))
    vertices = _ngon_vertices(sides) * float(diameter)
    if phase:
        theta = float(phase) * np.pi / 180.0
        rot = np.array([[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]])
        vertices = vertices @ rot.T
    return Region.polygon(vertices)
