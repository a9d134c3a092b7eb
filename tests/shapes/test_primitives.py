from __future__ import annotations

import math

import pytest

from shapes.primitives import circle, ngon, polygon, square


def test_square_scalar_and_center() -> None:
    assert square(5.0).area == pytest.approx(25.0)
    assert square((4.0, 2.0), center=True).bounds == pytest.approx((-2.0, -1.0, 2.0, 1.0))


def test_circle_and_polygon() -> None:
    assert circle(2.0).area == pytest.approx(math.pi * 4.0, rel=1e-3)
    tri = polygon([(0.0, 0.0), (4.0, 0.0), (0.0, 3.0)])
    assert tri.area == pytest.approx(6.0)


def test_ngon_vertices_and_phase() -> None:
    hexagon = ngon(6, diameter=2.0)
    # 外接円半径 1 の正六角形
    assert hexagon.area == pytest.approx(3.0 * math.sqrt(3.0) / 2.0)
    assert hexagon.bounds[2] == pytest.approx(1.0)
    rotated = ngon(6, diameter=2.0, phase=30.0)
    assert rotated.area == pytest.approx(hexagon.area)
    assert rotated.bounds[3] == pytest.approx(1.0)
    # 辺数は 3 以上に丸める
    assert len(ngon(1).rings()[0]) == 4
