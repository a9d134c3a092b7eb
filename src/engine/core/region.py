"""
統合 Region 型（プロジェクト中核モジュール）

本モジュールは、プロジェクト全体で使用する唯一の 2D 形状表現 `Region` を提供する。
生成（shapes）、変換（Region メソッド）、加工（effects）、積層（panel.stack）を分離し、
CSG エンジン（shapely）との境界をこの 1 クラスに閉じ込める。

データモデル（不変条件）:
- 中身は常に「面」を表す shapely ジオメトリ（`Polygon` / `MultiPolygon`）。
- 線/点を含む演算結果（境界が接するだけの交差など）は面成分だけを残して正規化する。
- 空形状は `Polygon()`（`is_empty == True`, 面積 0）。

API 方針:
- 変換は `translate/rotate/scale/mirror`、ブール演算は `union/difference/intersection`、
  その他 `hull/buffer` を提供。
- すべて純関数（副作用ゼロ）であり、新しい `Region` インスタンスを返す。
- 演算子糖衣: `a + b`（和）、`a - b`（差）、`a & b`（積）。

円近似:
- 円弧の分割数は `common.settings` の `CIRCLE_SEGMENTS`（四分円あたり）を既定とする。

使用例:
    from engine.core.region import Region
    plate = Region.rect(200, 100)
    hole = Region.circle(14, center=(50, 50))
    out = (plate - hole).translate(10, 0)
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
from shapely import affinity
from shapely.geometry import GeometryCollection, MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from common.settings import get as _get_settings
from common.types import Vec2


def _segments(segments: int | None) -> int:
    if segments is None:
        return int(_get_settings().CIRCLE_SEGMENTS)
    return max(1, int(segments))


def _polygonal(geom: BaseGeometry | None) -> Polygon | MultiPolygon:
    """shapely の任意ジオメトリを面成分だけに正規化する。"""
    if geom is None or geom.is_empty:
        return Polygon()
    if isinstance(geom, (Polygon, MultiPolygon)):
        return geom
    if isinstance(geom, GeometryCollection) or hasattr(geom, "geoms"):
        parts = [g for g in geom.geoms if isinstance(g, (Polygon, MultiPolygon)) and not g.is_empty]
        if not parts:
            return Polygon()
        merged = unary_union(parts)
        return merged if isinstance(merged, (Polygon, MultiPolygon)) else Polygon()
    # 線/点のみ
    return Polygon()


class Region:
    """2D 領域（閉じた平面領域の集合）。

    フィールド:
    - `geom`: 正規化済みの shapely `Polygon` / `MultiPolygon`。

    設計意図:
    - 呼び出し側は境界表現を持たず、演算の連鎖で新しい Region を得る。
    - 変換はインスタンスを複製する純関数（テスト容易）。
    """

    __slots__ = ("geom",)

    geom: Polygon | MultiPolygon

    def __init__(self, geom: BaseGeometry | None = None) -> None:
        self.geom = _polygonal(geom)

    # ── ファクトリ ───────────────────
    @classmethod
    def empty(cls) -> "Region":
        return cls(Polygon())

    @classmethod
    def from_shapely(cls, geom: BaseGeometry) -> "Region":
        """既存の shapely ジオメトリを包む（面成分以外は捨てる）。"""
        return cls(geom)

    @classmethod
    def rect(
        cls, width: float, height: float, *, origin: Vec2 = (0.0, 0.0), center: bool = False
    ) -> "Region":
        """軸平行な矩形。

        Parameters
        ----------
        width, height : float
            幅と高さ。どちらかが 0 以下なら空領域。
        origin : Vec2
            左下角（`center=True` の場合は中心）の位置。
        center : bool, default False
            True で `origin` を中心として配置する。
        """
        w = float(width)
        h = float(height)
        if w <= 0.0 or h <= 0.0:
            return cls.empty()
        x0, y0 = float(origin[0]), float(origin[1])
        if center:
            x0 -= w / 2.0
            y0 -= h / 2.0
        return cls(Polygon([(x0, y0), (x0 + w, y0), (x0 + w, y0 + h), (x0, y0 + h)]))

    @classmethod
    def circle(
        cls, radius: float, *, center: Vec2 = (0.0, 0.0), segments: int | None = None
    ) -> "Region":
        """円（正多角形近似）。半径 0 以下は空領域。"""
        r = float(radius)
        if r <= 0.0:
            return cls.empty()
        return cls(Point(float(center[0]), float(center[1])).buffer(r, quad_segs=_segments(segments)))

    @classmethod
    def polygon(cls, points: Iterable[Sequence[float]]) -> "Region":
        """頂点列から多角形を作る（自己交差は `buffer(0)` で修復）。"""
        pts = [(float(p[0]), float(p[1])) for p in points]
        if len(pts) < 3:
            return cls.empty()
        poly = Polygon(pts)
        if not poly.is_valid:
            poly = poly.buffer(0)
        return cls(poly)

    @classmethod
    def union_all(cls, regions: Iterable["Region"]) -> "Region":
        geoms = [r.geom for r in regions if not r.is_empty]
        if not geoms:
            return cls.empty()
        return cls(unary_union(geoms))

    @classmethod
    def hull(cls, regions: Iterable["Region"]) -> "Region":
        """複数領域の和集合の凸包。"""
        merged = cls.union_all(regions)
        if merged.is_empty:
            return merged
        return cls(merged.geom.convex_hull)

    # ── 基本操作（すべて純粋） ────────
    @property
    def is_empty(self) -> bool:
        return bool(self.geom.is_empty)

    @property
    def area(self) -> float:
        return float(self.geom.area)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """`(minx, miny, maxx, maxy)`。空領域は全て 0。"""
        if self.is_empty:
            return (0.0, 0.0, 0.0, 0.0)
        minx, miny, maxx, maxy = self.geom.bounds
        return (float(minx), float(miny), float(maxx), float(maxy))

    @property
    def polygons(self) -> list[Polygon]:
        """構成ポリゴンの一覧（空なら空リスト）。"""
        if self.is_empty:
            return []
        if isinstance(self.geom, Polygon):
            return [self.geom]
        return list(self.geom.geoms)

    @property
    def n_holes(self) -> int:
        """穴（内周リング）の総数。"""
        return sum(len(p.interiors) for p in self.polygons)

    def rings(self) -> list[np.ndarray]:
        """全リング（外周→各内周の順、ポリゴンごと）を `(K, 2) float64` で返す。"""
        out: list[np.ndarray] = []
        for poly in self.polygons:
            out.append(np.asarray(poly.exterior.coords, dtype=np.float64))
            for interior in poly.interiors:
                out.append(np.asarray(interior.coords, dtype=np.float64))
        return out

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Region":
        if self.is_empty or (dx == 0 and dy == 0):
            return Region(self.geom)
        return Region(affinity.translate(self.geom, xoff=float(dx), yoff=float(dy)))

    def rotate(self, angle: float, center: Vec2 = (0.0, 0.0)) -> "Region":
        """回転（ラジアン、反時計回り正）。"""
        if self.is_empty or angle == 0:
            return Region(self.geom)
        origin = (float(center[0]), float(center[1]))
        return Region(affinity.rotate(self.geom, float(angle), origin=origin, use_radians=True))

    def scale(self, sx: float, sy: float | None = None, center: Vec2 = (0.0, 0.0)) -> "Region":
        if sy is None:
            sy = sx
        if self.is_empty:
            return Region(self.geom)
        origin = (float(center[0]), float(center[1]))
        return Region(affinity.scale(self.geom, xfact=float(sx), yfact=float(sy), origin=origin))

    def mirror(self, normal: Vec2 = (1.0, 0.0)) -> "Region":
        """原点を通り法線 `normal` を持つ直線に関する鏡映。

        `normal=(1, 0)` は Y 軸に関する鏡映（x → -x）。
        """
        nx, ny = float(normal[0]), float(normal[1])
        norm2 = nx * nx + ny * ny
        if norm2 == 0.0:
            raise ValueError("鏡映の法線ベクトルが零ベクトルです")
        if self.is_empty:
            return Region(self.geom)
        # R = I - 2 n n^T / |n|^2
        a = 1.0 - 2.0 * nx * nx / norm2
        b = -2.0 * nx * ny / norm2
        e = 1.0 - 2.0 * ny * ny / norm2
        return Region(affinity.affine_transform(self.geom, [a, b, b, e, 0.0, 0.0]))

    def union(self, other: "Region") -> "Region":
        if other.is_empty:
            return Region(self.geom)
        if self.is_empty:
            return Region(other.geom)
        return Region(self.geom.union(other.geom))

    def difference(self, other: "Region") -> "Region":
        if self.is_empty or other.is_empty:
            return Region(self.geom)
        return Region(self.geom.difference(other.geom))

    def intersection(self, other: "Region") -> "Region":
        if self.is_empty or other.is_empty:
            return Region.empty()
        return Region(self.geom.intersection(other.geom))

    def convex_hull(self) -> "Region":
        if self.is_empty:
            return Region.empty()
        return Region(self.geom.convex_hull)

    def buffer(
        self, distance: float, *, join: str = "round", segments: int | None = None
    ) -> "Region":
        """shapely `buffer` の薄いラッパ（正で膨張、負で収縮）。"""
        if self.is_empty or distance == 0:
            return Region(self.geom)
        return Region(
            self.geom.buffer(float(distance), quad_segs=_segments(segments), join_style=join)
        )

    def equals(self, other: "Region", tolerance: float = 1e-6) -> bool:
        """対称差の面積が `tolerance` 以下なら等しいとみなす。"""
        if self.is_empty and other.is_empty:
            return True
        return float(self.geom.symmetric_difference(other.geom).area) <= float(tolerance)

    # 演算子糖衣
    def __add__(self, other: "Region") -> "Region":
        return self.union(other)

    def __sub__(self, other: "Region") -> "Region":
        return self.difference(other)

    def __and__(self, other: "Region") -> "Region":
        return self.intersection(other)

    def __len__(self) -> int:
        """構成ポリゴン数。"""
        return len(self.polygons)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        if self.is_empty:
            return "Region(empty)"
        minx, miny, maxx, maxy = self.bounds
        return (
            f"Region(polygons={len(self)}, holes={self.n_holes}, area={self.area:.3f}, "
            f"bounds=({minx:.3f}, {miny:.3f}, {maxx:.3f}, {maxy:.3f}))"
        )


def chord_angle(chord: float, radius: float) -> float:
    """半径 `radius` の円で弦長 `chord` に対応する中心角 `2·asin(chord/2/radius)`。

    例外:
    - ValueError: 弦が直径を超える（実数解がない）場合。
    """
    if radius <= 0.0:
        raise ValueError(f"radius は正である必要があります: {radius}")
    ratio = (float(chord) / 2.0) / float(radius)
    if ratio > 1.0 or ratio < -1.0:
        raise ValueError(f"弦 {chord} は半径 {radius} の円の直径を超えています")
    return 2.0 * math.asin(ratio)


__all__ = ["Region", "chord_angle"]
