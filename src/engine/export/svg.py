"""
どこで: `engine.export.svg`。
何を: `Region`（カットシート）と `Scene`（上面図）を mm 単位の SVG 文字列にする。
なぜ: レーザー/ルーターの CAM へそのまま渡せる輪郭と、確認用のプレビューを同じ変換で得るため。

座標変換（上面図、プレイヤー側から見下ろす向き）:
- svg_x = maxx - x, svg_y = y - miny。前縁（y 大）が図の下、プレイヤーの左手（+X）が図の左。
- 180 度回転のみで鏡像にはならない。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape

import numpy as np

from engine.core.region import Region
from engine.core.solid import Label, Scene
from util.color import to_svg_fill

logger = logging.getLogger(__name__)

Bounds = tuple[float, float, float, float]


def fmt(v: float) -> str:
    s = f"{float(v):.3f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def svg_header(w: float, h: float) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(w)}mm" height="{fmt(h)}mm" '
        f'viewBox="0 0 {fmt(w)} {fmt(h)}">\n'
    )


def svg_footer() -> str:
    return "</svg>\n"


def _to_view(xy: np.ndarray, bounds: Bounds, margin: float) -> np.ndarray:
    minx, miny, maxx, _maxy = bounds
    out = np.empty_like(xy)
    out[:, 0] = (maxx - xy[:, 0]) + margin
    out[:, 1] = (xy[:, 1] - miny) + margin
    return out


def region_path(region: Region, bounds: Bounds, margin: float = 0.0) -> str:
    """全リングを 1 本の path データ（M..L..Z の連結）にする。穴は evenodd で抜く。"""
    parts: list[str] = []
    for ring in region.rings():
        pts = _to_view(ring, bounds, margin)
        # shapely のリングは閉じている（終点 = 始点）ので終点は Z に任せる
        if len(pts) > 1 and np.allclose(pts[0], pts[-1]):
            pts = pts[:-1]
        if len(pts) < 2:
            continue
        head = f"M {fmt(pts[0, 0])} {fmt(pts[0, 1])}"
        body = " ".join(f"L {fmt(x)} {fmt(y)}" for x, y in pts[1:])
        parts.append(f"{head} {body} Z")
    return " ".join(parts)


def _canvas(bounds: Bounds, margin: float) -> tuple[float, float]:
    minx, miny, maxx, maxy = bounds
    return (maxx - minx + 2.0 * margin, maxy - miny + 2.0 * margin)


def region_to_svg(
    region: Region,
    *,
    margin: float = 5.0,
    stroke: str = "red",
    stroke_mm: float = 0.2,
    name: str = "CUT",
) -> str:
    """カットシート用 SVG（塗りなし、輪郭のみ）。"""
    bounds = region.bounds
    w, h = _canvas(bounds, margin)
    out = [svg_header(w, h)]
    out.append(
        f'  <g id="{escape(name)}" fill="none" stroke="{stroke}" stroke-width="{fmt(stroke_mm)}">\n'
    )
    if not region.is_empty:
        out.append(f'    <path d="{region_path(region, bounds, margin)}"/>\n')
    out.append("  </g>\n")
    out.append(svg_footer())
    return "".join(out)


def _label_anchor(lb: Label) -> str:
    # 図は左右が反転しないので、揃え方向もそのまま対応する
    return {"left": "start", "center": "middle", "right": "end"}[lb.halign]


def _labels_svg(labels: Iterable[Label], bounds: Bounds, margin: float) -> list[str]:
    out: list[str] = []
    for lb in labels:
        xy = _to_view(np.asarray([lb.position], dtype=np.float64), bounds, margin)[0]
        out.append(
            f'    <text x="{fmt(xy[0])}" y="{fmt(xy[1])}" font-size="{fmt(lb.size)}" '
            f'text-anchor="{_label_anchor(lb)}">{escape(lb.text)}</text>\n'
        )
    return out


def scene_to_svg(scene: Scene, *, margin: float = 10.0, stroke_mm: float = 0.3) -> str:
    """シーンの上面図。Solid を並び順（背面→前面）に塗り、注記を最後に置く。"""
    bounds = scene.bounds()
    w, h = _canvas(bounds, margin)
    out = [svg_header(w, h)]
    out.append(f'  <g id="SOLIDS" fill-rule="evenodd" stroke="black" stroke-width="{fmt(stroke_mm)}">\n')
    for solid in scene.visible():
        if solid.profile.is_empty:
            continue
        fill, opacity = to_svg_fill(solid.color)
        out.append(
            f'    <path d="{region_path(solid.profile, bounds, margin)}" fill="{fill}" '
            f'fill-opacity="{fmt(opacity)}" data-name="{escape(solid.name)}"/>\n'
        )
    out.append("  </g>\n")
    if scene.labels:
        out.append('  <g id="LABELS" fill="black" font-family="Arial">\n')
        out.extend(_labels_svg(scene.labels, bounds, margin))
        out.append("  </g>\n")
    out.append(svg_footer())
    return "".join(out)


def write_svg(text: str, path: str | Path) -> Path:
    """SVG 文字列を UTF-8 で保存し、保存先を返す。"""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    logger.info("SVG を保存しました: %s", out)
    return out


__all__ = ["fmt", "region_path", "region_to_svg", "scene_to_svg", "write_svg"]
