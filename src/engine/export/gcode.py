"""
どこで: `engine.export.gcode`。
何を: カットシート（`Region`）の全リングを、工具アップ移動 + 工具ダウン切削の G-code として書き出す。
なぜ: 各層の外形と穴をそのまま 2D 加工機（レーザー/ルーター/プロッタ）へ渡すため。

出力:
- ヘッダ（mm 単位、絶対座標、原点復帰）→ リングごとのボディ → フッタ（工具アップ）。
- リングの順は `Region.rings()` に従う（ポリゴンごとに外周→穴）。各リングは閉じて出力する。
- `origin` の加算、`decimals` の丸め、任意の Y 反転と範囲検証に対応。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Tuple

import numpy as np

from engine.core.region import Region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GCodeParams:
    """G-code 生成パラメータ。

    属性:
        travel_feed: 工具アップ移動のフィードレート [mm/min]。
        cut_feed: 切削時のフィードレート [mm/min]。
        z_up: 工具アップ時の Z 高さ [mm]。
        z_down: 工具ダウン時の Z 高さ [mm]。
        y_down: True で Y 反転を行う。
            - `sheet_height_mm` が指定されていれば厳密反転（y -> sheet_height_mm - y）。
            - 未指定時は簡易反転（y -> -y）。
        origin: 出力座標の原点 [mm]（X, Y）。
        decimals: 小数点以下の桁数（出力の丸め）。
        bed_range: 出力座標の範囲検証 [min, max]。None で無効。
        sheet_height_mm: 材料シートの高さ [mm]。Y 反転の厳密化に使用（任意）。
    """

    travel_feed: float = 1500.0
    cut_feed: float = 600.0
    z_up: float = 5.0
    z_down: float = -1.0
    y_down: bool = False
    origin: Tuple[float, float] = (0.0, 0.0)
    decimals: int = 3
    bed_range: Tuple[float, float] | None = None
    sheet_height_mm: float | None = None


def ring_arrays(region: Region) -> tuple[np.ndarray, np.ndarray]:
    """全リングを連結座標 `(N, 2)` と累積オフセット `(M+1,)` にする。"""
    rings = region.rings()
    if not rings:
        return np.zeros((0, 2), dtype=np.float64), np.zeros((1,), dtype=np.int64)
    coords = np.concatenate(rings, axis=0).astype(np.float64, copy=False)
    offsets = np.zeros((len(rings) + 1,), dtype=np.int64)
    offsets[1:] = np.cumsum([len(r) for r in rings])
    return coords, offsets


def _machine_coords(coords: np.ndarray, params: GCodeParams) -> np.ndarray:
    """Y 反転 → 原点加算 → 範囲検証（検証はオフセット後の実座標）。"""
    xy = np.array(coords, dtype=np.float64)
    if not len(xy):
        return xy
    if params.y_down:
        flip = 0.0 if params.sheet_height_mm is None else float(params.sheet_height_mm)
        xy[:, 1] = flip - xy[:, 1]
    xy += np.asarray(params.origin, dtype=np.float64)
    if params.bed_range is not None:
        lo, hi = params.bed_range
        if np.any(xy < lo) or np.any(xy > hi):
            raise ValueError("vertex is out of bed_range")
    return xy


class GCodeWriter:
    """G-code 書き出しクラス。

    リングごとに「工具アップ・早送りで始点へ → 工具ダウン・切削で残りの頂点 → 始点へ戻る」。
    """

    HEADER = (
        "; ====== Header ======",
        "G21 ; Set units to millimeters",
        "G90 ; Absolute positioning",
        "G28 ; Home all axes",
        "; ====== Body ======",
    )

    def write(self, region: Region, params: GCodeParams, fp: IO[str]) -> int:
        """`region` の輪郭を G-code として `fp` に書き出し、出力したリング数を返す。

        例外:
        - ValueError: `bed_range` 指定時に範囲外の頂点がある場合。
        """
        coords, offsets = ring_arrays(region)
        xy = _machine_coords(coords, params)
        nd = int(params.decimals)

        def move(x: float, y: float) -> str:
            return f"G1 X{round(float(x), nd)} Y{round(float(y), nd)}"

        tool_up = f"G0 Z{round(params.z_up, nd)}\nG1 F{int(round(params.travel_feed))}"
        tool_down = f"G1 Z{round(params.z_down, nd)}\nG1 F{int(round(params.cut_feed))}"

        fp.write("\n".join(self.HEADER) + "\n")
        written = 0
        for ri, (s, e) in enumerate(zip(offsets[:-1], offsets[1:])):
            verts = xy[int(s) : int(e)]
            if len(verts) < 2:
                continue
            lines = [f"; ring {ri} start", tool_up, move(*verts[0]), tool_down]
            lines.extend(move(x, y) for x, y in verts[1:])
            if not np.allclose(verts[0], verts[-1]):
                lines.append(move(*verts[0]))
            lines.append(f"; ring {ri} end")
            fp.write("\n".join(lines) + "\n")
            written += 1

        fp.write(f"; ====== Footer ======\nG0 Z{round(params.z_up, nd)}\n")
        return written


def write_gcode(region: Region, path: str | Path, params: GCodeParams = GCodeParams()) -> Path:
    """`region` を G-code ファイルとして保存し、保存先を返す。"""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fp:
        n = GCodeWriter().write(region, params, fp)
    logger.info("G-code を保存しました: %s（%d リング）", out, n)
    return out


__all__ = ["GCodeParams", "GCodeWriter", "ring_arrays", "write_gcode"]
