"""
どこで: `panel.controls_layout`。
何を: スタート/コインボタン、プレイヤーごとのクラスタ、トラックボールをパネル上へ配置する。
なぜ: 同じ配置を「見た目（プレビュー）」と「穴（全層貫通カット）」の両方に使うため。

配置規則（パネル座標、プレイヤーは前縁 y=奥行 側に立ち -Y を向く）:
- 並び順はプレイヤーから見て左→右。プレイヤーの左手側は +X。
- スタート/コイン列: y = START_ROW_Y。プレイヤー間隔 `player_spacing` で X 中央揃え。
  `coin_spacing > 0` ならスタートの右（プレイヤー視点）にコインを並べる。各ボタンの手前に注記。
- クラスタ:
  - 直線: y = 奥行 - CLUSTER_INSET、X 方向に `cluster_spacing` 間隔で中央揃え。
  - 円弧: 中心 (幅/2, 奥行 - r)、半径 R = r - CLUSTER_INSET の円周上に、
    角度間隔 2·asin((spacing/2)/R) で扇状に並べ、各クラスタを中心へ向ける。
    見た目モードでは各クラスタに放射方向のガイド線を引く。
  - `cluster_spacing` 省略時は 幅 / プレイヤー数。
- トラックボール: X 中央、クラスタ列の TRACKBALL_BACKSET だけ背面寄り。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Literal

from common.materials import color_of
from common.types import Size2D, Vec2
from engine.core.region import Region, chord_angle
from engine.core.solid import Label, Scene, Solid, linear_extrude
from shapes.controls import button, control_cluster, utrak_trackball

from .config import PLAYER_CONFIG_2, PlayerConfig, PlayerControls
from .profile import InfeasibleCurveError

logger = logging.getLogger(__name__)

START_ROW_Y = 60.0
LABEL_OFFSET = 25.0
CLUSTER_INSET = 100.0
TRACKBALL_BACKSET = 80.0
GUIDE_LENGTH = 200.0
GUIDE_WIDTH = 1.0

PlacementKind = Literal["start", "coin", "cluster", "trackball", "guide"]


@dataclass(frozen=True)
class Placement:
    """配置済みの部品 1 つ。`solids` はパネル座標へ変換済み。"""

    kind: PlacementKind
    position: Vec2
    solids: tuple[Solid, ...]
    angle: float = 0.0
    player: int | None = None


@dataclass(frozen=True)
class ControlsLayout:
    placements: tuple[Placement, ...] = ()
    labels: tuple[Label, ...] = field(default=())
    cutout: bool = False

    def solids(self) -> tuple[Solid, ...]:
        return tuple(s for p in self.placements for s in p.solids)

    def count(self, kind: PlacementKind) -> int:
        return sum(1 for p in self.placements if p.kind == kind)

    def of_kind(self, kind: PlacementKind) -> tuple[Placement, ...]:
        return tuple(p for p in self.placements if p.kind == kind)

    def cutters(self) -> tuple[Solid, ...]:
        return tuple(s for s in self.solids() if s.is_cutter)

    def cutouts(self) -> Region:
        """全カット用 Solid の断面の和集合。"""
        return Region.union_all(s.profile for s in self.cutters())

    def scene(self) -> Scene:
        return Scene(self.solids(), self.labels)


def _place(solids: Iterable[Solid], position: Vec2, angle: float = 0.0) -> tuple[Solid, ...]:
    x, y = position
    return tuple(s.rotate(angle).translate(x, y) for s in solids)


def _cluster(pc: PlayerControls, undermount: float, cutout: bool) -> tuple[Solid, ...]:
    """クラスタを生成し、穴の外接範囲の X 中心が原点に来るよう平行移動する。

    見た目と穴で同じ平行移動量を使うため、基準は常に穴側の外接範囲。
    """
    holes = control_cluster(0.0, True, pc.buttons, pc.color, pc.layout)
    minx, _miny, maxx, _maxy = Region.union_all(s.profile for s in holes).bounds
    cx = (minx + maxx) / 2.0
    solids = holes if cutout else control_cluster(undermount, False, pc.buttons, pc.color, pc.layout)
    return tuple(s.translate(-cx, 0.0) for s in solids)


def _row_offsets(count: int, spacing: float) -> list[float]:
    """プレイヤー視点の左→右（= +X → -X）に並ぶ、中央揃えのオフセット列。"""
    return [((count - 1) / 2.0 - i) * float(spacing) for i in range(count)]


def _start_row(
    width: float,
    count: int,
    player_spacing: float,
    coin_spacing: float,
    start_color: object,
    cutout: bool,
) -> tuple[list[Placement], list[Label]]:
    placements: list[Placement] = []
    labels: list[Label] = []
    half = coin_spacing / 2.0 if coin_spacing > 0 else 0.0
    for i, dx in enumerate(_row_offsets(count, player_spacing)):
        x = width / 2.0 + dx
        spots: list[tuple[PlacementKind, float, object]] = [("start", x + half, start_color)]
        if coin_spacing > 0:
            spots.append(("coin", x - half, start_color))
        for kind, bx, color in spots:
            pos = (bx, START_ROW_Y)
            placements.append(Placement(kind, pos, _place(button(color, cutout), pos), player=i))
            labels.append(Label(kind, (bx, START_ROW_Y + LABEL_OFFSET), halign="center"))
    return placements, labels


def _guide(center: Vec2, radius: float, theta: float) -> Solid:
    line = Region.rect(GUIDE_WIDTH, GUIDE_LENGTH, origin=(-GUIDE_WIDTH / 2.0, radius - GUIDE_LENGTH))
    line = line.rotate(-theta).translate(*center)
    return linear_extrude(line, 0.5, color=color_of("grey"), name="guide")


def panel_controls(
    size: Size2D,
    curve_radius: float | None = None,
    cutout: bool = False,
    player_spacing: float = 100.0,
    start_color: object = "white",
    players: PlayerConfig = PLAYER_CONFIG_2,
    coin_spacing: float = 0.0,
    trackball: bool = False,
    undermount: float = 0.0,
    cluster_spacing: float | None = None,
) -> ControlsLayout:
    """操作系を配置した `ControlsLayout` を返す。

    例外:
    - InfeasibleCurveError: 円弧配置でクラスタ間隔が配置半径に対して大きすぎる場合。
    """
    w, h = float(size[0]), float(size[1])
    pcs: tuple[PlayerControls, ...] = tuple(players)
    n = len(pcs)

    placements, labels = _start_row(w, n, player_spacing, coin_spacing, start_color, cutout)

    cluster_y = h - CLUSTER_INSET
    spacing = float(cluster_spacing) if cluster_spacing is not None else (w / n if n else 0.0)
    if n and curve_radius is not None:
        r = float(curve_radius)
        center = (w / 2.0, h - r)
        radius = r - CLUSTER_INSET
        try:
            step = chord_angle(spacing, radius) if n > 1 else 0.0
        except ValueError as e:
            raise InfeasibleCurveError(
                f"クラスタ間隔 {spacing:.3f} は配置半径 {radius:.3f} の円弧に収まりません"
            ) from e
        for i, pc in enumerate(pcs):
            theta = ((n - 1) / 2.0 - i) * step
            pos = (center[0] + radius * math.sin(theta), center[1] + radius * math.cos(theta))
            angle = math.pi - theta
            local = _cluster(pc, undermount, cutout)
            placements.append(Placement("cluster", pos, _place(local, pos, angle), angle, i))
            if not cutout:
                placements.append(
                    Placement("guide", pos, (_guide(center, r, theta),), angle, i)
                )
    else:
        for i, (pc, dx) in enumerate(zip(pcs, _row_offsets(n, spacing))):
            pos = (w / 2.0 + dx, cluster_y)
            local = _cluster(pc, undermount, cutout)
            placements.append(Placement("cluster", pos, _place(local, pos, math.pi), math.pi, i))

    if trackball:
        pos = (w / 2.0, cluster_y - TRACKBALL_BACKSET)
        placements.append(Placement("trackball", pos, _place(utrak_trackball(cutout), pos)))

    logger.debug(
        "panel_controls players=%d curve=%s cutout=%s -> %d placements",
        n,
        curve_radius,
        cutout,
        len(placements),
    )
    return ControlsLayout(tuple(placements), tuple(labels), cutout)


__all__ = [
    "Placement",
    "ControlsLayout",
    "panel_controls",
    "START_ROW_Y",
    "CLUSTER_INSET",
]
