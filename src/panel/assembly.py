"""
どこで: `panel.assembly`。
何を: 外形・操作系・積層を組み合わせ、完成したパネルの `Scene` とカットシートを作る。
なぜ: 「穴を開けた各層」と「操作系の見た目」を 1 つの描画順付きシーンとして扱うため。

流れ:
1) `PanelSpec.profile()` で外形を作る。
2) 同じ配置で穴（cutout=True）を作り、全層から差し引く。
3) `show_controls` なら見た目（cutout=False）と注記を先頭に重ねる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from engine.core.region import Region
from engine.core.solid import Scene, Solid

from .config import (
    DEFAULT_LAYERS,
    DEFAULT_OPTIONS,
    PLAYER_CONFIG_2,
    ControlsOptions,
    Layer,
    PanelSpec,
    PlayerConfig,
)
from .controls_layout import ControlsLayout, panel_controls
from .stack import panel_multilayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CutSheet:
    """1 層分の加工用断面。"""

    name: str
    z: float
    region: Region


def _controls(
    spec: PanelSpec, players: PlayerConfig, options: ControlsOptions, cutout: bool
) -> ControlsLayout:
    return panel_controls(
        spec.size,
        curve_radius=spec.curve_radius,
        cutout=cutout,
        player_spacing=options.player_spacing,
        start_color=options.start_color,
        players=players,
        coin_spacing=options.coin_spacing,
        trackball=options.trackball,
        undermount=options.undermount,
        cluster_spacing=options.cluster_spacing,
    )


def panel(
    spec: PanelSpec,
    players: PlayerConfig = PLAYER_CONFIG_2,
    layers: Sequence[Layer] = DEFAULT_LAYERS,
    show_controls: bool = True,
    options: ControlsOptions = DEFAULT_OPTIONS,
) -> Scene:
    """完成パネルのシーンを返す。

    並び: 操作系の見た目（`show_controls` 時）→ 穴あきの各層（下→上）。

    例外:
    - InfeasibleCurveError: 曲率半径が外形または操作系の配置に対して小さすぎる場合。
    """
    profile = spec.profile()
    cutters = _controls(spec, players, options, cutout=True).cutters()
    layer_solids: tuple[Solid, ...] = tuple(s.cut(cutters) for s in panel_multilayer(profile, layers))

    scene = Scene(layer_solids)
    if show_controls:
        overlay = _controls(spec, players, options, cutout=False)
        scene = overlay.scene() + scene
    logger.debug(
        "panel size=%s curve=%s players=%d -> solids=%d holes=%d",
        spec.size,
        spec.curve_radius,
        len(players),
        len(scene),
        len(cutters),
    )
    return scene


def cut_sheet(scene: Scene, z: float) -> Region:
    """シーンを高さ z で切った断面（色付き Solid のみ）。"""
    return scene.section(z)


def cut_sheets(
    spec: PanelSpec,
    players: PlayerConfig = PLAYER_CONFIG_2,
    layers: Sequence[Layer] = DEFAULT_LAYERS,
    options: ControlsOptions = DEFAULT_OPTIONS,
) -> tuple[CutSheet, ...]:
    """各層の厚み中央で切ったカットシートを層順（下→上）に返す。"""
    scene = panel(spec, players, layers, show_controls=False, options=options)
    sheets = []
    for solid in scene.solids:
        z = solid.z0 + solid.height / 2.0
        sheets.append(CutSheet(solid.name, z, cut_sheet(scene, z)))
    return tuple(sheets)


__all__ = ["panel", "cut_sheet", "cut_sheets", "CutSheet"]
