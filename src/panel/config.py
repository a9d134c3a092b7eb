"""
どこで: `panel.config`。
何を: パネル外形・プレイヤー操作系・積層の設定値型と、名前付きの既定構成。
なぜ: 任意引数（インセット/曲率半径/トラックボール）の有無を明示的な Optional として扱い、
デモとテストで同じ不変な構成を共有するため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from common.materials import MDF, PLEX, color_of
from common.types import RGBA, Size2D

if TYPE_CHECKING:
    from engine.core.region import Region


def _check_size(name: str, size: Size2D) -> Size2D:
    w, h = float(size[0]), float(size[1])
    if w < 0.0 or h < 0.0:
        raise ValueError(f"{name} は非負である必要があります: {size}")
    return (w, h)


@dataclass(frozen=True)
class PanelSpec:
    """パネル外形の仕様。

    属性:
        size: 全体の (幅, 奥行)。奥行は背面 y=0 から前縁の頂点までを含む。
        inset: 背面側の細い張り出しの (幅, 奥行)。None で無し。
        curve_radius: 前縁を円弧にする半径。None で直線。
        corner_radius: 角丸め半径。
    """

    size: Size2D
    inset: Size2D | None = None
    curve_radius: float | None = None
    corner_radius: float = 10.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", _check_size("size", self.size))
        if self.inset is not None:
            object.__setattr__(self, "inset", _check_size("inset", self.inset))
        if self.corner_radius < 0.0:
            raise ValueError(f"corner_radius は 0 以上である必要があります: {self.corner_radius}")

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    def profile(self) -> Region:
        """`panel.profile.panel_profile` で外形 Region を作る。"""
        from .profile import panel_profile

        return panel_profile(
            self.size,
            inset=self.inset,
            curve_radius=self.curve_radius,
            corner_radius=self.corner_radius,
        )


@dataclass(frozen=True)
class PlayerControls:
    """1 プレイヤー分の操作系（ボタン数・色・レイアウト名）。"""

    buttons: int = 6
    color: object = "red"
    layout: str | None = None

    def __post_init__(self) -> None:
        if int(self.buttons) < 0:
            raise ValueError(f"buttons は 0 以上である必要があります: {self.buttons}")


PlayerConfig = tuple[PlayerControls, ...]


@dataclass(frozen=True)
class Layer:
    """積層の 1 層（下→上の順で並べる）。"""

    color: RGBA
    thickness: float
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", color_of(self.color))
        if not float(self.thickness) > 0.0:
            raise ValueError(f"層の厚みは正である必要があります: {self.thickness}")


@dataclass(frozen=True)
class ControlsOptions:
    """`panel_controls` に渡す配置オプション。

    既定は完成パネルの標準構成（コインボタン付き、トラックボール有り）。
    """

    player_spacing: float = 100.0
    start_color: object = "white"
    coin_spacing: float = 40.0
    trackball: bool = True
    undermount: float = 0.0
    cluster_spacing: float | None = None


DEFAULT_OPTIONS = ControlsOptions()


# 既定の積層: MDF（下）+ 透明アクリル（上）
DEFAULT_LAYERS: tuple[Layer, ...] = (
    Layer(MDF.color, MDF.thickness, MDF.name),
    Layer(PLEX.color, PLEX.thickness, PLEX.name),
)

PLAYER_CONFIG_1: PlayerConfig = (PlayerControls(8, "red", "sega2"),)
PLAYER_CONFIG_2: PlayerConfig = (
    PlayerControls(6, "red", "sega2"),
    PlayerControls(6, "blue", "sega2"),
)
PLAYER_CONFIG_4: PlayerConfig = (
    PlayerControls(4, "red", "straight"),
    PlayerControls(4, "blue", "straight"),
    PlayerControls(4, "green", "straight"),
    PlayerControls(4, "yellow", "straight"),
)

# デモ格子: 曲率半径（None = 直線）× プレイヤー構成
TEST_RADII: tuple[float | None, ...] = (None, 1500.0, 1000.0)
TEST_CONFIGS: tuple[PlayerConfig, ...] = (PLAYER_CONFIG_2, PLAYER_CONFIG_4)

# 基準パネル（900 x 400、背面 602 x 150 のインセット）
REFERENCE_PANEL = PanelSpec(size=(900.0, 400.0), inset=(602.0, 150.0), curve_radius=1000.0)


__all__ = [
    "PanelSpec",
    "PlayerControls",
    "PlayerConfig",
    "Layer",
    "ControlsOptions",
    "DEFAULT_OPTIONS",
    "DEFAULT_LAYERS",
    "PLAYER_CONFIG_1",
    "PLAYER_CONFIG_2",
    "PLAYER_CONFIG_4",
    "TEST_RADII",
    "TEST_CONFIGS",
    "REFERENCE_PANEL",
]
