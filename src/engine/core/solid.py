"""
どこで: `engine.core.solid`。
何を: `Region` の直線押し出し `Solid`、注記 `Label`、それらの順序付き集合 `Scene` を提供。
なぜ: 積層パネル（2.5D）を、メッシュを持たずに「断面 + Z 範囲 + 色」だけで表すため。

不変条件:
- `Solid.height > 0`。Z 範囲は `[z0, z0 + height]`。
- `Scene` の並びは描画順（背面→前面）。透明層は後ろに置かれる前提で呼び出し側が並べる。
- すべて不変（frozen dataclass）。変換は新しいインスタンスを返す。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Literal

from common.types import RGBA, Vec2

from .region import Region

# 貫通カット用の Z 範囲（パネル積層より十分厚い）
THROUGH_Z0 = -1000.0
THROUGH_HEIGHT = 2000.0


@dataclass(frozen=True)
class Solid:
    """2D 断面を Z 方向へ押し出した立体。

    属性:
        profile: 断面領域。
        z0: 下面の Z。
        height: 厚み（> 0）。
        color: RGBA(0–1)。None はカット用（描画しない）。
        name: 素材名や部品名。
    """

    profile: Region
    z0: float = 0.0
    height: float = 1.0
    color: RGBA | None = None
    name: str = ""

    def __post_init__(self) -> None:
        if not self.height > 0.0:
            raise ValueError(f"Solid の厚みは正である必要があります: {self.height}")

    @classmethod
    def through(cls, profile: Region, name: str = "cutout") -> "Solid":
        """全層を貫通するカット用ソリッド。"""
        return cls(profile=profile, z0=THROUGH_Z0, height=THROUGH_HEIGHT, color=None, name=name)

    @property
    def z1(self) -> float:
        return self.z0 + self.height

    @property
    def is_cutter(self) -> bool:
        return self.color is None

    def spans(self, z: float) -> bool:
        """`z0 <= z <= z1` なら True。"""
        return self.z0 <= z <= self.z1

    def overlaps(self, other: "Solid") -> bool:
        """Z 範囲が正の厚みで重なるか。"""
        return min(self.z1, other.z1) - max(self.z0, other.z0) > 0.0

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Solid":
        return replace(self, profile=self.profile.translate(dx, dy), z0=self.z0 + float(dz))

    def rotate(self, angle: float, center: Vec2 = (0.0, 0.0)) -> "Solid":
        return replace(self, profile=self.profile.rotate(angle, center))

    def cut(self, cutters: Iterable["Solid"]) -> "Solid":
        """Z 範囲が重なるカッターの断面を差し引いた Solid を返す。"""
        holes = Region.union_all(c.profile for c in cutters if self.overlaps(c))
        if holes.is_empty:
            return self
        return replace(self, profile=self.profile - holes)

    def section(self, z: float) -> Region:
        """高さ z での断面（範囲外は空）。"""
        return self.profile if self.spans(z) else Region.empty()


def linear_extrude(
    profile: Region,
    height: float,
    *,
    z0: float = 0.0,
    color: RGBA | None = None,
    name: str = "",
) -> Solid:
    """`profile` を `z0` から `height` だけ押し出す。"""
    return Solid(profile=profile, z0=float(z0), height=float(height), color=color, name=name)


@dataclass(frozen=True)
class Label:
    """文字注記（輪郭化はしない）。"""

    text: str
    position: Vec2
    halign: Literal["left", "center", "right"] = "center"
    size: float = 8.0

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Label":
        x, y = self.position
        return replace(self, position=(x + float(dx), y + float(dy)))


@dataclass(frozen=True)
class Scene:
    """描画順に並んだ Solid と Label の集合。"""

    solids: tuple[Solid, ...] = ()
    labels: tuple[Label, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "solids", tuple(self.solids))
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def is_empty(self) -> bool:
        return not self.solids and not self.labels

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Scene":
        return Scene(
            tuple(s.translate(dx, dy, dz) for s in self.solids),
            tuple(lb.translate(dx, dy) for lb in self.labels),
        )

    def concat(self, other: "Scene") -> "Scene":
        return Scene(self.solids + other.solids, self.labels + other.labels)

    def __add__(self, other: "Scene") -> "Scene":
        return self.concat(other)

    def visible(self) -> tuple[Solid, ...]:
        """色付き（描画対象）の Solid のみ。"""
        return tuple(s for s in self.solids if not s.is_cutter)

    def section(self, z: float) -> Region:
        """高さ z で全 Solid を切った断面の和集合（カット用 Solid は除外）。"""
        return Region.union_all(s.section(z) for s in self.visible())

    def footprint(self) -> Region:
        """上面視の投影（全 Solid 断面の和集合）。"""
        return Region.union_all(s.profile for s in self.visible())

    def bounds(self) -> tuple[float, float, float, float]:
        return self.footprint().bounds

    def z_range(self) -> tuple[float, float]:
        vis = self.visible()
        if not vis:
            return (0.0, 0.0)
        return (min(s.z0 for s in vis), max(s.z1 for s in vis))

    def __len__(self) -> int:
        return len(self.solids)


__all__ = ["Solid", "Label", "Scene", "linear_extrude", "THROUGH_Z0", "THROUGH_HEIGHT"]
