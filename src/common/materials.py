"""
どこで: `common.materials`。
何を: 板材の厚み/色の定数と、色指定（名前/Hex/RGB）を RGBA へ解決する `color_of`。
なぜ: 積層の既定値とボタン色の受理仕様を一箇所で管理するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from util.color import normalize_color

from .types import RGBA

# 名前付き色（RGBA 0–1）。未知の名前は Hex/タプルとして解釈を試みる。
NAMED_COLORS: dict[str, RGBA] = {
    "black": (0.0, 0.0, 0.0, 1.0),
    "white": (1.0, 1.0, 1.0, 1.0),
    "red": (0.85, 0.1, 0.1, 1.0),
    "blue": (0.1, 0.25, 0.85, 1.0),
    "green": (0.1, 0.65, 0.2, 1.0),
    "yellow": (0.95, 0.85, 0.1, 1.0),
    "orange": (1.0, 0.55, 0.0, 1.0),
    "purple": (0.5, 0.2, 0.65, 1.0),
    "silver": (0.75, 0.75, 0.75, 1.0),
    "grey": (0.5, 0.5, 0.5, 1.0),
    "gray": (0.5, 0.5, 0.5, 1.0),
}


def color_of(value: object) -> RGBA:
    """色指定を RGBA(0–1) に解決する。

    受理: 名前（`NAMED_COLORS`）、Hex 文字列、(r,g,b[,a]) タプル。

    例外:
    - ValueError: いずれとしても解釈できない場合。
    """
    if isinstance(value, str):
        key = value.strip().lower()
        if key in NAMED_COLORS:
            return NAMED_COLORS[key]
    return normalize_color(value)


@dataclass(frozen=True)
class Material:
    name: str
    color: RGBA
    thickness: float


# 透明アクリル（上面）と MDF（構造材）
PLEX_THICKNESS = 3.0
PLEX_COLOR: RGBA = (0.85, 0.9, 1.0, 0.35)
MDF_THICKNESS = 18.0
MDF_COLOR: RGBA = (0.55, 0.42, 0.3, 1.0)

PLEX = Material("plex", PLEX_COLOR, PLEX_THICKNESS)
MDF = Material("mdf", MDF_COLOR, MDF_THICKNESS)


__all__ = [
    "NAMED_COLORS",
    "color_of",
    "Material",
    "PLEX",
    "MDF",
    "PLEX_THICKNESS",
    "PLEX_COLOR",
    "MDF_THICKNESS",
    "MDF_COLOR",
]
