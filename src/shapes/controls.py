"""
どこで: `shapes.controls`。
何を: ボタン・レバー＋ボタン群（コントロールクラスタ）・トラックボールの形状ライブラリ。
なぜ: 配置（`panel.controls_layout`）から寸法の詳細を切り離し、同じ呼び出しで
「穴（cutout）」と「見た目（visual）」の両方を得るため。

座標系（クラスタ局所）:
- 原点 = レバー中心。+x = プレイヤーの右手側、+y = プレイヤーから遠い側。
- 配置側でパネル座標へ回転する（直線配置では π 回転）。
- Z はパネル上面 = 0。`undermount` はレバー取付板を上面から下げる量。

戻り値は常に `tuple[Solid, ...]`:
- cutout=True: 全層貫通のカット用 Solid（color=None）。
- cutout=False: 色付きの見た目用 Solid。
"""

from __future__ import annotations

from dataclasses import dataclass

from common.types import Vec2
from engine.core.region import Region
from engine.core.solid import Solid, linear_extrude
from common.materials import color_of

from .registry import shape


@dataclass(frozen=True)
class ButtonSize:
    hole: float  # 取付穴の直径
    bezel: float  # ベゼル外径
    cap: float  # プランジャー径


BUTTON_SIZES: dict[str, ButtonSize] = {
    "30mm": ButtonSize(hole=30.0, bezel=33.0, cap=24.0),
    "24mm": ButtonSize(hole=24.0, bezel=27.0, cap=19.0),
}

JOYSTICK_HOLE = 24.0
JOYSTICK_BALL = 35.0
JOYSTICK_SHAFT = 8.0
JOYSTICK_PLATE: Vec2 = (65.0, 97.0)
JOYSTICK_HEIGHT = 32.0

TRACKBALL_HOLE = 60.0
TRACKBALL_BALL = 57.0
TRACKBALL_BEZEL = 76.0

# ボタン位置（局所座標）。並びは max_buttons で先頭から使う順。
LAYOUTS: dict[str, tuple[Vec2, ...]] = {
    # 上段 3 → 下段 3 → 4 列目（上、下）
    "sega2": (
        (70.0, 18.0),
        (106.0, 27.0),
        (142.0, 27.0),
        (70.0, -18.0),
        (106.0, -9.0),
        (142.0, -9.0),
        (178.0, 18.0),
        (178.0, -18.0),
    ),
    "vewlix": (
        (66.0, 14.0),
        (101.0, 30.0),
        (137.0, 30.0),
        (60.0, -21.0),
        (95.0, -5.0),
        (131.0, -5.0),
        (173.0, 30.0),
        (167.0, -5.0),
    ),
    "straight": (
        (70.0, 18.0),
        (106.0, 18.0),
        (142.0, 18.0),
        (70.0, -18.0),
        (106.0, -18.0),
        (142.0, -18.0),
        (178.0, 18.0),
        (178.0, -18.0),
    ),
}
DEFAULT_LAYOUT = "sega2"


def layout_slots(layout: str | None) -> tuple[Vec2, ...]:
    """名前付きレイアウトのボタン位置を返す。

    例外:
    - ValueError: 未知のレイアウト名。
    """
    name = DEFAULT_LAYOUT if layout is None else str(layout).strip().lower()
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(f"未知のボタンレイアウト: {layout!r}（{sorted(LAYOUTS)}）") from None


@shape
def button(
    color: object = "red",
    cutout: bool = False,
    *,
    size: str = "30mm",
    center: Vec2 = (0.0, 0.0),
) -> tuple[Solid, ...]:
    """押しボタン 1 個。"""
    try:
        dims = BUTTON_SIZES[size]
    except KeyError:
        raise ValueError(f"未知のボタンサイズ: {size!r}") from None
    if cutout:
        return (Solid.through(Region.circle(dims.hole / 2.0, center=center), name="button"),)
    rgba = color_of(color)
    bezel = linear_extrude(
        Region.circle(dims.bezel / 2.0, center=center), 3.0, color=rgba, name="button_bezel"
    )
    cap = linear_extrude(
        Region.circle(dims.cap / 2.0, center=center), 8.0, z0=3.0, color=rgba, name="button_cap"
    )
    return (bezel, cap)


def _joystick(undermount: float, cutout: bool, color: object) -> tuple[Solid, ...]:
    if cutout:
        return (Solid.through(Region.circle(JOYSTICK_HOLE / 2.0), name="joystick"),)
    plate_z0 = -float(undermount) - 2.0
    plate = linear_extrude(
        Region.rect(*JOYSTICK_PLATE, center=True),
        2.0,
        z0=plate_z0,
        color=color_of("silver"),
        name="joystick_plate",
    )
    shaft = linear_extrude(
        Region.circle(JOYSTICK_SHAFT / 2.0),
        JOYSTICK_HEIGHT - plate_z0,
        z0=plate_z0,
        color=color_of("silver"),
        name="joystick_shaft",
    )
    ball = linear_extrude(
        Region.circle(JOYSTICK_BALL / 2.0),
        JOYSTICK_BALL,
        z0=JOYSTICK_HEIGHT,
        color=color_of(color),
        name="joystick_ball",
    )
    return (plate, shaft, ball)


@shape
def control_cluster(
    undermount: float = 0.0,
    cutout: bool = False,
    max_buttons: int = 6,
    color: object = "red",
    layout: str | None = None,
) -> tuple[Solid, ...]:
    """レバー 1 本 + ボタン `max_buttons` 個のクラスタ（局所座標）。

    引数:
        undermount: レバー取付板を上面から下げる量 [mm]（見た目のみ）。
        cutout: True で穴、False で見た目。
        max_buttons: ボタン数（0 ならレバーのみ）。
        color: ボタン/レバー玉の色（名前, Hex, RGB）。
        layout: レイアウト名（None は "sega2"）。

    例外:
    - ValueError: 未知のレイアウト、負数、またはレイアウトの枠を超えるボタン数。
    """
    count = int(max_buttons)
    if count < 0:
        raise ValueError(f"max_buttons は 0 以上である必要があります: {max_buttons}")
    slots = layout_slots(layout)
    if count > len(slots):
        raise ValueError(
            f"レイアウト {layout or DEFAULT_LAYOUT!r} のボタン枠は {len(slots)} 個です: {count}"
        )
    parts = list(_joystick(undermount, cutout, color))
    for pos in slots[:count]:
        parts.extend(button(color, cutout, center=pos))
    return tuple(parts)


@shape
def utrak_trackball(cutout: bool = False, *, color: object = "white") -> tuple[Solid, ...]:
    """U-Trak 型トラックボール（上面取付）。"""
    if cutout:
        return (Solid.through(Region.circle(TRACKBALL_HOLE / 2.0), name="trackball"),)
    bezel = linear_extrude(
        Region.circle(TRACKBALL_BEZEL / 2.0) - Region.circle(TRACKBALL_BALL / 2.0 + 1.0),
        2.0,
        color=color_of("black"),
        name="trackball_bezel",
    )
    ball = linear_extrude(
        Region.circle(TRACKBALL_BALL / 2.0),
        TRACKBALL_BALL / 2.0,
        z0=-TRACKBALL_BALL / 4.0,
        color=color_of(color),
        name="trackball_ball",
    )
    return (bezel, ball)
