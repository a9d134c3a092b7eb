"""
どこで: `panel.demo`。
何を: デモ用のパネル格子シーンと、基準パネルの層ごとのカットシート（SVG/G-code）を書き出すエントリ。
なぜ: 曲率半径 × プレイヤー構成の組み合わせを一目で確認し、そのまま加工データも得るため。

構成（`configs/default.yaml` + ルート `config.yaml`、欠けた値は組み込みの既定値）:
- output.demo_svg / output.sheet_prefix
- reference_panel.size / inset / curve_radius / corner_radius
- reference_controls.players / trackball / coin_spacing / player_spacing
- gcode.*（`GCodeParams` のフィールド）
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from common.logging import setup_default_logging
from engine.core.solid import Scene
from engine.export.gcode import GCodeParams, write_gcode
from engine.export.svg import region_to_svg, scene_to_svg, write_svg
from util.paths import ensure_output_dir
from util.utils import load_config

from .assembly import cut_sheets, panel
from .config import (
    DEFAULT_OPTIONS,
    PLAYER_CONFIG_1,
    PLAYER_CONFIG_2,
    PLAYER_CONFIG_4,
    REFERENCE_PANEL,
    TEST_CONFIGS,
    TEST_RADII,
    ControlsOptions,
    PanelSpec,
    PlayerConfig,
)

logger = logging.getLogger(__name__)

DEMO_SIZE = (900.0, 400.0)
DEMO_INSET = (602.0, 150.0)
DEMO_PITCH = (1000.0, 500.0)

_PLAYER_CONFIGS: dict[int, PlayerConfig] = {
    1: PLAYER_CONFIG_1,
    2: PLAYER_CONFIG_2,
    4: PLAYER_CONFIG_4,
}


def demo_scene() -> Scene:
    """`TEST_RADII`（列）× `TEST_CONFIGS`（行）のパネルを固定ピッチで並べたシーン。"""
    scene = Scene()
    for row, players in enumerate(TEST_CONFIGS):
        for col, radius in enumerate(TEST_RADII):
            spec = PanelSpec(size=DEMO_SIZE, inset=DEMO_INSET, curve_radius=radius)
            cell = panel(spec, players, options=ControlsOptions(coin_spacing=0.0))
            scene = scene + cell.translate(col * DEMO_PITCH[0], row * DEMO_PITCH[1])
    logger.debug("demo_scene cells=%d solids=%d", len(TEST_RADII) * len(TEST_CONFIGS), len(scene))
    return scene


def _section(cfg: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = cfg.get(key)
    return value if isinstance(value, Mapping) else {}


def reference_from_config(
    cfg: Mapping[str, Any],
) -> tuple[PanelSpec, PlayerConfig, ControlsOptions]:
    """構成辞書から基準パネル・プレイヤー構成・配置オプションを作る。

    不正な値は警告して組み込みの既定値に戻す。
    """
    spec = REFERENCE_PANEL
    players = PLAYER_CONFIG_4
    options = DEFAULT_OPTIONS

    p = _section(cfg, "reference_panel")
    if p:
        try:
            inset = p.get("inset", spec.inset)
            curve = p.get("curve_radius", spec.curve_radius)
            spec = PanelSpec(
                size=tuple(float(v) for v in p.get("size", spec.size)),
                inset=None if inset is None else tuple(float(v) for v in inset),
                curve_radius=None if curve is None else float(curve),
                corner_radius=float(p.get("corner_radius", spec.corner_radius)),
            )
        except (TypeError, ValueError) as e:
            logger.warning("reference_panel が不正です（既定値を使います）: %s", e)
            spec = REFERENCE_PANEL

    c = _section(cfg, "reference_controls")
    if c:
        try:
            n = int(c.get("players", 4))
            if n not in _PLAYER_CONFIGS:
                raise ValueError(f"players は {sorted(_PLAYER_CONFIGS)} のいずれか: {n}")
            players = _PLAYER_CONFIGS[n]
            options = ControlsOptions(
                player_spacing=float(c.get("player_spacing", options.player_spacing)),
                coin_spacing=float(c.get("coin_spacing", options.coin_spacing)),
                trackball=bool(c.get("trackball", options.trackball)),
            )
        except (TypeError, ValueError) as e:
            logger.warning("reference_controls が不正です（既定値を使います）: %s", e)
    return spec, players, options


def gcode_params_from_config(cfg: Mapping[str, Any]) -> GCodeParams:
    """`gcode` セクションのうち `GCodeParams` のフィールド名に一致するキーだけ採用する。"""
    known = {f.name for f in fields(GCodeParams)}
    overrides = {k: v for k, v in _section(cfg, "gcode").items() if k in known}
    try:
        return GCodeParams(**overrides)
    except TypeError as e:
        logger.warning("gcode が不正です（既定値を使います）: %s", e)
        return GCodeParams()


def main() -> list[Path]:
    """デモ SVG と基準パネルの層別カットシート（SVG + G-code）を書き出す。"""
    setup_default_logging()
    cfg = load_config()
    out_cfg = _section(cfg, "output")
    out_dir = ensure_output_dir()

    written = [write_svg(scene_to_svg(demo_scene()), out_dir / str(out_cfg.get("demo_svg", "demo.svg")))]

    spec, players, options = reference_from_config(cfg)
    params = gcode_params_from_config(cfg)
    prefix = str(out_cfg.get("sheet_prefix", "reference"))
    for i, sheet in enumerate(cut_sheets(spec, players, options=options)):
        stem = f"{prefix}_{i}_{sheet.name}"
        written.append(write_svg(region_to_svg(sheet.region, name=sheet.name), out_dir / f"{stem}.svg"))
        written.append(write_gcode(sheet.region, out_dir / f"{stem}.gcode", params))
    logger.info("%d ファイルを %s に書き出しました", len(written), out_dir)
    return written


if __name__ == "__main__":
    main()
