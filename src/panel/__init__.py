"""
どこで: `panel` パッケージ。
何を: パネル外形・操作系配置・積層・組み立ての公開 API を集約する。
"""

from .assembly import CutSheet, cut_sheet, cut_sheets, panel
from .config import (
    DEFAULT_LAYERS,
    PLAYER_CONFIG_1,
    PLAYER_CONFIG_2,
    PLAYER_CONFIG_4,
    REFERENCE_PANEL,
    TEST_CONFIGS,
    TEST_RADII,
    DEFAULT_OPTIONS,
    ControlsOptions,
    Layer,
    PanelSpec,
    PlayerConfig,
    PlayerControls,
)
from .controls_layout import ControlsLayout, Placement, panel_controls
from .profile import InfeasibleCurveError, front_edge, panel_profile
from .stack import panel_multilayer, stack_thickness

__all__ = [
    "panel",
    "cut_sheet",
    "cut_sheets",
    "CutSheet",
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
    "ControlsLayout",
    "Placement",
    "panel_controls",
    "InfeasibleCurveError",
    "front_edge",
    "panel_profile",
    "panel_multilayer",
    "stack_thickness",
]
