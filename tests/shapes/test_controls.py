from __future__ import annotations

import math

import pytest

from shapes.controls import (
    BUTTON_SIZES,
    LAYOUTS,
    TRACKBALL_HOLE,
    button,
    control_cluster,
    layout_slots,
    utrak_trackball,
)


def test_button_cutout_is_single_through_hole() -> None:
    (hole,) = button("red", cutout=True)
    assert hole.is_cutter
    assert hole.profile.area == pytest.approx(math.pi * 15.0**2, rel=1e-3)


def test_button_visual_parts_and_size() -> None:
    parts = button("blue", size="24mm", center=(10.0, 5.0))
    assert len(parts) == 2
    assert all(not p.is_cutter for p in parts)
    bezel = parts[0]
    minx, miny, maxx, maxy = bezel.profile.bounds
    assert (maxx - minx) == pytest.approx(BUTTON_SIZES["24mm"].bezel, rel=1e-3)
    assert ((minx + maxx) / 2.0, (miny + maxy) / 2.0) == pytest.approx((10.0, 5.0), abs=1e-6)
    with pytest.raises(ValueError):
        button(size="40mm")


def test_cluster_counts() -> None:
    holes = control_cluster(cutout=True, max_buttons=6)
    assert len(holes) == 1 + 6
    assert all(s.is_cutter for s in holes)
    visual = control_cluster(cutout=False, max_buttons=6)
    assert len(visual) == 3 + 2 * 6
    assert all(not s.is_cutter for s in visual)
    assert len(control_cluster(cutout=True, max_buttons=0)) == 1


def test_cluster_rejects_bad_counts_and_layouts() -> None:
    with pytest.raises(ValueError):
        control_cluster(max_buttons=-1)
    with pytest.raises(ValueError):
        control_cluster(max_buttons=len(LAYOUTS["sega2"]) + 1)
    with pytest.raises(ValueError):
        control_cluster(layout="nope")


def test_cluster_buttons_sit_on_players_right() -> None:
    holes = control_cluster(cutout=True, max_buttons=8, layout="straight")
    # 先頭はレバー（原点）、以降のボタンはすべて +x 側
    assert holes[0].profile.bounds[0] < 0.0 < holes[0].profile.bounds[2]
    assert all(s.profile.bounds[0] > 0.0 for s in holes[1:])


def test_layout_slots_lookup() -> None:
    assert layout_slots(None) == LAYOUTS["sega2"]
    assert layout_slots(" VEWLIX ") == LAYOUTS["vewlix"]


def test_trackball() -> None:
    (hole,) = utrak_trackball(cutout=True)
    assert hole.profile.bounds == pytest.approx(
        (-TRACKBALL_HOLE / 2, -TRACKBALL_HOLE / 2, TRACKBALL_HOLE / 2, TRACKBALL_HOLE / 2), abs=1e-6
    )
    visual = utrak_trackball()
    assert len(visual) == 2
    assert visual[0].profile.n_holes == 1
