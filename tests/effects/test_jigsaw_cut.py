from __future__ import annotations

import pytest

from common import settings
from effects.jigsaw import jigsaw_cut, jigsaw_split
from engine.core.region import Region
from shapes.jigsaw import jigsaw_mask


@pytest.fixture()
def board() -> Region:
    return Region.rect(300.0, 200.0)


def test_split_preserves_area(board: Region) -> None:
    left, right = jigsaw_split(board, 150.0)
    assert left.area + right.area == pytest.approx(board.area, rel=1e-7)
    assert (left & right).area == pytest.approx(0.0, abs=1e-6)
    # 歯は切断線より左へ食い込む
    assert left.bounds[2] <= 150.0 + 1e-6
    assert right.bounds[0] < 150.0 - 10.0


def test_cut_moves_pieces_apart(board: Region) -> None:
    out = jigsaw_cut(board, cut_at=150.0, gap=15.0)
    assert out.area == pytest.approx(board.area, rel=1e-7)
    assert out.bounds == pytest.approx((-15.0, 0.0, 315.0, 200.0), abs=1e-6)
    assert len(out) == 2


def test_cut_gap_defaults_to_setting(board: Region, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APN_JIGSAW_GAP", "5")
    settings.reload_from_env()
    out = jigsaw_cut(board, cut_at=100.0)
    assert out.bounds[0] == pytest.approx(-5.0)
    assert out.bounds[2] == pytest.approx(305.0)


def test_cut_at_none_is_passthrough(board: Region) -> None:
    assert jigsaw_cut(board).equals(board)
    assert jigsaw_cut(board, cut_at=None, gap=50.0).bounds == board.bounds


def test_cut_at_zero_still_splits(board: Region) -> None:
    # 0 は「分割しない」ではない（None のみが無効値）
    out = jigsaw_cut(board, cut_at=0.0, gap=10.0)
    assert out.bounds[2] == pytest.approx(310.0)


def test_no_teeth_gives_straight_split(board: Region) -> None:
    left, right = jigsaw_split(board, 120.0, tooth_count=0)
    assert left.equals(Region.rect(120.0, 200.0), tolerance=1e-6)
    assert right.area == pytest.approx(180.0 * 200.0)


def test_mask_shape() -> None:
    m = jigsaw_mask((100.0, 300.0), tooth_count=3, tooth_depth=20.0, rounding_radius=0.0)
    minx, miny, maxx, maxy = m.bounds
    assert minx == pytest.approx(-20.0)
    assert (miny, maxx, maxy) == pytest.approx((0.0, 100.0, 300.0))
    with pytest.raises(ValueError):
        jigsaw_mask(tooth_count=-1)
