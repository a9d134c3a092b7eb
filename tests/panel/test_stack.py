from __future__ import annotations

from types import SimpleNamespace

import pytest

from common.materials import MDF, PLEX
from engine.core.region import Region
from panel.config import DEFAULT_LAYERS, Layer
from panel.stack import panel_multilayer, stack_thickness


@pytest.fixture()
def profile() -> Region:
    return Region.rect(100.0, 50.0)


def test_default_layers_mdf_then_plex(profile: Region) -> None:
    bottom, top = panel_multilayer(profile)
    assert (bottom.name, top.name) == ("mdf", "plex")
    assert bottom.z0 == pytest.approx(-(MDF.thickness + PLEX.thickness))
    assert bottom.z1 == pytest.approx(-PLEX.thickness)
    assert top.z0 == pytest.approx(-PLEX.thickness)
    assert top.z1 == pytest.approx(0.0)
    assert top.color == PLEX.color
    assert all(s.profile.equals(profile) for s in (bottom, top))


def test_offsets_are_cumulative_and_ordered(profile: Region) -> None:
    layers = [Layer("red", 1.0, "a"), Layer("green", 2.0, "b"), Layer("blue", 3.0, "c")]
    solids = panel_multilayer(profile, layers)
    assert [s.name for s in solids] == ["a", "b", "c"]
    assert [s.z0 for s in solids] == pytest.approx([-6.0, -5.0, -3.0])
    assert [s.height for s in solids] == pytest.approx([1.0, 2.0, 3.0])
    # 隣接層は隙間なく接する
    for lower, upper in zip(solids, solids[1:]):
        assert lower.z1 == pytest.approx(upper.z0)
        assert not lower.overlaps(upper)
    assert stack_thickness(layers) == pytest.approx(6.0)


def test_empty_layers(profile: Region) -> None:
    assert panel_multilayer(profile, []) == ()
    assert stack_thickness([]) == 0.0


def test_unnamed_layer_gets_index_name(profile: Region) -> None:
    (s,) = panel_multilayer(profile, [Layer("white", 4.0)])
    assert s.name == "layer0"


def test_non_positive_thickness_raises(profile: Region) -> None:
    with pytest.raises(ValueError):
        Layer("white", 0.0)
    bad = SimpleNamespace(color=(1.0, 1.0, 1.0, 1.0), thickness=-1.0, name="bad")
    with pytest.raises(ValueError):
        panel_multilayer(profile, [DEFAULT_LAYERS[0], bad])
