from __future__ import annotations

import pytest

from engine.core.region import Region
from engine.core.solid import THROUGH_HEIGHT, Label, Scene, Solid, linear_extrude


def _layer(z0: float = -3.0, height: float = 3.0) -> Solid:
    return linear_extrude(Region.rect(100.0, 50.0), height, z0=z0, color=(1, 1, 1, 1), name="plex")


def test_height_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Solid(Region.rect(1.0, 1.0), height=0.0)


def test_through_is_cutter_and_spans_everything() -> None:
    c = Solid.through(Region.circle(5.0))
    assert c.is_cutter
    assert c.height == THROUGH_HEIGHT
    assert c.spans(0.0) and c.spans(-500.0) and c.spans(500.0)


def test_cut_subtracts_only_overlapping_cutters() -> None:
    layer = _layer()
    hole = Solid.through(Region.circle(5.0, center=(50.0, 25.0)))
    above = Solid(Region.rect(10.0, 10.0), z0=10.0, height=1.0)
    out = layer.cut([hole, above])
    assert out.profile.n_holes == 1
    assert out.profile.area < layer.profile.area
    # Z が重ならないカッターだけなら不変
    assert layer.cut([above]).profile.equals(layer.profile)
    # 元の Solid は不変
    assert layer.profile.n_holes == 0


def test_section_inside_and_outside() -> None:
    layer = _layer()
    assert layer.section(-1.5).equals(layer.profile)
    assert layer.section(1.0).is_empty
    assert layer.z1 == pytest.approx(0.0)


def test_translate_moves_profile_and_z() -> None:
    s = _layer().translate(10.0, 5.0, -2.0)
    assert s.z0 == pytest.approx(-5.0)
    assert s.profile.bounds == pytest.approx((10.0, 5.0, 110.0, 55.0))


def test_scene_visible_section_and_ranges() -> None:
    bottom = _layer(z0=-21.0, height=18.0)
    top = _layer()
    cutter = Solid.through(Region.circle(5.0))
    label = Label("start", (10.0, 10.0))
    scene = Scene((bottom, top, cutter), (label,))

    assert len(scene) == 3
    assert scene.visible() == (bottom, top)
    assert scene.z_range() == pytest.approx((-21.0, 0.0))
    assert scene.section(-10.0).equals(bottom.profile)
    assert scene.bounds() == pytest.approx((0.0, 0.0, 100.0, 50.0))


def test_scene_translate_and_concat() -> None:
    a = Scene((_layer(),), (Label("coin", (0.0, 0.0)),))
    b = a.translate(200.0, 0.0)
    assert b.labels[0].position == (200.0, 0.0)
    both = a + b
    assert len(both) == 2
    assert len(both.labels) == 2
    assert both.bounds() == pytest.approx((0.0, 0.0, 300.0, 50.0))
    assert Scene().is_empty
