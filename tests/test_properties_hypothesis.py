from __future__ import annotations

import math

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, settings  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from effects.jigsaw import jigsaw_split  # noqa: E402
from effects.mirror import mirror_dup  # noqa: E402
from engine.core.region import Region  # noqa: E402
from panel.stack import panel_multilayer  # noqa: E402
from panel.config import Layer  # noqa: E402
from shapes.corner import rounded_square  # noqa: E402

pytestmark = pytest.mark.optional


@settings(max_examples=30, deadline=None)
@given(
    w=st.floats(min_value=20.0, max_value=500.0),
    h=st.floats(min_value=20.0, max_value=500.0),
    r=st.one_of(st.just(0.0), st.floats(min_value=0.5, max_value=10.0)),
)
def test_rounded_square_area_formula(w: float, h: float, r: float) -> None:
    out = rounded_square((w, h), r)
    assert out.area == pytest.approx(w * h - (4.0 - math.pi) * r * r, rel=1e-3, abs=1e-6)


@settings(max_examples=30, deadline=None)
@given(
    x=st.floats(min_value=0.5, max_value=100.0),
    y=st.floats(min_value=-50.0, max_value=50.0),
    w=st.floats(min_value=0.5, max_value=50.0),
)
def test_mirror_dup_doubles_disjoint_input(x: float, y: float, w: float) -> None:
    r = Region.rect(w, w, origin=(x, y))
    assert mirror_dup(r).area == pytest.approx(2.0 * r.area, rel=1e-7)


@settings(max_examples=20, deadline=None)
@given(cut_at=st.floats(min_value=40.0, max_value=260.0), teeth=st.integers(0, 5))
def test_jigsaw_split_conserves_area(cut_at: float, teeth: int) -> None:
    board = Region.rect(300.0, 200.0)
    left, right = jigsaw_split(board, cut_at, tooth_count=teeth)
    assert left.area + right.area == pytest.approx(board.area, rel=1e-7)


@settings(max_examples=30, deadline=None)
@given(st.lists(st.floats(min_value=0.1, max_value=30.0), min_size=0, max_size=6))
def test_stack_top_face_at_zero(thicknesses: list[float]) -> None:
    layers = [Layer("white", t) for t in thicknesses]
    solids = panel_multilayer(Region.rect(10.0, 10.0), layers)
    assert len(solids) == len(layers)
    if solids:
        assert solids[-1].z1 == pytest.approx(0.0, abs=1e-9)
        assert solids[0].z0 == pytest.approx(-sum(thicknesses))
