from __future__ import annotations

import math

import pytest

from api import E, G, Pipeline, Region, effect, panel, shape
from effects.registry import unregister as unregister_effect
from shapes.registry import unregister as unregister_shape


def test_g_resolves_registered_shapes() -> None:
    sq = G.rounded_square(size=(100.0, 50.0), r=5.0)
    assert isinstance(sq, Region)
    assert sq.area == pytest.approx(5000.0 - (4.0 - math.pi) * 25.0, rel=1e-3)
    assert "rounded_square" in G.list_shapes()
    assert "rounded_square" in dir(G)
    assert G.empty().is_empty


def test_g_unknown_shape_raises_attribute_error() -> None:
    with pytest.raises(AttributeError):
        G.no_such_shape


def test_g_picks_up_user_shapes_and_unregister() -> None:
    @shape
    def api_test_blob(r: float = 1.0) -> Region:
        return Region.circle(r)

    try:
        assert G.api_test_blob(r=2.0).area > 12.0
    finally:
        unregister_shape("api_test_blob")
    with pytest.raises(AttributeError):
        G.api_test_blob(r=2.0)


def test_e_chain_matches_direct_calls() -> None:
    from effects.offset import offset
    from effects.outline import outline

    sq = Region.rect(20.0, 10.0)
    pipe = E.offset(distance=2.0).outline(line_width=1.0)
    expected = outline(offset(sq, distance=2.0), line_width=1.0)
    assert pipe(sq).equals(expected)
    built = pipe.build()
    assert isinstance(built, Pipeline)
    assert len(built) == 2
    assert built.steps[0][0] == "offset"


def test_e_pipeline_bypass_and_empty() -> None:
    sq = Region.rect(20.0, 10.0)
    pipe = E.pipeline.offset(distance=5.0, bypass=True).build()
    assert len(pipe) == 0
    assert pipe(sq).equals(sq)


def test_e_unknown_effect_raises_attribute_error() -> None:
    with pytest.raises(AttributeError):
        E.no_such_effect(distance=1.0)
    with pytest.raises(AttributeError):
        E.pipeline.no_such_effect


def test_e_rejects_unknown_parameters_when_chaining() -> None:
    with pytest.raises(TypeError, match="offset"):
        E.offset(distnce=2.0)
    with pytest.raises(TypeError, match="round_corners"):
        E.pipeline.outline(line_width=1.0).round_corners(radius=2.0, sharpness=1.0)
    # bypass されたステップは検証しない
    assert len(E.pipeline.mirror_dup(bypass=True, bogus=1).build()) == 0


def test_e_picks_up_user_effects() -> None:
    @effect
    def api_test_grow(g: Region, *, amount: float = 1.0) -> Region:
        return g.buffer(amount, join="mitre")

    try:
        out = E.api_test_grow(amount=1.0)(Region.rect(2.0, 2.0))
        assert out.area == pytest.approx(16.0)
    finally:
        unregister_effect("api_test_grow")


def test_panel_reexport() -> None:
    from panel import panel as panel_fn

    assert panel is panel_fn
