from __future__ import annotations

import pytest

import effects  # noqa: F401  (組み込みエフェクトの登録)
from engine.core.region import Region
from effects.registry import effect, get_effect, is_effect_registered, list_effects, unregister


def test_builtin_effects_are_registered() -> None:
    names = set(list_effects())
    for n in ("offset", "outline", "round_corners", "mirror_dup", "fourcorners", "jigsaw_cut"):
        assert n in names
    assert list_effects() == sorted(list_effects())


def test_effect_decorator_supports_names() -> None:
    @effect(name="grow_one")
    def _grow(g: Region) -> Region:
        return g.buffer(1.0)

    @effect("shrink-one")
    def _shrink(g: Region) -> Region:
        return g.buffer(-1.0)

    try:
        assert get_effect("grow_one") is _grow
        assert is_effect_registered("shrink_one")
    finally:
        unregister("grow_one")
        unregister("shrink_one")
    assert not is_effect_registered("grow_one")


def test_effect_decorator_rejects_non_function() -> None:
    with pytest.raises(TypeError):
        effect(name="bad")(object())


def test_get_effect_missing_raises_keyerror() -> None:
    with pytest.raises(KeyError):
        get_effect("definitely_not_registered")
