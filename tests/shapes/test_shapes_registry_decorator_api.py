from __future__ import annotations

import pytest

import shapes  # noqa: F401  (組み込み形状の登録)
from engine.core.region import Region
from shapes.registry import get_registry, get_shape, is_shape_registered, list_shapes, shape, unregister


def test_builtin_shapes_are_registered() -> None:
    names = set(list_shapes())
    for n in ("rounded_square", "corner_mask", "jigsaw_mask", "control_cluster", "button", "ngon"):
        assert n in names
    assert get_shape("RoundedSquare") is get_shape("rounded_square")


def test_shape_decorator_supports_name_keyword() -> None:
    @shape(name="custom_test_shape")
    def custom_test_shape(**params: object) -> Region:
        return Region.empty()

    assert is_shape_registered("custom_test_shape")
    unregister("custom_test_shape")
    assert not is_shape_registered("custom_test_shape")


def test_shape_decorator_supports_positional_name() -> None:
    @shape("positional_named_shape")
    def _impl(**params: object) -> Region:
        return Region.empty()

    assert is_shape_registered("positional_named_shape")
    assert "positional_named_shape" in get_registry()
    unregister("positional_named_shape")


def test_shape_decorator_rejects_non_function_with_message() -> None:
    class NotFunc:  # noqa: N801 (テスト用の簡易クラス)
        pass

    deco = shape(name="bad")
    with pytest.raises(TypeError) as ei:
        deco(NotFunc)
    assert "got" in str(ei.value)
