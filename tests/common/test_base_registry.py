from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry("shape")

    @reg.decorator
    def RoundedThing():  # noqa: N802 (キャメル名の正規化を確かめる)
        return 1

    assert "rounded_thing" in reg
    assert reg.get("RoundedThing") is RoundedThing
    assert reg.names() == ["rounded_thing"]


def test_decorator_forms() -> None:
    reg = BaseRegistry()

    @reg.decorator()
    def plain():
        return 0

    @reg.decorator("Named-One")
    def _a():
        return 1

    @reg.decorator(name="kw_name")
    def _b():
        return 2

    assert reg.names() == ["kw_name", "named_one", "plain"]
    with pytest.raises(TypeError):
        reg.decorator(42)  # type: ignore[arg-type]


def test_duplicate_and_unregister() -> None:
    reg = BaseRegistry("effect")

    @reg.decorator
    def sample():
        return 1

    # 同一オブジェクトの再登録は許容、別オブジェクトは拒否
    reg.add(sample, "sample")
    with pytest.raises(ValueError, match="effect 'sample'"):
        reg.add(lambda: 2, "sample")

    reg.unregister("Sample")
    assert "sample" not in reg
    reg.unregister("nonexistent")  # 例外にならない


def test_rejects_non_functions() -> None:
    reg = BaseRegistry("shape")
    with pytest.raises(TypeError, match="@shape"):
        reg.add(object())  # type: ignore[arg-type]


def test_key_normalization() -> None:
    assert BaseRegistry.normalize_key("My-Effect") == "my_effect"
    assert BaseRegistry.normalize_key("rounded-square") == "rounded_square"
    assert BaseRegistry.normalize_key("FourCorners") == "four_corners"
    assert BaseRegistry.normalize_key("a__b") == "a_b"


def test_invalid_keys_and_missing_lookup() -> None:
    reg = BaseRegistry()
    with pytest.raises(TypeError):
        123 in reg  # noqa: B015
    with pytest.raises(ValueError):
        "" in reg  # noqa: B015
    with pytest.raises(KeyError):
        reg.get("missing")


def test_snapshot_is_a_copy() -> None:
    reg = BaseRegistry()
    reg.add(lambda: 1, "a")
    view = reg.snapshot()
    view.clear()
    assert "a" in reg
    reg.clear()
    assert reg.names() == []
