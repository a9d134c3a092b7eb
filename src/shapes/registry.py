"""
どこで: `shapes` のレジストリ層。
何を: `@shape` で形状生成関数を登録し、名前で引けるようにする。
なぜ: `api.G` から名前で形状を解決し、利用者の独自形状も同じ経路で扱うため。

登録対象は関数のみで、戻り値は `Region` か `tuple[Solid, ...]`。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

ShapeFn = Callable[..., Any]

_shapes = BaseRegistry("shape")


def shape(arg: Any | None = None, /, name: str | None = None):
    """形状関数を登録するデコレータ（`@shape` / `@shape("name")` / `@shape(name=...)`）。"""
    return _shapes.decorator(arg, name)


def get_shape(name: str) -> ShapeFn:
    """登録済みの形状関数。未登録なら KeyError。"""
    return _shapes.get(name)


def list_shapes() -> list[str]:
    return _shapes.names()


def is_shape_registered(name: str) -> bool:
    return name in _shapes


def unregister(name: str) -> None:
    _shapes.unregister(name)


def get_registry() -> Mapping[str, ShapeFn]:
    return _shapes.snapshot()


__all__ = ["shape", "get_shape", "list_shapes", "is_shape_registered", "unregister", "get_registry"]
