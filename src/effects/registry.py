"""
どこで: `effects` のレジストリ層。
何を: `@effect` で Region→Region の加工関数を登録し、名前で引けるようにする。
なぜ: `api.E` のパイプラインが名前だけで加工を解決できるようにするため。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

EffectFn = Callable[..., Any]

_effects = BaseRegistry("effect")


def effect(arg: Any | None = None, /, name: str | None = None):
    """エフェクト関数を登録するデコレータ。

    `@effect` / `@effect()` は関数名から、`@effect("x")` / `@effect(name="x")` は明示名で登録する。
    関数以外（クラス/インスタンス）は TypeError。
    """
    return _effects.decorator(arg, name)


def get_effect(name: str) -> EffectFn:
    return _effects.get(name)


def list_effects() -> list[str]:
    return _effects.names()


def is_effect_registered(name: str) -> bool:
    return name in _effects


def unregister(name: str) -> None:
    _effects.unregister(name)


def get_registry() -> Mapping[str, EffectFn]:
    return _effects.snapshot()


__all__ = ["effect", "get_effect", "list_effects", "is_effect_registered", "unregister", "get_registry"]
