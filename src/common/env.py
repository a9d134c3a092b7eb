"""
どこで: `common.env`
何を: `APN_*` 環境変数の型付きパースヘルパ。
なぜ: `os.getenv` と不正値のフォールバックを一箇所にまとめるため。

いずれも「未設定・空白のみ・解釈不能」は既定値を返す（例外は投げない）。
"""

from __future__ import annotations

import os
from typing import Callable, Optional, TypeVar

T = TypeVar("T", int, float)

_TRUE = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _number(
    name: str, cast: Callable[[str], T], default: Optional[T], min_value: Optional[T]
) -> Optional[T]:
    raw = _raw(name)
    if raw is None:
        return default
    try:
        val = cast(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        return min_value
    return val


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数。`min_value` を下回れば下限に丸める。"""
    return _number(name, int, default, min_value)


def env_float(
    name: str, default: Optional[float] = None, *, min_value: Optional[float] = None
) -> Optional[float]:
    """浮動小数環境変数。`min_value` を下回れば下限に丸める。"""
    return _number(name, float, default, min_value)


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """前後の空白を落とした文字列。"""
    raw = _raw(name)
    return default if raw is None else raw


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数（1/0, true/false, yes/no, on/off）。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    s = raw.lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    try:
        return int(s) != 0
    except ValueError:
        return bool(default)
