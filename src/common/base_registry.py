"""
名前付きレジストリ
shapes/ と effects/ の両方で使う、関数を名前で引くための辞書ラッパ
"""

import inspect
import re
from typing import Any, Callable


class BaseRegistry:
    """関数レジストリ。

    - キーは正規化される（"RoundedSquare" / "rounded-square" → "rounded_square"）。
    - 同じキーへ別オブジェクトを再登録すると ValueError。
    - `kind` はエラーメッセージ用の種別名（"shape" / "effect"）。
    """

    def __init__(self, kind: str = "item"):
        self.kind = kind
        self._entries: dict[str, Callable[..., Any]] = {}

    @staticmethod
    def normalize_key(name: str) -> str:
        """レジストリキーの正規化（例: "FourCorners" -> "four_corners"）。"""
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        if not name:
            raise ValueError("レジストリキーは空であってはなりません")
        key = name.replace("-", "_")
        if any(c.isupper() for c in key):
            key = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", key)
            key = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", key)
        # "My-Effect" のような合成で生じる連続 "_" は 1 つに畳む
        return re.sub(r"_+", "_", key.lower())

    def add(self, fn: Callable[..., Any], name: str | None = None) -> Callable[..., Any]:
        if not inspect.isfunction(fn):
            raise TypeError(f"@{self.kind} は関数のみ登録可能です: got {fn!r}")
        key = self.normalize_key(name or fn.__name__)
        current = self._entries.get(key)
        if current is not None and current is not fn:
            raise ValueError(f"{self.kind} '{key}' は既に登録されています")
        self._entries[key] = fn
        return fn

    def decorator(self, arg: Any = None, name: str | None = None):
        """`@x` / `@x()` / `@x("name")` / `@x(name="name")` の 4 形を受ける。"""
        if inspect.isfunction(arg) and name is None:
            return self.add(arg)
        if isinstance(arg, str):
            name = arg
        elif arg is not None:
            raise TypeError(f"@{self.kind} は関数のみ登録可能です: got {arg!r}")
        return lambda fn: self.add(fn, name)

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._entries[self.normalize_key(name)]
        except KeyError:
            raise KeyError(f"{self.kind} '{name}' は登録されていません") from None

    def names(self) -> list[str]:
        """登録名（ソート済み）。"""
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return self.normalize_key(name) in self._entries  # type: ignore[arg-type]

    def unregister(self, name: str) -> None:
        """登録解除（名前が存在しない場合は無視）。"""
        self._entries.pop(self.normalize_key(name), None)

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> dict[str, Callable[..., Any]]:
        """登録辞書のコピー"""
        return dict(self._entries)
