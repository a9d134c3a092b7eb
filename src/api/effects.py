"""
どこで: `api.effects`（エフェクト・パイプラインの高レベル API）。
何を: 登録エフェクト（Region→Region）の直列適用を宣言し、`pipe(region)` で一括適用する。
なぜ: `E.offset(distance=2).outline(line_width=1)` のようにチェーンで加工手順を組み立てるため。

提供コンポーネント:
- `Pipeline`: 宣言（ステップ列）を保持し、`__call__(region)` で順に適用する不変オブジェクト。
- `PipelineBuilder`: チェーン可能な薄いビルダー（`.build()` で `Pipeline` を返す）。
  ステップ追加時に引数をエフェクト関数のシグネチャへ束縛し、未知の引数は TypeError。
- `E`: 利用者向けシングルトン（`from api import E`）。`E.pipeline` が `PipelineBuilder` を返す。
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable

# レジストリ登録の副作用
import effects  # noqa: F401
from effects.registry import get_effect, is_effect_registered
from engine.core.region import Region

Step = tuple[str, tuple[tuple[str, object], ...]]


@dataclass(frozen=True)
class Pipeline:
    steps: tuple[Step, ...] = ()

    def __call__(self, g: Region) -> Region:
        out = g
        for name, params in self.steps:
            out = get_effect(name)(out, **dict(params))
        return out

    def __len__(self) -> int:
        return len(self.steps)


class PipelineBuilder:
    def __init__(self) -> None:
        self._steps: list[Step] = []

    def __getattr__(self, name: str) -> Callable[..., "PipelineBuilder"]:
        if name.startswith("_") or not is_effect_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        def _adder(**params: Any) -> "PipelineBuilder":
            # 明示 bypass=True のステップは積まない
            if bool(params.pop("bypass", False)):
                return self
            try:
                inspect.signature(get_effect(name)).bind(None, **params)
            except TypeError as e:
                raise TypeError(f"effect '{name}' の引数が不正です: {e}") from None
            self._steps.append((name, tuple(sorted(params.items()))))
            return self

        _adder.__name__ = name
        return _adder

    # 互換: すぐに適用できるよう callable を返す
    def __call__(self, g: Region) -> Region:
        return self.build()(g)

    def build(self) -> Pipeline:
        return Pipeline(tuple(self._steps))


class _EffectsAPI:
    @property
    def pipeline(self) -> PipelineBuilder:
        return PipelineBuilder()

    def __getattr__(self, name: str) -> Callable[..., PipelineBuilder]:
        if name.startswith("_") or not is_effect_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        def _starter(**params: Any) -> PipelineBuilder:
            return getattr(PipelineBuilder(), name)(**params)

        _starter.__name__ = name
        return _starter


E = _EffectsAPI()

__all__ = ["E", "Pipeline", "PipelineBuilder"]
