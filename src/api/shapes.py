"""
どこで: `api.shapes`（形状生成の高レベル API）。
何を: 登録済み shape 関数を名前で解決して直接呼ぶ薄いファサード `G`。
なぜ: 生成（shape）と加工（effects）を分離しつつ、`G.rounded_square(...)` の形で統一的に呼ぶため。

Notes
-----
- 戻り値は各シェイプ関数の戻り値そのまま（`Region` または `tuple[Solid, ...]`）。
- 動的ディスパッチ: インスタンス `__getattr__` で遅延解決し、解決済みメソッドを属性に保持する。
- 例外方針: 未登録名は `AttributeError`。生成器側の失敗は各シェイプが責任。

Examples
--------
    from api import G

    body = G.rounded_square(size=(200, 100), r=8)
    holes = G.control_cluster(cutout=True, max_buttons=6)
"""

from __future__ import annotations

from typing import Any, Callable

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.region import Region
from shapes.registry import get_shape as get_shape_generator
from shapes.registry import is_shape_registered
from shapes.registry import list_shapes as list_registered_shapes


class ShapesAPI:
    """形状 API（`G` の実体）。

    使い方:
        from api import G
        sq = G.square(size=(10, 20))
        hexagon = G.ngon(n_sides=6, diameter=40)
    """

    def _build_shape_method(self, name: str) -> Callable[..., Any]:
        """レジストリ名から `G.<name>(*args, **params)` を構築する。

        登録が外れた後に呼ばれた場合は `AttributeError` を送出する。
        """

        def _shape_method(*args: Any, **params: Any) -> Any:
            if not is_shape_registered(name):
                # 登録解除と整合を取るため、キャッシュ済みの属性を破棄
                self.__dict__.pop(name, None)
                raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
            return get_shape_generator(name)(*args, **params)

        _shape_method.__name__ = name
        _shape_method.__qualname__ = f"{self.__class__.__name__}.{name}"
        return _shape_method

    @staticmethod
    def empty() -> Region:
        """空の `Region` を返す。"""
        return Region.empty()

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        method = self._build_shape_method(name)
        self.__dict__[name] = method
        return method

    @classmethod
    def list_shapes(cls) -> list[str]:
        """利用可能な形状名の一覧を返す。"""
        return list_registered_shapes()

    # 補完体験向上: dir(G) で登録シェイプ名を出す
    def __dir__(self) -> list[str]:
        return sorted(set(object.__dir__(self)).union(list_registered_shapes()))


# シングルトンインスタンス（`from api import G` で公開）
G = ShapesAPI()

__all__ = ["G", "ShapesAPI"]
