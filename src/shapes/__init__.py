"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン形状を import 副作用で登録し、`api.G` から解決できるようにする。
なぜ: 生成ステージの拡張点を一箇所に集約するため。
"""

from . import controls as _register_controls  # noqa: F401
from . import corner as _register_corner  # noqa: F401
from . import jigsaw as _register_jigsaw  # noqa: F401
from . import primitives as _register_primitives  # noqa: F401
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
