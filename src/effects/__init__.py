"""
どこで: `effects` パッケージ（関数ベース）。
何を: Region→Region の純関数エフェクトを登録し、`api.E` から利用可能にする。
なぜ: 生成/加工/積層の責務分離に従い、加工ステージの拡張点を一箇所に集約するため。
"""

from . import jigsaw  # noqa: F401
from . import mirror  # noqa: F401
from . import offset  # noqa: F401
from . import outline  # noqa: F401
from . import round_corners  # noqa: F401
from .registry import effect, get_effect, list_effects

__all__ = [
    "effect",
    "get_effect",
    "list_effects",
]
