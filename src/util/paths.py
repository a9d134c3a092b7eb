"""
どこで: `util.paths`。
何を: SVG/G-code の出力先ディレクトリの解決と作成。
なぜ: 環境変数 `APN_OUTPUT_DIR` による上書きと、既定（`<repo>/data/output`）を一箇所で扱うため。
"""

from __future__ import annotations

from pathlib import Path

from common.settings import get as _get_settings

from .utils import _find_project_root


def ensure_output_dir(subdir: str | None = None) -> Path:
    """出力先を作成して返す。

    - 設定 `OUTPUT_DIR` があればそこを、無ければプロジェクトルート直下の `data/output/` を使う。
    - `subdir` を与えるとその下に作る。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    configured = _get_settings().OUTPUT_DIR
    if configured:
        out = Path(configured).expanduser()
    else:
        out = _find_project_root(Path(__file__).parent) / "data" / "output"
    if subdir:
        out = out / subdir
    out.mkdir(parents=True, exist_ok=True)
    return out
