"""
どこで: `util.color`。
何を: 色指定（Hex / RGB(A) タプル）を RGBA(0–1) へ正規化し、SVG の fill へ変換する。
なぜ: 素材色・ボタン色・SVG 出力で同じ受理仕様とエラーメッセージを使うため。

名前付き色（"red" など）の解決は `common.materials.color_of` が担う。
"""

from __future__ import annotations

from typing import Sequence

RGBA = tuple[float, float, float, float]


def parse_hex_color_str(s: str) -> RGBA:
    """`#RRGGBB[AA]` / `0xRRGGBB[AA]` / `RRGGBB[AA]` を RGBA(0–1) にする。"""
    digits = s.strip()
    for prefix in ("#", "0x", "0X"):
        if digits.startswith(prefix):
            digits = digits[len(prefix) :]
            break
    if len(digits) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    if len(digits) == 6:
        digits += "ff"
    try:
        channels = bytes.fromhex(digits)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def _from_sequence(seq: Sequence[object]) -> RGBA:
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        vals = [float(x) for x in seq]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {seq!r}") from e
    # 全要素が 0–1 なら正規化済み、そうでなければ 0–255 とみなす
    unit = all(0.0 <= v <= 1.0 for v in vals)
    if len(vals) == 3:
        vals.append(1.0 if unit else 255.0)
    if not unit:
        vals = [max(0, min(255, round(v))) / 255.0 for v in vals]
    r, g, b, a = vals
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """Hex 文字列か (r, g, b[, a]) を RGBA(0–1) にする。それ以外は ValueError。"""
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise ValueError(f"unsupported color type: {type(value)!r}")


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    r, g, b, a = (round(c * 255) for c in normalize_color(value))
    return (r, g, b, a)


def to_svg_fill(value: object) -> tuple[str, float]:
    """SVG 用に `("#rrggbb", opacity)` を返す。"""
    r, g, b, a = to_u8_rgba(value)
    return (f"#{r:02x}{g:02x}{b:02x}", round(a / 255.0, 3))


__all__ = ["parse_hex_color_str", "normalize_color", "to_u8_rgba", "to_svg_fill"]
