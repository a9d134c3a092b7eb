from __future__ import annotations

import pytest

from common.materials import MDF, PLEX, color_of
from util.color import normalize_color, parse_hex_color_str, to_svg_fill, to_u8_rgba


def test_parse_hex_variants() -> None:
    assert parse_hex_color_str("#ff0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_hex_color_str("0x00ff0080")[3] == pytest.approx(128 / 255)
    with pytest.raises(ValueError):
        parse_hex_color_str("#fff")


def test_normalize_tuple_ranges() -> None:
    assert normalize_color((1.0, 0.5, 0.0)) == (1.0, 0.5, 0.0, 1.0)
    assert normalize_color((255, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        normalize_color((1.0, 2.0))
    with pytest.raises(ValueError):
        normalize_color(42)


def test_color_of_names_and_passthrough() -> None:
    assert color_of("White") == (1.0, 1.0, 1.0, 1.0)
    assert color_of("#0000ff") == (0.0, 0.0, 1.0, 1.0)
    assert color_of(PLEX.color) == pytest.approx(PLEX.color)
    with pytest.raises(ValueError):
        color_of("not-a-colour")


def test_svg_fill_keeps_alpha() -> None:
    fill, opacity = to_svg_fill(PLEX.color)
    assert fill.startswith("#") and len(fill) == 7
    assert opacity == pytest.approx(0.35, abs=1e-2)
    assert to_u8_rgba(MDF.color)[3] == 255
