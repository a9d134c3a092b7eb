from __future__ import annotations

import math

import pytest

from effects.outline import outline
from engine.core.region import Region


def test_outline_band_area_and_disjointness() -> None:
    sq = Region.rect(10.0, 10.0)
    band = outline(sq, line_width=1.0)
    assert band.area == pytest.approx(40.0 + math.pi, rel=1e-3)
    assert band.n_holes == 1
    # 帯は元形状と重ならない
    assert (band & sq).area == pytest.approx(0.0, abs=1e-6)


def test_outline_zero_width_is_empty() -> None:
    assert outline(Region.rect(10.0, 10.0), line_width=0.0).is_empty


def test_outline_negative_width_raises() -> None:
    with pytest.raises(ValueError):
        outline(Region.rect(10.0, 10.0), line_width=-0.5)
