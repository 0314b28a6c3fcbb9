# tests/unit/test_options.py

import pytest
from dataclasses import replace
from typing import Any, Dict

from intel_map.options import CREEP_LIFE_TIME, RenderOptions


def test_defaults() -> None:
    options = RenderOptions()
    assert options.last_visit_threshold == 2 * CREEP_LIFE_TIME
    assert options.room_size == 3
    assert options.opacity == 0.4
    assert options.max_range == 7
    assert options.display_exits is True
    # Hooks default to no-ops
    assert options.render_behind("W1N1", object(), 0.0, 0.0, 1.0) is None
    assert options.render_in_front("W1N1", object(), 0.0, 0.0, 1.0) is None


def test_derived_sizes() -> None:
    options = RenderOptions(room_size=10)
    assert options.border_width == pytest.approx(0.7)
    assert options.inner_size == pytest.approx(9.3)


@pytest.mark.parametrize(
    "overrides",
    [
        {"room_size": 0},
        {"room_size": -1},
        {"last_visit_threshold": 0},
        {"opacity": -0.1},
        {"opacity": 1.5},
        {"max_range": -1},
    ],
)
def test_invalid_options(overrides: Dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        RenderOptions(**overrides)


def test_replace_revalidates() -> None:
    with pytest.raises(ValueError):
        replace(RenderOptions(), opacity=2.0)
    assert replace(RenderOptions(), max_range=0).max_range == 0
