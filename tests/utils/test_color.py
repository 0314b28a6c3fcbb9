# tests/utils/test_color.py

import pytest
from typing import Tuple

from intel_map.types import ResourceType
from intel_map.utils.color import RESOURCE_COLORS, hex_to_rgba, hsv_to_hex, to_channel


@pytest.mark.parametrize(
    "h, s, v, expected",
    [
        (0, 1, 1, "#FF0000"),
        (60, 1, 1, "#FFFF00"),
        (120, 1, 1, "#00FF00"),
        (180, 1, 1, "#00FFFF"),
        (240, 1, 1, "#0000FF"),
        (300, 1, 1, "#FF00FF"),
        (0, 0, 0, "#000000"),
        (0, 0, 1, "#FFFFFF"),
        (240, 1, 0.15, "#000026"),
        (0, 1, 0.5, "#800000"),
        # Halves round up
        (240, 1, 0.3, "#00004D"),
        (240, 1, 0.7, "#0000B3"),
        (120, 1, 0.3, "#004D00"),
        (60, 1, 0.3, "#4D4D00"),
        (0, 1, 0.7, "#B30000"),
    ],
)
def test_hsv_to_hex(h: float, s: float, v: float, expected: str) -> None:
    assert hsv_to_hex(h, s, v) == expected


@pytest.mark.parametrize("h", [0, 45, 120, 200, 359])
def test_zero_saturation_is_gray(h: float) -> None:
    assert hsv_to_hex(h, 0, 0.2) == "#333333"


def test_full_turn_wraps() -> None:
    assert hsv_to_hex(360, 1, 1) == hsv_to_hex(0, 1, 1)


@pytest.mark.parametrize(
    "color, opacity, expected",
    [
        ("#FFF", 1.0, (255, 255, 255, 255)),
        ("#000000", 1.0, (0, 0, 0, 255)),
        ("#00FF00", 0.4, (0, 255, 0, 102)),
        ("#ffe56d", 0.0, (255, 229, 109, 0)),
        ("gray", 1.0, (128, 128, 128, 255)),
        ("Black", 2.0, (0, 0, 0, 255)),
    ],
)
def test_hex_to_rgba(
    color: str, opacity: float, expected: Tuple[int, int, int, int]
) -> None:
    assert hex_to_rgba(color, opacity) == expected


@pytest.mark.parametrize("color", ["", "FFFFFF", "#12", "#GGGGGG", "#1234567", "teal"])
def test_hex_to_rgba_invalid(color: str) -> None:
    with pytest.raises(ValueError):
        hex_to_rgba(color)


def test_resource_palette_covers_all_resources() -> None:
    for resource in ResourceType:
        assert resource in RESOURCE_COLORS
        hex_to_rgba(RESOURCE_COLORS[resource])
    assert RESOURCE_COLORS["?"] == "#000000"


@pytest.mark.parametrize(
    "c, expected", [(0.0, 0), (1.0, 255), (0.3, 77), (0.7, 179), (0.5, 128), (0.15, 38)]
)
def test_to_channel_rounds_half_up(c: float, expected: int) -> None:
    assert to_channel(c) == expected
