# tests/unit/test_coords.py

import pytest
from typing import Tuple

from intel_map.utils.coords import (
    RoomNameError,
    clamp_window,
    coords_bounds,
    coords_to_room_name,
    room_name_to_coords,
)


@pytest.mark.parametrize(
    "room_name, expected",
    [
        ("E0N0", (0, 0)),
        ("W0N0", (-1, 0)),
        ("E0S0", (0, -1)),
        ("W0S0", (-1, -1)),
        ("W2N2", (-3, 2)),
        ("W5N5", (-6, 5)),
        ("E12S7", (12, -8)),
        ("W60S60", (-61, -61)),
    ],
)
def test_room_name_to_coords(room_name: str, expected: Tuple[int, int]) -> None:
    assert room_name_to_coords(room_name) == expected
    assert coords_to_room_name(expected) == room_name


@pytest.mark.parametrize(
    "room_name", ["E0N0", "W0S0", "W1N9", "E10S3", "W59N0", "E3N123"]
)
def test_round_trip(room_name: str) -> None:
    assert coords_to_room_name(room_name_to_coords(room_name)) == room_name


def test_coordinates_are_monotonic() -> None:
    east = [room_name_to_coords(f"E{i}N0")[0] for i in range(4)]
    west = [room_name_to_coords(f"W{i}N0")[0] for i in range(4)]
    north = [room_name_to_coords(f"E0N{i}")[1] for i in range(4)]
    south = [room_name_to_coords(f"E0S{i}")[1] for i in range(4)]
    assert east == sorted(east) and len(set(east)) == 4
    assert west == sorted(west, reverse=True) and len(set(west)) == 4
    assert north == sorted(north)
    assert south == sorted(south, reverse=True)
    # Neighbors across the meridian / equator are one step apart
    assert room_name_to_coords("E0N0")[0] - room_name_to_coords("W0N0")[0] == 1
    assert room_name_to_coords("E0N0")[1] - room_name_to_coords("E0S0")[1] == 1


@pytest.mark.parametrize(
    "room_name",
    ["", "sim", "N1W1", "w1n1", "W1N", "W-1N1", "W1N1 ", "X1N1", "W05N5", "E5N00"],
)
def test_invalid_room_names(room_name: str) -> None:
    with pytest.raises(RoomNameError):
        room_name_to_coords(room_name)


def test_room_name_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        room_name_to_coords("nowhere")


def test_coords_bounds() -> None:
    assert coords_bounds([(0, 0)]) == (0, 0, 0, 0)
    assert coords_bounds([(-3, 2), (4, -1), (0, 5)]) == (-3, 4, -1, 5)
    with pytest.raises(ValueError):
        coords_bounds([])


@pytest.mark.parametrize(
    "data_min, data_max, center, max_range, expected",
    [
        (0, 0, 0, 7, (0, 0)),
        (-20, 20, 0, 7, (-7, 7)),
        (-2, 20, 0, 7, (-2, 7)),
        (-20, 3, 0, 7, (-7, 3)),
        (0, 0, 0, 0, (0, 0)),
        # No overlap with the window collapses onto the center
        (20, 30, 0, 7, (0, 0)),
    ],
)
def test_clamp_window(
    data_min: int,
    data_max: int,
    center: int,
    max_range: int,
    expected: Tuple[int, int],
) -> None:
    assert clamp_window(data_min, data_max, center, max_range) == expected
