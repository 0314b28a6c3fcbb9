"""Room name / coordinate conversion.

Room names follow ``(W|E)<lon>(N|S)<lat>``. Coordinates place east and north
in non-negative space and shift west and south by one so that the mapping is
a bijection: ``E0 -> 0``, ``W0 -> -1``, ``W1 -> -2`` (same for N/S on y).
Numbers are written without leading zeros; ``W05N5`` is not a room name.
"""

import re
from typing import Iterable, Tuple

from intel_map.types import Coords, RoomName

ROOM_NAME_RE = re.compile(r"^([WE])(0|[1-9]\d*)([NS])(0|[1-9]\d*)$")


class RoomNameError(ValueError):
    """Raised when a string is not a valid room name."""


def room_name_to_coords(room_name: RoomName) -> Coords:
    """Convert a room name into coordinates, e.g. ``W2N2 -> (-3, 2)``."""
    match = ROOM_NAME_RE.match(room_name)
    if match is None:
        raise RoomNameError(f"Invalid room name: {room_name!r}")
    we, lon, ns, lat = match.groups()
    x = -int(lon) - 1 if we == "W" else int(lon)
    y = -int(lat) - 1 if ns == "S" else int(lat)
    return x, y


def coords_to_room_name(coords: Coords) -> RoomName:
    """Inverse of :func:`room_name_to_coords`."""
    x, y = coords
    horizontal = f"W{-x - 1}" if x < 0 else f"E{x}"
    vertical = f"S{-y - 1}" if y < 0 else f"N{y}"
    return horizontal + vertical


def coords_bounds(coords: Iterable[Coords]) -> Tuple[int, int, int, int]:
    """Return ``(min_x, max_x, min_y, max_y)`` of a non-empty set of coordinates."""
    items = list(coords)
    if len(items) == 0:
        raise ValueError("Cannot compute bounds of no coordinates")
    xs = [x for x, _ in items]
    ys = [y for _, y in items]
    return min(xs), max(xs), min(ys), max(ys)


def clamp_window(
    data_min: int, data_max: int, center: int, max_range: int
) -> Tuple[int, int]:
    """Intersect a data extent with ``center +/- max_range`` along one axis.

    If the two ranges do not overlap the window collapses to ``center``.
    """
    low = max(data_min, center - max_range)
    high = min(data_max, center + max_range)
    if low > high:
        return center, center
    return low, high
