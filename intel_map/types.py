"""Common type aliases and enumerations.

``RenderRoomFn`` and ``ExitsFn`` are the extension points of the renderer:
the former lets callers layer their own graphics around each room, the latter
answers the host's "which exits does this room have" query.
"""

from enum import StrEnum, auto
from typing import Any, Callable, Mapping, Optional, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from intel_map.visual import RoomVisual

RoomName = str
Tick = int
Coords = Tuple[int, int]

RenderRoomFn = Callable[[RoomName, "RoomVisual", float, float, float], None]


class Direction(StrEnum):
    """Cardinal exit directions as seen on the rendered map."""

    TOP = auto()
    RIGHT = auto()
    BOTTOM = auto()
    LEFT = auto()


ExitsFn = Callable[[RoomName], Optional[Mapping[Direction, Any]]]


class StrokePattern(StrEnum):
    """Outline pattern for lines and rectangle strokes."""

    SOLID = auto()
    DASHED = auto()
    DOTTED = auto()


class ResourceType(StrEnum):
    """Resources a room can hold. Values match the host's resource ids."""

    ENERGY = "energy"
    HYDROGEN = "H"
    OXYGEN = "O"
    UTRIUM = "U"
    KEANIUM = "K"
    LEMERGIUM = "L"
    ZYNTHIUM = "Z"
    CATALYST = "X"
