"""Render options.

``RenderOptions`` is a frozen value object; derive variants with
``dataclasses.replace``. The two hooks are the only extension points:

* ``render_behind`` runs right after a room's background tile and before any
  of its foreground (resources, labels).
* ``render_in_front`` runs after everything else drawn for that room,
  including its exit borders.

Both receive ``(room_name, visual, x, y, size)`` where ``(x, y)`` is the room's
center on the map and ``size`` its inner edge length.
"""

from dataclasses import dataclass

from intel_map.types import RenderRoomFn, RoomName

CREEP_LIFE_TIME = 1500

DEFAULT_LAST_VISIT_THRESHOLD = 2 * CREEP_LIFE_TIME
DEFAULT_ROOM_SIZE = 3.0
DEFAULT_OPACITY = 0.4
DEFAULT_MAX_RANGE = 7


def noop_render_fn(
    room_name: RoomName, visual: object, x: float, y: float, size: float
) -> None:
    return None


@dataclass(frozen=True)
class RenderOptions:
    """Options for rendering the intel map.

    Attributes:
        last_visit_threshold: Ticks after which a room's intel is fully stale
            (its tile reaches the darkest shade).
        room_size: Edge length of each room tile in surface units.
        opacity: Alpha of the background fills.
        max_range: Max number of rooms drawn on each side of the target room.
        display_exits: Whether to draw borders where exits are blocked.
        render_behind: Hook called between a room's background and foreground.
        render_in_front: Hook called after all of a room's drawing.
    """

    last_visit_threshold: int = DEFAULT_LAST_VISIT_THRESHOLD
    room_size: float = DEFAULT_ROOM_SIZE
    opacity: float = DEFAULT_OPACITY
    max_range: int = DEFAULT_MAX_RANGE
    display_exits: bool = True
    render_behind: RenderRoomFn = noop_render_fn
    render_in_front: RenderRoomFn = noop_render_fn

    def __post_init__(self) -> None:
        if self.last_visit_threshold <= 0:
            raise ValueError("last_visit_threshold must be positive")
        if self.room_size <= 0:
            raise ValueError("room_size must be positive")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError("opacity must be within [0, 1]")
        if self.max_range < 0:
            raise ValueError("max_range must not be negative")

    @property
    def border_width(self) -> float:
        """Width of the gap (and exit borders) between neighboring rooms."""
        return 0.07 * self.room_size

    @property
    def inner_size(self) -> float:
        """Edge length of a room's tile once the border is taken out."""
        return self.room_size - self.border_width
