"""Intel map renderer.

Draws one tile per room in a window around the target room. Each tile is
colored by who holds the room and darkened as its intel ages; resources,
control level, keeper lairs, safe mode and the owner's name are drawn on top.
Borders mark edges where the neighboring room cannot be reached.

Layout: row 0 is the top on-screen row and holds the northernmost rooms
(largest y); columns run west to east. The map's top-left corner sits at
``(-0.5, -0.5)`` so that it lines up with tile ``(0, 0)`` of the host room.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Mapping, Optional

from intel_map.options import RenderOptions
from intel_map.room_info import IntelMap, RoomInfo, as_room_info
from intel_map.topology import unknown_exits_fn
from intel_map.types import (
    Direction,
    ExitsFn,
    ResourceType,
    RoomName,
    StrokePattern,
    Tick,
)
from intel_map.utils.color import RESOURCE_COLORS, UNKNOWN_RESOURCE, hsv_to_hex
from intel_map.utils.coords import (
    clamp_window,
    coords_bounds,
    coords_to_room_name,
    room_name_to_coords,
)
from intel_map.utils.intel import (
    MIN_BRIGHTNESS,
    get_intel_freshness,
    is_timer_active,
)
from intel_map.visual import CircleStyle, LineStyle, RectStyle, RoomVisual, TextStyle

logger = logging.getLogger(__name__)

MAP_ORIGIN = (-0.5, -0.5)
MAP_BACKGROUND_COLOR = "#808080"
NO_INFO_COLOR = "#181818"
LIGHT_TEXT_COLOR = "#FFFFFF"
DARK_TEXT_COLOR = "#000000"
KEEPER_LAIR_COLOR = "#780207"

OWN_HUE = 120
DEFENDED_HUE = 0
INHABITED_HUE = 60
NEUTRAL_HUE = 240


@dataclass(frozen=True)
class MapWindow:
    """Rooms covered by the rendered map, in world coordinates (inclusive)."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def rows(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def cols(self) -> int:
        return self.max_x - self.min_x + 1

    def room_at(self, row: int, col: int) -> RoomName:
        """Room drawn at a grid cell; row 0 is the northernmost row."""
        return coords_to_room_name((self.min_x + col, self.max_y - row))


def compute_window(
    target_room: RoomName, room_names: List[RoomName], max_range: int
) -> MapWindow:
    """Intersect the extent of ``room_names`` with ``max_range`` around the target.

    With no rooms at all the window is the target room alone.
    """
    center_x, center_y = room_name_to_coords(target_room)
    coords = [room_name_to_coords(name) for name in room_names]
    if len(coords) == 0:
        coords = [(center_x, center_y)]
    data_min_x, data_max_x, data_min_y, data_max_y = coords_bounds(coords)
    min_x, max_x = clamp_window(data_min_x, data_max_x, center_x, max_range)
    min_y, max_y = clamp_window(data_min_y, data_max_y, center_y, max_range)
    return MapWindow(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def room_brightness(info: Optional[RoomInfo], last_visit_threshold: int, now: Tick) -> float:
    freshness = 1.0
    last_visit = info.last_visit if info is not None else None
    if isinstance(last_visit, (int, float)) and not isinstance(last_visit, bool):
        freshness = get_intel_freshness(last_visit, last_visit_threshold, now)
    return max(freshness, MIN_BRIGHTNESS)


def room_color(
    info: Optional[RoomInfo], brightness: float, my_username: Optional[str]
) -> str:
    """Tile color of a room, first matching rule wins."""
    if info is None:
        return NO_INFO_COLOR
    if my_username is not None and info.username == my_username:
        return hsv_to_hex(OWN_HUE, 1, brightness)
    if info.defended:
        return hsv_to_hex(DEFENDED_HUE, 1, brightness)
    if info.inhabited:
        return hsv_to_hex(INHABITED_HUE, 1, brightness)
    return hsv_to_hex(NEUTRAL_HUE, 1, brightness)


def text_color(info: Optional[RoomInfo], brightness: float) -> str:
    if info is None or brightness < 0.5:
        return LIGHT_TEXT_COLOR
    return DARK_TEXT_COLOR


def draw_room(
    info: Optional[RoomInfo],
    visual: RoomVisual,
    x: float,
    y: float,
    size: float,
    *,
    opacity: float,
    last_visit_threshold: int,
    now: Tick,
    my_username: Optional[str] = None,
    render_behind: Callable[[], None] = lambda: None,
) -> None:
    """Draw one room of the intel map.

    Arguments:
        info: The room's intel, or ``None`` when nothing is known.
        visual: Surface to draw on.
        x: Center of the room on the map.
        y: Center of the room on the map.
        size: Inner edge length of the room's tile.
        opacity: Opacity of the tile background.
        last_visit_threshold: Ticks after which intel is considered stale.
        now: Current tick.
        my_username: Name of the local player, used for ownership coloring.
        render_behind: Parameterless hook called right after the background.
    """
    brightness = room_brightness(info, last_visit_threshold, now)
    color = room_color(info, brightness, my_username)
    label_color = text_color(info, brightness)

    visual.rect(x - size / 2, y - size / 2, size, size, RectStyle(fill=color, opacity=opacity))

    render_behind()

    if info is None:
        visual.text("?", x, y + size / 3, TextStyle(color=label_color, font=size))
        return

    if info.sources or info.mineral:
        render_resources(info, visual, x, y, size)

    safe_mode_on = is_timer_active(info.last_visit, info.safe_mode, now)
    cooldown_on = is_timer_active(info.last_visit, info.safe_mode_cooldown, now)
    if safe_mode_on or cooldown_on:
        rect_size = 0.5 * size
        pattern = StrokePattern.SOLID if safe_mode_on else StrokePattern.DOTTED
        visual.rect(
            x - 0.5 * rect_size,
            y - 0.45 * rect_size,
            rect_size,
            rect_size,
            RectStyle(fill=None, stroke=label_color, line_style=pattern),
        )

    if info.reserved:
        visual.text("R", x, y + 0.25 * size, TextStyle(color=label_color, font=0.6 * size))
    elif _is_number(info.rcl):
        visual.text(
            format_rcl(info.rcl),
            x,
            y + 0.25 * size,
            TextStyle(color=label_color, font=0.6 * size),
        )
    elif info.keeper_lairs:
        radius = size / 6
        visual.circle(
            x,
            y,
            CircleStyle(
                radius=radius,
                fill="#000000",
                opacity=1.0,
                stroke=KEEPER_LAIR_COLOR,
                stroke_width=0.9 * radius,
            ),
        )

    if isinstance(info.username, str):
        visual.text(
            info.username[:6], x, y + 0.45 * size, TextStyle(color=label_color, font=size / 4)
        )


def draw_exits(
    room_name: RoomName,
    visual: RoomVisual,
    x: float,
    y: float,
    size: float,
    border_width: float,
    *,
    exits_fn: ExitsFn,
    is_first_row: bool,
    is_first_col: bool,
) -> None:
    """Draw dashed borders on the edges of a room that have no exit.

    Right and bottom edges are drawn for every room; left and top edges only
    on the first column and row so that shared edges are drawn once.
    """
    exits = exits_fn(room_name)
    if exits is None:
        return

    style = LineStyle(
        color="#000000", width=border_width, opacity=1.0, line_style=StrokePattern.DASHED
    )
    half = size / 2
    blocked = {d for d in Direction if not exits.get(d)}

    if Direction.RIGHT in blocked:
        visual.line(x + half, y - half, x + half, y + half, style)
    if Direction.BOTTOM in blocked:
        visual.line(x - half, y + half, x + half, y + half, style)
    if is_first_col and Direction.LEFT in blocked:
        visual.line(x - half, y - half, x - half, y + half, style)
    if is_first_row and Direction.TOP in blocked:
        visual.line(x - half, y - half, x + half, y - half, style)


def room_resources(info: RoomInfo) -> List[str]:
    """Resources to draw for a room: the mineral (if any) then one energy per source."""
    resources: List[str] = []
    if info.mineral:
        valid = info.mineral in RESOURCE_COLORS and info.mineral not in (
            ResourceType.ENERGY,
            UNKNOWN_RESOURCE,
        )
        resources.append(info.mineral if valid else UNKNOWN_RESOURCE)
    if info.sources:
        resources.extend([ResourceType.ENERGY.value] * int(info.sources))
    return resources


def render_resources(
    info: RoomInfo, visual: RoomVisual, x: float, y: float, size: float
) -> None:
    """Draw a row of resource icons above the room's center."""
    width = size / 4
    for i, resource in enumerate(room_resources(info)):
        center_x = x + (2 * i - 3) * width / 2
        center_y = y - 3 * width / 2
        visual.circle(
            center_x,
            center_y,
            CircleStyle(
                radius=0.45 * width,
                fill=RESOURCE_COLORS[resource],
                opacity=1.0,
                stroke="#000000",
                stroke_width=0.07 * width,
            ),
        )
        if resource != ResourceType.ENERGY:
            visual.text(
                resource,
                center_x,
                center_y + 0.25 * width,
                TextStyle(color="#FFFFFF", font=width * 0.75, opacity=0.7),
            )


def render_intel_map(
    target_room: RoomName,
    rooms_info: IntelMap,
    visual: RoomVisual,
    options: Optional[RenderOptions] = None,
    *,
    now: Tick = 0,
    my_username: Optional[str] = None,
    exits_fn: Optional[ExitsFn] = None,
) -> None:
    """Draw a map with all the intel provided.

    Arguments:
        target_room: Room whose surroundings are drawn; the window is centered
            on it.
        rooms_info: Intel per room name. Missing rooms (or ``None`` values) are
            drawn as unknown.
        visual: Surface to draw on.
        options: Render options, defaults to :class:`RenderOptions()`.
        now: Current tick, used to age intel and check safe mode timers.
        my_username: Local player's name; rooms they own are drawn green.
        exits_fn: Topology query for exit borders. Defaults to knowing no
            rooms, which draws no borders.
    """
    if not isinstance(rooms_info, Mapping):
        logger.error("rooms_info is missing or invalid: %r", type(rooms_info).__name__)
        return

    if options is None:
        options = RenderOptions()
    if exits_fn is None:
        exits_fn = unknown_exits_fn

    window = compute_window(target_room, list(rooms_info.keys()), options.max_range)
    logger.debug(
        "Rendering intel map for %s: %dx%d rooms from %s",
        target_room,
        window.cols,
        window.rows,
        window.room_at(0, 0),
    )

    room_size = options.room_size
    border_width = options.border_width
    inner_size = options.inner_size
    x0, y0 = MAP_ORIGIN

    visual.rect(
        x0,
        y0,
        window.cols * room_size,
        window.rows * room_size,
        RectStyle(fill=MAP_BACKGROUND_COLOR, opacity=options.opacity),
    )

    for row in range(window.rows):
        for col in range(window.cols):
            room_name = window.room_at(row, col)
            center_x = x0 + (col + 0.5) * room_size
            center_y = y0 + (row + 0.5) * room_size

            bound_render_behind = partial(
                options.render_behind, room_name, visual, center_x, center_y, inner_size
            )

            draw_room(
                as_room_info(rooms_info.get(room_name)),
                visual,
                center_x,
                center_y,
                inner_size,
                opacity=options.opacity,
                last_visit_threshold=options.last_visit_threshold,
                now=now,
                my_username=my_username,
                render_behind=bound_render_behind,
            )
            if options.display_exits:
                draw_exits(
                    room_name,
                    visual,
                    center_x,
                    center_y,
                    room_size,
                    border_width,
                    exits_fn=exits_fn,
                    is_first_row=row == 0,
                    is_first_col=col == 0,
                )
            options.render_in_front(room_name, visual, center_x, center_y, inner_size)


class IntelMapRenderer:
    """Renderer bound to fixed options and host collaborators."""

    options: RenderOptions
    my_username: Optional[str]
    exits_fn: ExitsFn

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        my_username: Optional[str] = None,
        exits_fn: Optional[ExitsFn] = None,
    ):
        self.options = options or RenderOptions()
        self.my_username = my_username
        self.exits_fn = exits_fn or unknown_exits_fn

    def render(
        self,
        target_room: RoomName,
        rooms_info: IntelMap,
        visual: RoomVisual,
        now: Tick = 0,
    ) -> None:
        render_intel_map(
            target_room,
            rooms_info,
            visual,
            self.options,
            now=now,
            my_username=self.my_username,
            exits_fn=self.exits_fn,
        )


def format_rcl(rcl: object) -> str:
    """Control level label; integral floats (e.g. from JSON) drop the decimal."""
    if isinstance(rcl, float) and rcl.is_integer():
        return str(int(rcl))
    return str(rcl)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
