from typing import Any, List, Optional

from intel_map.options import RenderOptions
from intel_map.renderer.intel import render_intel_map
from intel_map.renderer.recording import DrawCall, DrawKind, RecordingVisual
from intel_map.room_info import IntelMap
from intel_map.types import ExitsFn, RoomName


def render_calls(
    target_room: RoomName,
    rooms_info: IntelMap,
    options: Optional[RenderOptions] = None,
    now: int = 0,
    my_username: Optional[str] = None,
    exits_fn: Optional[ExitsFn] = None,
) -> RecordingVisual:
    visual = RecordingVisual()
    render_intel_map(
        target_room,
        rooms_info,
        visual,
        options,
        now=now,
        my_username=my_username,
        exits_fn=exits_fn,
    )
    return visual


def room_tiles(visual: RecordingVisual) -> List[DrawCall]:
    """Filled rects drawn for rooms (the map background is the first rect)."""
    rects = [call for call in visual.of_kind(DrawKind.RECT) if call.style.fill is not None]
    return rects[1:]


def outline_rects(visual: RecordingVisual) -> List[DrawCall]:
    return [call for call in visual.of_kind(DrawKind.RECT) if call.style.fill is None]


def tile_fills(visual: RecordingVisual) -> List[Any]:
    return [call.style.fill for call in room_tiles(visual)]
