"""Topology collaborators.

The renderer asks an :data:`~intel_map.types.ExitsFn` which exits a room has.
Hosts with a live map service pass their own function; the helpers here cover
static data and the "nothing known" case.
"""

from typing import Any, Mapping, Optional
from pyrsistent import pmap

from intel_map.types import Direction, ExitsFn, RoomName


def unknown_exits_fn(room_name: RoomName) -> Optional[Mapping[Direction, Any]]:
    """Topology that knows no room; no exit border is ever drawn."""
    return None


def static_exits_fn(
    exits: Mapping[RoomName, Mapping[Direction, Any]],
) -> ExitsFn:
    """Build an exits function from a fixed ``room -> {direction: exit}`` mapping.

    Rooms missing from ``exits`` are unknown. Direction keys may be given as
    :class:`Direction` members or their string values.
    """
    table = pmap(
        {
            room: pmap({Direction(d): target for d, target in room_exits.items()})
            for room, room_exits in exits.items()
        }
    )

    def exits_fn(room_name: RoomName) -> Optional[Mapping[Direction, Any]]:
        return table.get(room_name)

    return exits_fn
