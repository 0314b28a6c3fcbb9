"""Room intel record.

``RoomInfo`` holds what a scout or observer last saw in a room. Every field is
optional and interpreted independently by the renderer; a field left as
``None`` simply skips the corresponding visual element.

A room with no record at all is represented by ``None`` in an
:data:`IntelMap` (or by the key being missing). That is the *absent* variant
and renders as "no info"; a ``RoomInfo()`` with every field unset is still a
*present* record and renders from its (empty) fields.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional
from pyrsistent import pmap
from pyrsistent.typing import PMap

from intel_map.types import RoomName, Tick


@dataclass(frozen=True)
class RoomInfo:
    """Intel about one room.

    Attributes:
        last_visit: Tick at which this record was last refreshed.
        sources: Number of energy sources.
        mineral: Mineral resource id found in the room.
        keeper_lairs: Whether the room has source keeper lairs.
        rcl: Room control level when last seen.
        reserved: Whether the controller is reserved.
        username: Owner, reserver or inhabitant of the room.
        safe_mode: Remaining safe mode ticks at ``last_visit``.
        safe_mode_cooldown: Remaining safe mode cooldown ticks at ``last_visit``.
        inhabited: Whether another player inhabits the room.
        defended: Whether the inhabited room also has defenses.
    """

    last_visit: Optional[Tick] = None
    sources: Optional[int] = None
    mineral: Optional[str] = None
    keeper_lairs: Optional[bool] = None
    rcl: Optional[int] = None
    reserved: Optional[bool] = None
    username: Optional[str] = None
    safe_mode: Optional[int] = None
    safe_mode_cooldown: Optional[int] = None
    inhabited: Optional[bool] = None
    defended: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RoomInfo":
        """Build a record from a raw mapping.

        Both the host's camelCase keys (``lastVisit``, ``keeperLairs``, ...)
        and snake_case field names are accepted. Unknown keys are ignored.
        """
        names = {field.name for field in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = CAMEL_TO_FIELD.get(key, key)
            if name in names:
                kwargs[name] = value
        return cls(**kwargs)


CAMEL_TO_FIELD: Dict[str, str] = {
    "lastVisit": "last_visit",
    "keeperLairs": "keeper_lairs",
    "safeMode": "safe_mode",
    "safeModeCooldown": "safe_mode_cooldown",
}

IntelMap = Mapping[RoomName, Optional[RoomInfo]]


def intel_from_dict(
    raw: Mapping[RoomName, Optional[Mapping[str, Any]]],
) -> PMap[RoomName, Optional[RoomInfo]]:
    """Convert raw per-room dictionaries into an immutable :data:`IntelMap`.

    ``None`` values are kept as ``None`` (absent intel).
    """
    return pmap(
        {
            room: RoomInfo.from_dict(data) if data is not None else None
            for room, data in raw.items()
        }
    )


def as_room_info(value: Any) -> Optional[RoomInfo]:
    """Normalize an intel map value: records pass through, raw mappings are
    converted, anything else is treated as absent."""
    if isinstance(value, RoomInfo):
        return value
    if isinstance(value, Mapping):
        return RoomInfo.from_dict(value)
    return None
