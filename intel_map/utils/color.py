"""Color helpers.

``hsv_to_hex`` produces the tile colors of the intel map; ``hex_to_rgba``
turns those strings back into channel tuples for rasterizing surfaces.
"""

import math
from typing import Dict, Tuple
from pyrsistent import pmap
from pyrsistent.typing import PMap

from intel_map.types import ResourceType

UNKNOWN_RESOURCE = "?"

RESOURCE_COLORS: PMap[str, str] = pmap(
    {
        ResourceType.ENERGY: "#FFE56D",
        ResourceType.HYDROGEN: "#4C4C4C",
        ResourceType.OXYGEN: "#4C4C4C",
        ResourceType.UTRIUM: "#006181",
        ResourceType.KEANIUM: "#371383",
        ResourceType.LEMERGIUM: "#236144",
        ResourceType.ZYNTHIUM: "#5D4C2E",
        ResourceType.CATALYST: "#592121",
        UNKNOWN_RESOURCE: "#000000",
    }
)

NAMED_COLORS: Dict[str, str] = {
    "black": "#000000",
    "white": "#FFFFFF",
    "gray": "#808080",
}


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Convert HSV to a ``#RRGGBB`` string.

    Arguments:
        h: Hue in degrees, ``[0, 360)``.
        s: Saturation, ``[0, 1]``.
        v: Value, ``[0, 1]``.
    """
    h = (h % 360) / 60.0
    i = math.floor(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    r, g, b = [(v, t, p), (q, v, p), (p, v, t), (p, q, v), (t, p, v), (v, p, q)][i % 6]
    return "#" + "".join(f"{to_channel(c):02X}" for c in (r, g, b))


def to_channel(c: float) -> int:
    """Scale a [0, 1] component to 0..255, rounding halves up."""
    return math.floor(c * 255 + 0.5)


def hex_to_rgba(color: str, opacity: float = 1.0) -> Tuple[int, int, int, int]:
    """Parse ``#RGB``/``#RRGGBB`` (or a few named colors) into an RGBA tuple."""
    color = NAMED_COLORS.get(color.lower(), color)
    digits = color[1:] if color.startswith("#") else ""
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid color: {color!r}")
    try:
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid color: {color!r}") from None
    alpha = to_channel(max(0.0, min(1.0, opacity)))
    return r, g, b, alpha
