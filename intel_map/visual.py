"""Drawing surface contract.

The renderer never rasterizes anything itself; it calls four primitives on a
``RoomVisual`` in a shared 2D coordinate space (x to the right, y downward,
one unit per game tile). Styles are immutable value objects so that recorded
calls can be compared directly.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from intel_map.types import StrokePattern


@dataclass(frozen=True)
class RectStyle:
    """Style of a rectangle. ``fill=None`` draws the outline only."""

    fill: Optional[str] = "#FFFFFF"
    opacity: float = 0.5
    stroke: Optional[str] = None
    stroke_width: float = 0.05
    line_style: StrokePattern = StrokePattern.SOLID


@dataclass(frozen=True)
class LineStyle:
    color: str = "#FFFFFF"
    width: float = 0.1
    opacity: float = 0.5
    line_style: StrokePattern = StrokePattern.SOLID


@dataclass(frozen=True)
class CircleStyle:
    radius: float = 0.15
    fill: Optional[str] = "#FFFFFF"
    opacity: float = 0.5
    stroke: Optional[str] = None
    stroke_width: float = 0.1


@dataclass(frozen=True)
class TextStyle:
    """Style of a text label anchored at its horizontal center and baseline."""

    color: str = "#FFFFFF"
    font: float = 0.7
    opacity: float = 1.0


class RoomVisual(Protocol):
    """Primitive drawing operations provided by the host."""

    def rect(
        self, x: float, y: float, width: float, height: float, style: RectStyle
    ) -> None: ...

    def line(
        self, x1: float, y1: float, x2: float, y2: float, style: LineStyle
    ) -> None: ...

    def circle(self, x: float, y: float, style: CircleStyle) -> None: ...

    def text(self, text: str, x: float, y: float, style: TextStyle) -> None: ...
