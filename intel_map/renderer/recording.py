"""In-memory drawing surface.

``RecordingVisual`` keeps every primitive it receives, in order, as a
``DrawCall``. Hosts can replay the calls on their own visual layer; tests use
it to assert on the exact output of the renderer.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import List, Tuple, Union
from pyrsistent import pvector
from pyrsistent.typing import PVector

from intel_map.visual import CircleStyle, LineStyle, RectStyle, TextStyle

Style = Union[RectStyle, LineStyle, CircleStyle, TextStyle]


class DrawKind(StrEnum):
    RECT = auto()
    LINE = auto()
    CIRCLE = auto()
    TEXT = auto()


@dataclass(frozen=True)
class DrawCall:
    """One recorded primitive.

    Attributes:
        kind: Which primitive was called.
        args: Positional arguments, e.g. ``(x, y, width, height)`` for a rect
            or ``(text, x, y)`` for a text.
        style: Style passed with the call.
    """

    kind: DrawKind
    args: Tuple[Union[float, str], ...]
    style: Style


class RecordingVisual:
    calls: PVector[DrawCall]

    def __init__(self) -> None:
        self.calls = pvector()

    def _record(self, call: DrawCall) -> None:
        self.calls = self.calls.append(call)

    def rect(
        self, x: float, y: float, width: float, height: float, style: RectStyle
    ) -> None:
        self._record(DrawCall(DrawKind.RECT, (x, y, width, height), style))

    def line(
        self, x1: float, y1: float, x2: float, y2: float, style: LineStyle
    ) -> None:
        self._record(DrawCall(DrawKind.LINE, (x1, y1, x2, y2), style))

    def circle(self, x: float, y: float, style: CircleStyle) -> None:
        self._record(DrawCall(DrawKind.CIRCLE, (x, y), style))

    def text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        self._record(DrawCall(DrawKind.TEXT, (text, x, y), style))

    def of_kind(self, kind: DrawKind) -> List[DrawCall]:
        """Recorded calls of one primitive kind, in drawing order."""
        return [call for call in self.calls if call.kind == kind]

    def texts(self) -> List[str]:
        """Strings of all recorded text calls, in drawing order."""
        return [str(call.args[0]) for call in self.of_kind(DrawKind.TEXT)]

    def clear(self) -> None:
        self.calls = pvector()
