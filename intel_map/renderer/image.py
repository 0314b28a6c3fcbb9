"""Pillow drawing surface.

``ImageVisual`` rasterizes draw calls onto an RGB canvas. Map units are scaled
by ``scale`` pixels and shifted so that ``origin`` lands on pixel ``(0, 0)``.
Translucent primitives are alpha blended onto what is already drawn.
"""

from functools import lru_cache
from typing import List, Mapping, Optional, Tuple
import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from intel_map.options import RenderOptions
from intel_map.renderer.intel import MAP_ORIGIN, compute_window, render_intel_map
from intel_map.room_info import IntelMap
from intel_map.types import ExitsFn, RoomName, StrokePattern, Tick
from intel_map.utils.color import hex_to_rgba
from intel_map.visual import CircleStyle, LineStyle, RectStyle, TextStyle

DEFAULT_SCALE = 16
DEFAULT_BACKGROUND = (0, 0, 0)

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

# (dash, gap) lengths in multiples of the stroke width
DASH_PATTERNS = {
    StrokePattern.DASHED: (3.0, 2.0),
    StrokePattern.DOTTED: (1.0, 1.5),
}


def dash_segments(
    start: Point, end: Point, dash: float, gap: float
) -> List[Segment]:
    """Split the segment ``start -> end`` into dashes of length ``dash``
    separated by ``gap``. The last dash is clipped to the segment."""
    p0: npt.NDArray[np.float64] = np.asarray(start, dtype=np.float64)
    p1: npt.NDArray[np.float64] = np.asarray(end, dtype=np.float64)
    length = float(np.linalg.norm(p1 - p0))
    if length == 0.0 or dash <= 0.0:
        return []
    direction = (p1 - p0) / length
    starts = np.arange(0.0, length, dash + gap)
    ends = np.minimum(starts + dash, length)
    return [
        (
            (float(p0[0] + direction[0] * a), float(p0[1] + direction[1] * a)),
            (float(p0[0] + direction[0] * b), float(p0[1] + direction[1] * b)),
        )
        for a, b in zip(starts, ends)
    ]


@lru_cache(maxsize=64)
def load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=max(1, size))


class ImageVisual:
    scale: float
    origin: Point

    def __init__(
        self,
        width: float,
        height: float,
        scale: float = DEFAULT_SCALE,
        origin: Point = (-0.5, -0.5),
        background: Tuple[int, int, int] = DEFAULT_BACKGROUND,
    ):
        """
        Arguments:
            width: Canvas width in map units.
            height: Canvas height in map units.
            scale: Pixels per map unit.
            origin: Map coordinate drawn at the top-left pixel.
            background: Initial RGB color of the canvas.
        """
        self.scale = scale
        self.origin = origin
        size = (max(1, round(width * scale)), max(1, round(height * scale)))
        self._image = Image.new("RGB", size, background)
        self._draw = ImageDraw.Draw(self._image, "RGBA")

    @property
    def image(self) -> Image.Image:
        return self._image

    def to_pixels(self, x: float, y: float) -> Point:
        return (x - self.origin[0]) * self.scale, (y - self.origin[1]) * self.scale

    def _width(self, width: float) -> int:
        return max(1, round(width * self.scale))

    def _stroke(
        self,
        start: Point,
        end: Point,
        color: Tuple[int, int, int, int],
        width: float,
        pattern: StrokePattern,
    ) -> None:
        pixel_width = self._width(width)
        p0 = self.to_pixels(*start)
        p1 = self.to_pixels(*end)
        if pattern == StrokePattern.SOLID:
            segments: List[Segment] = [(p0, p1)]
        else:
            dash, gap = DASH_PATTERNS[pattern]
            segments = dash_segments(p0, p1, dash * pixel_width, gap * pixel_width)
        for a, b in segments:
            self._draw.line([a, b], fill=color, width=pixel_width)

    def rect(
        self, x: float, y: float, width: float, height: float, style: RectStyle
    ) -> None:
        left, top = self.to_pixels(x, y)
        right, bottom = self.to_pixels(x + width, y + height)
        if style.fill is not None:
            self._draw.rectangle(
                [left, top, right, bottom], fill=hex_to_rgba(style.fill, style.opacity)
            )
        if style.stroke is not None:
            color = hex_to_rgba(style.stroke, style.opacity)
            corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
            for i, corner in enumerate(corners):
                self._stroke(
                    corner,
                    corners[(i + 1) % 4],
                    color,
                    style.stroke_width,
                    style.line_style,
                )

    def line(
        self, x1: float, y1: float, x2: float, y2: float, style: LineStyle
    ) -> None:
        self._stroke(
            (x1, y1),
            (x2, y2),
            hex_to_rgba(style.color, style.opacity),
            style.width,
            style.line_style,
        )

    def circle(self, x: float, y: float, style: CircleStyle) -> None:
        cx, cy = self.to_pixels(x, y)
        r = style.radius * self.scale
        fill: Optional[Tuple[int, int, int, int]] = None
        if style.fill is not None:
            fill = hex_to_rgba(style.fill, style.opacity)
        outline: Optional[Tuple[int, int, int, int]] = None
        if style.stroke is not None:
            outline = hex_to_rgba(style.stroke, style.opacity)
        self._draw.ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            fill=fill,
            outline=outline,
            width=self._width(style.stroke_width) if outline is not None else 0,
        )

    def text(self, text: str, x: float, y: float, style: TextStyle) -> None:
        font = load_font(round(style.font * self.scale))
        self._draw.text(
            self.to_pixels(x, y),
            text,
            fill=hex_to_rgba(style.color, style.opacity),
            font=font,
            anchor="ms",
        )


def render_image(
    target_room: RoomName,
    rooms_info: IntelMap,
    options: Optional[RenderOptions] = None,
    *,
    scale: float = DEFAULT_SCALE,
    now: Tick = 0,
    my_username: Optional[str] = None,
    exits_fn: Optional[ExitsFn] = None,
) -> Image.Image:
    """
    Renders the intel map as a PIL Image sized to fit the rendered window.
    """
    if options is None:
        options = RenderOptions()
    room_names = list(rooms_info.keys()) if isinstance(rooms_info, Mapping) else []
    window = compute_window(target_room, room_names, options.max_range)
    visual = ImageVisual(
        window.cols * options.room_size,
        window.rows * options.room_size,
        scale=scale,
        origin=MAP_ORIGIN,
    )
    render_intel_map(
        target_room,
        rooms_info,
        visual,
        options,
        now=now,
        my_username=my_username,
        exits_fn=exits_fn,
    )
    return visual.image
