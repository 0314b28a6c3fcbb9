"""intel_map
=================================

Schematic overview maps of a room grid, colored from cached reconnaissance
("intel") records.

The entry point is :func:`intel_map.renderer.intel.render_intel_map`, which
issues draw calls against any object implementing the
:class:`intel_map.visual.RoomVisual` protocol. Two surfaces ship with the
package: an in-memory recorder and a Pillow rasterizer.
"""

from .options import RenderOptions
from .room_info import IntelMap, RoomInfo, intel_from_dict
from .renderer.intel import IntelMapRenderer, render_intel_map
from .types import Direction, ResourceType, RoomName, StrokePattern
