"""Rendering subpackage.

Turns a target room plus an :data:`~intel_map.room_info.IntelMap` into draw
calls. The renderer focuses on:

* Deterministic layout: a bounded window of rooms around the target, north up.
* Color coding of ownership, threat and intel age per room.
* Pluggable surfaces: anything implementing
  :class:`~intel_map.visual.RoomVisual`, e.g. the in-memory
  :class:`~intel_map.renderer.recording.RecordingVisual` or the Pillow backed
  :class:`~intel_map.renderer.image.ImageVisual`.

See :mod:`intel_map.renderer.intel` for the layout and per-room routines.
"""
