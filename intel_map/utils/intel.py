"""Timing helpers for intel records.

All functions take the current tick explicitly.
"""

from typing import Optional

from intel_map.types import Tick

MIN_BRIGHTNESS = 0.15


def get_intel_freshness(last_visit: Tick, last_visit_threshold: int, now: Tick) -> float:
    """Relative freshness of a room's intel, 1.0 being fresh and 0.0 stale."""
    freshness = 1.0 - (now - last_visit) / last_visit_threshold
    return max(0.0, min(1.0, freshness))


def is_timer_active(
    last_visit: Optional[Tick], remaining: Optional[int], now: Tick
) -> bool:
    """Whether a countdown seen at ``last_visit`` is still running at ``now``.

    Unset or zero values mean no timer.
    """
    if not remaining or not last_visit:
        return False
    return last_visit + remaining > now
