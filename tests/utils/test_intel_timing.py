# tests/utils/test_intel_timing.py

import pytest
from typing import Optional

from intel_map.utils.intel import get_intel_freshness, is_timer_active

T = 3000


@pytest.mark.parametrize(
    "last_visit, now, expected",
    [
        (10_000, 10_000, 1.0),
        (10_000 - T, 10_000, 0.0),
        (10_000 - 2 * T, 10_000, 0.0),
        (10_000 - T // 2, 10_000, 0.5),
        (10_000 - T // 4, 10_000, 0.75),
        # Intel from the future is not fresher than fresh
        (10_100, 10_000, 1.0),
    ],
)
def test_get_intel_freshness(last_visit: int, now: int, expected: float) -> None:
    assert get_intel_freshness(last_visit, T, now) == pytest.approx(expected)


@pytest.mark.parametrize(
    "last_visit, remaining, now, expected",
    [
        (100, 500, 200, True),
        (100, 500, 599, True),
        (100, 500, 600, False),
        (100, 50, 200, False),
        (None, 500, 200, False),
        (100, None, 200, False),
        (100, 0, 50, False),
        (0, 500, 10, False),
    ],
)
def test_is_timer_active(
    last_visit: Optional[int], remaining: Optional[int], now: int, expected: bool
) -> None:
    assert is_timer_active(last_visit, remaining, now) is expected
