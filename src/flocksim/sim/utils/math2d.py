from __future__ import annotations

import math

TAU = 2.0 * math.pi


def _heading_from_xy(x: float, y: float) -> float:
    return math.atan2(y, x)


def _clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)
