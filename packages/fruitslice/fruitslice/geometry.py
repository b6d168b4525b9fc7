"""Pure numeric helpers: clamping, sampling and segment/circle tests."""
from __future__ import annotations

import random as _random

from fruitslice.types import Vec2


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def random_between(lo: float, hi: float, rng: _random.Random | None = None) -> float:
    """Uniform value in [lo, hi). Draws once from *rng*, or the module RNG."""
    r = rng.random() if rng is not None else _random.random()
    return lo + r * (hi - lo)


def _segment_param(p: Vec2, a: Vec2, b: Vec2) -> float:
    abx = b[0] - a[0]
    aby = b[1] - a[1]
    len_sq = abx * abx + aby * aby
    if len_sq == 0.0:
        return 0.0
    t = ((p[0] - a[0]) * abx + (p[1] - a[1]) * aby) / len_sq
    return clamp(t, 0.0, 1.0)


def closest_point_on_segment(p: Vec2, a: Vec2, b: Vec2) -> Vec2:
    """Closest point to *p* on segment AB. Always lies on [A, B]."""
    t = _segment_param(p, a, b)
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def distance_to_segment_sq(p: Vec2, a: Vec2, b: Vec2) -> float:
    """Squared distance from *p* to segment AB.

    A degenerate segment (A == B) yields the squared distance to A.
    """
    cx, cy = closest_point_on_segment(p, a, b)
    dx = p[0] - cx
    dy = p[1] - cy
    return dx * dx + dy * dy


def segment_intersects_circle(a: Vec2, b: Vec2, center: Vec2, radius: float) -> bool:
    """True when segment AB touches or crosses the circle. No square roots."""
    return distance_to_segment_sq(center, a, b) <= radius * radius
