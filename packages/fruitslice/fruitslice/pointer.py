"""Pointer state and swipe sampling."""
from __future__ import annotations

from dataclasses import dataclass

from fruitslice.components import Slash
from fruitslice.types import Vec2


@dataclass
class PointerState:
    down: bool = False
    position: Vec2 = (0.0, 0.0)
    last_position: Vec2 = (0.0, 0.0)
    last_move_at: float = 0.0


class PointerTracker:
    """Turns down/move/up samples into swipe segments.

    Coordinates must already be field-local. A move emits a segment only
    while pressed and only when it travelled at least ``min_dist_sq``
    (squared) from the previous sample; the previous sample advances either
    way.
    """

    def __init__(self, min_dist_sq: float, ttl: float) -> None:
        self._min_dist_sq = min_dist_sq
        self._ttl = ttl
        self._state = PointerState()

    @property
    def state(self) -> PointerState:
        return self._state

    @property
    def down(self) -> bool:
        return self._state.down

    def press(self, point: Vec2, now: float) -> None:
        s = self._state
        s.down = True
        s.position = point
        s.last_position = point
        s.last_move_at = now

    def move(self, point: Vec2, now: float) -> Slash | None:
        s = self._state
        if not s.down:
            return None

        start = s.last_position
        s.position = point
        s.last_position = point

        dx = point[0] - start[0]
        dy = point[1] - start[1]
        if dx * dx + dy * dy < self._min_dist_sq:
            return None

        s.last_move_at = now
        return Slash(start=start, end=point, born_at=now, ttl=self._ttl)

    def release(self) -> None:
        """Pointer up, cancel or leave."""
        self._state.down = False
