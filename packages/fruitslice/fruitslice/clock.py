"""FrameClock - wall-clock deltas turned into bounded frame steps."""
from __future__ import annotations

import random

from fruitslice.types import Field, FrameContext


class FrameClock:
    """Tracks frame timestamps in ms and hands out clamped steps in seconds.

    Long gaps (a backgrounded window, a debugger pause) are capped at
    ``max_dt``; zero or backwards deltas become a zero-length step and leave
    ``now`` where it was.
    """

    def __init__(self, max_dt: float) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._last: float | None = None
        self._dt = 0.0
        self._now = 0.0
        self._frame_number = 0

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def now(self) -> float:
        return self._now

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def _clamp(self, dt: float) -> float:
        return min(self._max_dt, max(0.0, dt))

    def reset(self, now: float) -> None:
        self._last = now
        self._now = now
        self._dt = 0.0

    def advance(self, now: float) -> float:
        """Move to wall-clock timestamp *now* (ms); returns the step in seconds."""
        raw = 0.0 if self._last is None else (now - self._last) / 1000.0
        self._dt = self._clamp(raw)
        if self._last is None or now > self._last:
            self._last = now
            self._now = now
        self._frame_number += 1
        return self._dt

    def step(self, dt: float) -> float:
        """Move simulated time forward by *dt* seconds, without a wall clock."""
        self._dt = self._clamp(dt)
        self._now += self._dt * 1000.0
        self._last = self._now
        self._frame_number += 1
        return self._dt

    def context(self, field: Field, rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            now=self._now,
            field=field,
            random=rng,
        )
