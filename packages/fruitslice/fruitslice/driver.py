"""FrameDriver - per-frame orchestration, input boundary and lifecycle."""

from __future__ import annotations

import os
import random
import time
from typing import Any, Callable

from fruitslice import signals
from fruitslice.clock import FrameClock
from fruitslice.config import SliceConfig
from fruitslice.physics import make_fruit_system, make_particle_system, make_slash_system
from fruitslice.pointer import PointerTracker
from fruitslice.render import RenderSink, build_render_frame
from fruitslice.signals import SignalBus
from fruitslice.slicing import SliceResult, slice_segment
from fruitslice.spawner import make_spawn_system, schedule_first_spawn
from fruitslice.state import SimulationState
from fruitslice.types import Field, System, Vec2


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameDriver:
    """Owns one session's SimulationState and advances it frame by frame.

    ``advance`` is the headless update; ``render`` hands the result to the
    sink; ``tick`` is the host's animation callback and does both.
    """

    def __init__(
        self,
        config: SliceConfig | None = None,
        seed: int | None = None,
        sink: RenderSink | None = None,
        field: Field | None = None,
        now_fn: Callable[[], float] | None = None,
    ) -> None:
        self._config = config if config is not None else SliceConfig()
        self._state = SimulationState()
        self._state.status.lives = self._config.start_lives
        self._clock = FrameClock(self._config.max_dt)
        self._pointer = PointerTracker(self._config.min_swipe_dist_sq, self._config.slash_ttl)
        self._bus = SignalBus()
        self._sink = sink
        self._field = field
        self._now_fn = now_fn if now_fn is not None else _monotonic_ms
        self._frame_hooks: list[Callable[[FrameDriver], None]] = []
        self._stop_requested = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

        self._systems: list[System] = [
            make_spawn_system(self._config, self._bus),
            make_fruit_system(self._config, self._bus),
            make_particle_system(self._config),
            make_slash_system(),
        ]

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def config(self) -> SliceConfig:
        return self._config

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def pointer(self) -> PointerTracker:
        return self._pointer

    @property
    def field(self) -> Field | None:
        return self._field

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    # -- Collaborators --

    def resize(self, width: float, height: float) -> None:
        self._field = Field(width, height)

    def set_sink(self, sink: RenderSink | None) -> None:
        self._sink = sink

    def on_frame(self, hook: Callable[[FrameDriver], None]) -> None:
        self._frame_hooks.append(hook)

    # -- Commands --

    def start(self, now: float | None = None) -> None:
        """Start or restart: fresh entities, score, lives and spawn schedule."""
        if now is None:
            now = self._now_fn()
        state = self._state
        state.clear_entities()
        state.reset_spawn()
        self._pointer.release()
        self._bus.flush()
        self._clock.reset(now)
        state.now = now
        schedule_first_spawn(state, now, self._config.start_delay)
        state.status.start(self._config.start_lives)
        self._bus.publish(signals.GAME_STARTED, lives=state.status.lives)

    def status(self) -> dict[str, Any]:
        return self._state.status.as_dict()

    # -- Frame pass --

    def _run_frame(self) -> None:
        assert self._field is not None
        self._state.now = self._clock.now
        ctx = self._clock.context(self._field, self._rng)
        for system in self._systems:
            system(self._state, ctx)
        self._bus.flush()

    def advance(self, dt: float) -> SimulationState:
        """Step the simulation by *dt* seconds of simulated time."""
        if self._field is None:
            return self._state
        self._clock.step(dt)
        self._run_frame()
        return self._state

    def render(self) -> bool:
        if self._sink is None or self._field is None:
            return False
        self._sink(build_render_frame(self._state, self._field, self._state.now))
        return True

    def tick(self, now: float) -> bool:
        """One host frame at wall-clock *now* (ms). False when skipped."""
        if self._stop_requested or self._sink is None or self._field is None:
            return False
        self._clock.advance(now)
        self._run_frame()
        self.render()
        return True

    # -- Input boundary --

    def pointer_down(self, point: Vec2) -> None:
        self._pointer.press(point, self._clock.now)

    def pointer_move(self, point: Vec2) -> SliceResult | None:
        """Record a swipe sample; slices synchronously while running."""
        slash = self._pointer.move(point, self._clock.now)
        if slash is None:
            return None
        self._state.slashes.append(slash)
        if not self._state.status.running:
            return None
        return slice_segment(self._state, slash.start, slash.end, self._rng, self._bus)

    def pointer_up(self) -> None:
        self._pointer.release()

    # -- Lifecycle --

    def stop(self) -> None:
        self._stop_requested = True

    def run_forever(self, fps: int = 60) -> None:
        """Pace ``tick`` at *fps* until ``stop`` is called."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._stop_requested = False
        self._clock.reset(self._now_fn())
        interval = 1.0 / fps
        while not self._stop_requested:
            start = time.monotonic()
            self.tick(self._now_fn())
            for hook in self._frame_hooks:
                hook(self)
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = interval - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
