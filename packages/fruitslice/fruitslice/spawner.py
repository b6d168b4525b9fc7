"""Spawn scheduling with a difficulty ramp driven by level time."""
from __future__ import annotations

import random as _random
from typing import TYPE_CHECKING, Callable

from fruitslice import signals
from fruitslice.components import BOMB_KIND, FRUIT_PALETTE, Fruit
from fruitslice.config import SliceConfig
from fruitslice.geometry import clamp, random_between
from fruitslice.signals import SignalBus
from fruitslice.types import Field, FrameContext

if TYPE_CHECKING:
    from fruitslice.state import SimulationState

# Bomb chance rises linearly with level time between these bounds.
BOMB_CHANCE_MIN = 0.09
BOMB_CHANCE_MAX = 0.18
BOMB_CHANCE_RAMP_MS = 120_000.0

BOMB_RADIUS = (18.0, 24.0)
FRUIT_RADIUS = (20.0, 32.0)
LAUNCH_SPEED = (820.0, 1040.0)
LAUNCH_DRIFT = 220.0

# Spawn delay bounds shrink with level time down to their floors.
MIN_DELAY_START = 580.0
MIN_DELAY_FLOOR = 320.0
MIN_DELAY_RAMP = 600.0
MAX_DELAY_START = 900.0
MAX_DELAY_CEIL = 920.0
MAX_DELAY_FLOOR = 520.0
MAX_DELAY_RAMP = 700.0


def bomb_chance(level_time: float) -> float:
    return clamp(
        BOMB_CHANCE_MIN + level_time / BOMB_CHANCE_RAMP_MS,
        BOMB_CHANCE_MIN,
        BOMB_CHANCE_MAX,
    )


def spawn_delay_bounds(level_time: float) -> tuple[float, float]:
    """(min_delay, max_delay) in ms for the next spawn."""
    min_delay = clamp(MIN_DELAY_START - level_time / MIN_DELAY_RAMP, MIN_DELAY_FLOOR, MIN_DELAY_START)
    max_delay = clamp(MAX_DELAY_START - level_time / MAX_DELAY_RAMP, MAX_DELAY_FLOOR, MAX_DELAY_CEIL)
    return min_delay, max_delay


def spawn_fruit(
    state: SimulationState,
    config: SliceConfig,
    field: Field,
    now: float,
    rng: _random.Random,
) -> Fruit:
    """Launch one fruit or bomb from just below the bottom edge."""
    is_bomb = rng.random() < bomb_chance(state.spawn.level_time)
    radius = random_between(*(BOMB_RADIUS if is_bomb else FRUIT_RADIUS), rng=rng)
    x = random_between(
        radius + config.spawn_margin,
        field.width - radius - config.spawn_margin,
        rng=rng,
    )
    y = field.height + radius + config.spawn_depth
    vy = -random_between(*LAUNCH_SPEED, rng=rng)
    vx = random_between(-LAUNCH_DRIFT, LAUNCH_DRIFT, rng=rng)

    kind = rng.choice(FRUIT_PALETTE)
    if is_bomb:
        kind = BOMB_KIND

    fruit = Fruit(
        id=state.allocate_id(),
        position=(x, y),
        velocity=(vx, vy),
        radius=radius,
        kind=kind,
        spawned_at=now,
        is_bomb=is_bomb,
    )
    state.fruits.append(fruit)
    return fruit


def schedule_next_spawn(state: SimulationState, now: float, rng: _random.Random) -> float:
    min_delay, max_delay = spawn_delay_bounds(state.spawn.level_time)
    state.spawn.next_spawn_at = now + random_between(min_delay, max_delay, rng=rng)
    return state.spawn.next_spawn_at


def schedule_first_spawn(state: SimulationState, now: float, delay: float) -> None:
    state.spawn.next_spawn_at = now + delay


def make_spawn_system(
    config: SliceConfig,
    bus: SignalBus | None = None,
) -> Callable[[SimulationState, FrameContext], None]:
    """Accumulate level time and spawn when the schedule comes due.

    Only active while the game is running.
    """

    def spawn_system(state: SimulationState, ctx: FrameContext) -> None:
        if not state.status.running:
            return
        state.spawn.level_time += ctx.dt * 1000.0
        if state.spawn.next_spawn_at > ctx.now:
            return
        fruit = spawn_fruit(state, config, ctx.field, ctx.now, ctx.random)
        schedule_next_spawn(state, ctx.now, ctx.random)
        if bus is not None:
            bus.publish(
                signals.SPAWNED,
                id=fruit.id,
                kind=fruit.kind.name,
                bomb=fruit.is_bomb,
            )

    return spawn_system
