"""Swipe-segment slicing against live fruits and bombs."""
from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fruitslice import signals
from fruitslice.components import Color, Particle
from fruitslice.game import BOMB
from fruitslice.geometry import random_between, segment_intersects_circle
from fruitslice.signals import SignalBus
from fruitslice.types import Vec2

if TYPE_CHECKING:
    from fruitslice.state import SimulationState

BOMB_BURST_COLOR: Color = (239, 68, 68)
BOMB_BURST = 28
FRUIT_BURST = 18

PARTICLE_VX = (-220.0, 220.0)
PARTICLE_VY = (-240.0, 120.0)
PARTICLE_SIZE = (2.0, 5.0)
PARTICLE_LIFE = (220.0, 420.0)


@dataclass(frozen=True)
class SliceResult:
    sliced: int = 0
    bomb_hit: bool = False


def emit_particles(
    state: SimulationState,
    position: Vec2,
    color: Color,
    amount: int,
    rng: _random.Random,
) -> None:
    for _ in range(amount):
        state.particles.append(Particle(
            position=position,
            velocity=(
                random_between(*PARTICLE_VX, rng=rng),
                random_between(*PARTICLE_VY, rng=rng),
            ),
            size=random_between(*PARTICLE_SIZE, rng=rng),
            color=color,
            life=random_between(*PARTICLE_LIFE, rng=rng),
        ))


def slice_segment(
    state: SimulationState,
    start: Vec2,
    end: Vec2,
    rng: _random.Random,
    bus: SignalBus | None = None,
) -> SliceResult:
    """Apply one swipe segment to every live fruit it crosses.

    Newest fruits are tested first. A bomb ends the game at once and stops
    the scan. Any number of fruits cut by the same segment score one point.
    """
    fruits = state.fruits
    sliced = 0

    for i in range(len(fruits) - 1, -1, -1):
        fruit = fruits[i]
        if not segment_intersects_circle(start, end, fruit.position, fruit.radius):
            continue

        if fruit.is_bomb:
            emit_particles(state, fruit.position, BOMB_BURST_COLOR, BOMB_BURST, rng)
            del fruits[i]
            ended = state.status.running
            if ended:
                state.status.end(BOMB)
            if bus is not None:
                bus.publish(signals.BOMB_HIT, id=fruit.id, position=fruit.position)
                if ended:
                    bus.publish(signals.GAME_OVER, reason=BOMB, score=state.status.score)
            return SliceResult(sliced=sliced, bomb_hit=True)

        emit_particles(state, fruit.position, fruit.kind.color, FRUIT_BURST, rng)
        del fruits[i]
        sliced += 1
        if bus is not None:
            bus.publish(signals.SLICED, id=fruit.id, kind=fruit.kind.name, position=fruit.position)

    if sliced and state.status.add_point() and bus is not None:
        bus.publish(signals.SCORED, score=state.status.score, fruits=sliced)
    return SliceResult(sliced=sliced)
