"""Shared test helpers: scripted randomness and frame contexts."""
from __future__ import annotations

import random
from typing import Sequence

import pytest

from fruitslice.components import BOMB_KIND, FRUIT_PALETTE, Fruit
from fruitslice.state import SimulationState
from fruitslice.types import Field, FrameContext


class ScriptedRandom(random.Random):
    """Random source that replays fixed ``random()`` values, then cycles them."""

    def __init__(self, values: Sequence[float], choice_index: int = 0) -> None:
        super().__init__(0)
        self._values = list(values)
        self._pos = 0
        self._choice_index = choice_index

    def random(self) -> float:
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value

    def choice(self, seq):  # type: ignore[override]
        return seq[self._choice_index % len(seq)]


def make_ctx(
    dt: float = 0.016,
    now: float = 0.0,
    field: Field | None = None,
    rng: random.Random | None = None,
    frame_number: int = 1,
) -> FrameContext:
    return FrameContext(
        frame_number=frame_number,
        dt=dt,
        now=now,
        field=field if field is not None else Field(960.0, 540.0),
        random=rng if rng is not None else random.Random(42),
    )


def make_fruit(
    state: SimulationState,
    position: tuple[float, float],
    radius: float = 20.0,
    velocity: tuple[float, float] = (0.0, 0.0),
    is_bomb: bool = False,
) -> Fruit:
    fruit = Fruit(
        id=state.allocate_id(),
        position=position,
        velocity=velocity,
        radius=radius,
        kind=BOMB_KIND if is_bomb else FRUIT_PALETTE[0],
        spawned_at=state.now,
        is_bomb=is_bomb,
    )
    state.fruits.append(fruit)
    return fruit


@pytest.fixture
def running_state() -> SimulationState:
    state = SimulationState()
    state.status.start(3)
    return state
