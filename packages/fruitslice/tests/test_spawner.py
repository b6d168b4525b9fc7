"""Tests for spawn scheduling and the difficulty ramp."""
from __future__ import annotations

import math
import random

from conftest import ScriptedRandom, make_ctx

from fruitslice.components import BOMB_KIND, FRUIT_PALETTE
from fruitslice.config import SliceConfig
from fruitslice.signals import SignalBus
from fruitslice.spawner import (
    bomb_chance,
    make_spawn_system,
    schedule_first_spawn,
    spawn_delay_bounds,
    spawn_fruit,
)
from fruitslice.state import SimulationState
from fruitslice.types import Field


class TestRamp:
    def test_bomb_chance_at_start(self) -> None:
        assert bomb_chance(0.0) == 0.09

    def test_bomb_chance_caps(self) -> None:
        assert bomb_chance(12_000.0) == 0.18
        assert bomb_chance(10_000_000.0) == 0.18

    def test_bomb_chance_rises_linearly(self) -> None:
        assert math.isclose(bomb_chance(6_000.0), 0.14)

    def test_delay_bounds_at_start(self) -> None:
        assert spawn_delay_bounds(0.0) == (580.0, 900.0)

    def test_delay_bounds_monotone_until_floor(self) -> None:
        previous = spawn_delay_bounds(0.0)
        for step in range(1, 400):
            current = spawn_delay_bounds(step * 1_000.0)
            assert current[0] <= previous[0]
            assert current[1] <= previous[1]
            previous = current
        assert previous == (320.0, 520.0)

    def test_floors_reached(self) -> None:
        assert spawn_delay_bounds(156_000.0)[0] == 320.0
        assert spawn_delay_bounds(266_000.0)[1] == 520.0
        assert spawn_delay_bounds(1e9) == (320.0, 520.0)


class TestSpawnFruit:
    def test_fruit_launch_parameters(self) -> None:
        state = SimulationState()
        field = Field(960.0, 540.0)
        # bomb draw, radius, x, launch speed, drift
        rng = ScriptedRandom([0.5, 0.0, 0.5, 0.0, 0.5], choice_index=2)
        fruit = spawn_fruit(state, SliceConfig(), field, 100.0, rng)

        assert not fruit.is_bomb
        assert fruit.radius == 20.0
        assert math.isclose(fruit.position[0], 28.0 + 0.5 * (960.0 - 56.0))
        assert fruit.position[1] == 540.0 + 20.0 + 10.0
        assert fruit.velocity == (0.0, -820.0)
        assert fruit.kind == FRUIT_PALETTE[2]
        assert fruit.spawned_at == 100.0
        assert state.fruits == [fruit]

    def test_bomb_when_draw_below_chance(self) -> None:
        state = SimulationState()
        rng = ScriptedRandom([0.05, 1.0, 0.0, 1.0, 0.0])
        fruit = spawn_fruit(state, SliceConfig(), Field(960.0, 540.0), 0.0, rng)
        assert fruit.is_bomb
        assert fruit.kind == BOMB_KIND
        assert fruit.radius == 24.0
        assert fruit.velocity == (-220.0, -1040.0)

    def test_draw_at_chance_is_not_bomb(self) -> None:
        state = SimulationState()
        rng = ScriptedRandom([0.09, 0.5, 0.5, 0.5, 0.5])
        assert not spawn_fruit(state, SliceConfig(), Field(960.0, 540.0), 0.0, rng).is_bomb

    def test_spawns_fully_on_screen(self) -> None:
        state = SimulationState()
        rng = random.Random(1)
        for _ in range(200):
            fruit = spawn_fruit(state, SliceConfig(), Field(400.0, 300.0), 0.0, rng)
            assert fruit.radius + 8.0 <= fruit.position[0] <= 400.0 - fruit.radius - 8.0
            assert fruit.position[1] > 300.0
            assert -1040.0 <= fruit.velocity[1] <= -820.0

    def test_ids_are_unique_and_increasing(self) -> None:
        state = SimulationState()
        rng = random.Random(5)
        ids = [spawn_fruit(state, SliceConfig(), Field(960.0, 540.0), 0.0, rng).id for _ in range(20)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 20


class TestSpawnSystem:
    def test_idle_does_nothing(self) -> None:
        state = SimulationState()
        system = make_spawn_system(SliceConfig())
        system(state, make_ctx(dt=0.016, now=1_000.0))
        assert state.fruits == []
        assert state.spawn.level_time == 0.0

    def test_accumulates_level_time(self, running_state: SimulationState) -> None:
        schedule_first_spawn(running_state, 0.0, 10_000.0)
        system = make_spawn_system(SliceConfig())
        system(running_state, make_ctx(dt=0.016, now=16.0))
        system(running_state, make_ctx(dt=0.016, now=32.0))
        assert math.isclose(running_state.spawn.level_time, 32.0)
        assert running_state.fruits == []

    def test_spawns_when_due_and_reschedules(self, running_state: SimulationState) -> None:
        schedule_first_spawn(running_state, 0.0, 300.0)
        bus = SignalBus()
        seen = []
        bus.subscribe("spawned", lambda name, data: seen.append(data))
        system = make_spawn_system(SliceConfig(), bus)

        system(running_state, make_ctx(dt=0.016, now=299.0))
        assert running_state.fruits == []

        system(running_state, make_ctx(dt=0.016, now=300.0))
        assert len(running_state.fruits) == 1
        next_at = running_state.spawn.next_spawn_at
        min_delay, max_delay = spawn_delay_bounds(running_state.spawn.level_time)
        assert 300.0 + min_delay <= next_at <= 300.0 + max_delay

        bus.flush()
        assert seen[0]["id"] == running_state.fruits[0].id

    def test_next_spawn_only_advances(self, running_state: SimulationState) -> None:
        schedule_first_spawn(running_state, 0.0, 0.0)
        system = make_spawn_system(SliceConfig())
        previous = running_state.spawn.next_spawn_at
        now = 0.0
        for _ in range(500):
            now += 16.0
            system(running_state, make_ctx(dt=0.016, now=now))
            assert running_state.spawn.next_spawn_at >= previous
            previous = running_state.spawn.next_spawn_at
        assert len(running_state.fruits) > 5
