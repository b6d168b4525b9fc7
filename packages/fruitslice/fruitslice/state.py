"""SimulationState - the entity store for one game session."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from fruitslice.components import Fruit, Particle, Slash
from fruitslice.game import GameStatus
from fruitslice.types import EntityId


@dataclass
class SpawnState:
    next_spawn_at: float = 0.0
    level_time: float = 0.0


@dataclass
class SimulationState:
    """Every mutable piece of a session, owned by the frame driver.

    Systems receive this by parameter; nothing else holds entity state.
    """

    fruits: list[Fruit] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    slashes: list[Slash] = field(default_factory=list)
    spawn: SpawnState = field(default_factory=SpawnState)
    status: GameStatus = field(default_factory=GameStatus)
    next_id: EntityId = 1
    now: float = 0.0

    def allocate_id(self) -> EntityId:
        eid = self.next_id
        self.next_id += 1
        return eid

    def clear_entities(self) -> None:
        self.fruits.clear()
        self.particles.clear()
        self.slashes.clear()

    def reset_spawn(self) -> None:
        self.spawn = SpawnState()

    def counts(self) -> dict[str, int]:
        return {
            "fruits": len(self.fruits),
            "particles": len(self.particles),
            "slashes": len(self.slashes),
        }

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible copy for read-only consumers."""
        return {
            "now": self.now,
            "next_id": self.next_id,
            "status": {**self.status.as_dict(), "phase": self.status.phase},
            "spawn": dataclasses.asdict(self.spawn),
            "fruits": [dataclasses.asdict(f) for f in self.fruits],
            "particles": [dataclasses.asdict(p) for p in self.particles],
            "slashes": [dataclasses.asdict(s) for s in self.slashes],
        }
