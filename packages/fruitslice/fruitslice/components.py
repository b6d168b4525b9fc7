"""Entity records: fruits and bombs, particles, swipe-trail segments."""
from __future__ import annotations

from dataclasses import dataclass

from fruitslice.types import EntityId, Vec2

Color = tuple[int, int, int]


@dataclass(frozen=True)
class FruitKind:
    name: str
    color: Color


FRUIT_PALETTE: tuple[FruitKind, ...] = (
    FruitKind("Apple", (239, 68, 68)),
    FruitKind("Orange", (249, 115, 22)),
    FruitKind("Lime", (132, 204, 22)),
    FruitKind("Blueberry", (59, 130, 246)),
    FruitKind("Grape", (168, 85, 247)),
    FruitKind("Peach", (251, 113, 133)),
)

BOMB_KIND = FruitKind("Bomb", (17, 24, 39))


@dataclass
class Fruit:
    """A launched fruit or bomb. Position is only meaningful while live."""

    id: EntityId
    position: Vec2
    velocity: Vec2
    radius: float
    kind: FruitKind
    spawned_at: float
    is_bomb: bool = False

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")


@dataclass
class Particle:
    """Cosmetic debris. ``life`` counts down in ms."""

    position: Vec2
    velocity: Vec2
    size: float
    color: Color
    life: float


@dataclass
class Slash:
    """One swipe-trail segment between two consecutive pointer samples."""

    start: Vec2
    end: Vec2
    born_at: float
    ttl: float

    def age(self, now: float) -> float:
        return now - self.born_at

    def expired(self, now: float) -> bool:
        return self.age(now) > self.ttl
