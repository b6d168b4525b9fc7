"""Render frames: what a sink should draw, independent of how."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from fruitslice.components import Color
from fruitslice.geometry import clamp
from fruitslice.slicing import PARTICLE_LIFE
from fruitslice.types import EntityId, Field, Vec2

if TYPE_CHECKING:
    from fruitslice.state import SimulationState

SLASH_MAX_ALPHA = 0.9


@dataclass(frozen=True)
class FruitSprite:
    id: EntityId
    position: Vec2
    radius: float
    color: Color
    kind: str
    is_bomb: bool


@dataclass(frozen=True)
class ParticleSprite:
    position: Vec2
    size: float
    color: Color
    alpha: float


@dataclass(frozen=True)
class SlashSprite:
    start: Vec2
    end: Vec2
    alpha: float


@dataclass(frozen=True)
class RenderFrame:
    """Everything visible in one frame, back to front."""

    field: Field
    now: float
    status: dict[str, Any]
    fruits: tuple[FruitSprite, ...] = ()
    particles: tuple[ParticleSprite, ...] = ()
    slashes: tuple[SlashSprite, ...] = ()


class RenderSink(Protocol):
    def __call__(self, frame: RenderFrame) -> None: ...


def particle_alpha(life: float) -> float:
    return clamp(life / PARTICLE_LIFE[1], 0.0, 1.0)


def slash_alpha(age: float, ttl: float) -> float:
    return SLASH_MAX_ALPHA * clamp(1.0 - age / ttl, 0.0, 1.0)


def build_render_frame(state: SimulationState, field: Field, now: float) -> RenderFrame:
    fruits = tuple(
        FruitSprite(
            id=f.id,
            position=f.position,
            radius=f.radius,
            color=f.kind.color,
            kind=f.kind.name,
            is_bomb=f.is_bomb,
        )
        for f in state.fruits
    )
    particles = tuple(
        ParticleSprite(p.position, p.size, p.color, particle_alpha(p.life))
        for p in state.particles
    )
    slashes = tuple(
        SlashSprite(s.start, s.end, slash_alpha(s.age(now), s.ttl))
        for s in state.slashes
    )
    return RenderFrame(
        field=field,
        now=now,
        fruits=fruits,
        particles=particles,
        slashes=slashes,
        status=state.status.as_dict(),
    )
