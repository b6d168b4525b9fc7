"""Frame systems for fruit, particle and slash-trail integration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from fruitslice import signals
from fruitslice.config import SliceConfig
from fruitslice.signals import SignalBus
from fruitslice.types import FrameContext

if TYPE_CHECKING:
    from fruitslice.state import SimulationState


def make_fruit_system(
    config: SliceConfig,
    bus: SignalBus | None = None,
) -> Callable[[SimulationState, FrameContext], None]:
    """Semi-implicit Euler under gravity and drag, with wall bounces.

    Fruits whose top edge falls past ``field.height + despawn_margin`` are
    removed. A non-bomb fruit leaving this way while the game runs costs a
    life. Integration is suspended outside the running phase.
    """

    def fruit_system(state: SimulationState, ctx: FrameContext) -> None:
        status = state.status
        if not status.running:
            return
        width = ctx.field.width
        floor = ctx.field.height + config.despawn_margin
        dt = ctx.dt
        fruits = state.fruits

        for i in range(len(fruits) - 1, -1, -1):
            fruit = fruits[i]
            vx, vy = fruit.velocity
            vy += config.gravity * dt
            vx *= config.drag
            x = fruit.position[0] + vx * dt
            y = fruit.position[1] + vy * dt

            r = fruit.radius
            if x < r:
                x = r
                vx = abs(vx) * config.wall_restitution
            elif x > width - r:
                x = width - r
                vx = -abs(vx) * config.wall_restitution

            fruit.position = (x, y)
            fruit.velocity = (vx, vy)

            if y - r <= floor:
                continue
            del fruits[i]
            if fruit.is_bomb or not status.running:
                continue
            ended = status.lose_life()
            if bus is not None:
                bus.publish(signals.MISSED, id=fruit.id, kind=fruit.kind.name, lives=status.lives)
                if ended:
                    bus.publish(signals.GAME_OVER, reason="out_of_lives", score=status.score)

    return fruit_system


def make_particle_system(
    config: SliceConfig,
) -> Callable[[SimulationState, FrameContext], None]:
    """Cosmetic particles: reduced gravity, drag, and a lifetime in ms."""
    gravity = config.gravity * config.particle_gravity_scale

    def particle_system(state: SimulationState, ctx: FrameContext) -> None:
        dt = ctx.dt
        particles = state.particles
        for i in range(len(particles) - 1, -1, -1):
            p = particles[i]
            vx, vy = p.velocity
            vy += gravity * dt
            vx *= config.particle_drag
            p.velocity = (vx, vy)
            p.position = (p.position[0] + vx * dt, p.position[1] + vy * dt)
            p.life -= dt * 1000.0
            if p.life <= 0:
                del particles[i]

    return particle_system


def make_slash_system() -> Callable[[SimulationState, FrameContext], None]:
    """Drop trail segments older than their time-to-live."""

    def slash_system(state: SimulationState, ctx: FrameContext) -> None:
        slashes = state.slashes
        for i in range(len(slashes) - 1, -1, -1):
            if slashes[i].expired(ctx.now):
                del slashes[i]

    return slash_system
