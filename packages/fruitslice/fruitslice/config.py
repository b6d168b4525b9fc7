"""Simulation configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SliceConfig:
    """Immutable physical and gameplay constants.

    Attributes:
        gravity: Downward acceleration applied to fruits, px/s^2.
        drag: Per-frame multiplier on fruit horizontal velocity.
        wall_restitution: Fraction of horizontal speed kept after a wall bounce.
        despawn_margin: Distance below the field a fruit's top edge must pass
            before it is removed.
        particle_gravity_scale: Fraction of ``gravity`` applied to particles.
        particle_drag: Per-frame multiplier on particle horizontal velocity.
        slash_ttl: Lifetime of a swipe-trail segment, ms.
        min_swipe_dist_sq: Squared pointer displacement needed to emit a segment.
        max_dt: Upper bound on a single frame step, seconds.
        start_lives: Lives granted when a game starts.
        start_delay: Settle-in delay before the first spawn, ms.
        spawn_margin: Horizontal inset of spawn positions from the walls.
        spawn_depth: How far below the bottom edge entities are launched from.
        field_width: Default play-field width.
        field_height: Default play-field height.
    """

    gravity: float = 1500.0
    drag: float = 0.995
    wall_restitution: float = 0.8
    despawn_margin: float = 40.0
    particle_gravity_scale: float = 0.75
    particle_drag: float = 0.99
    slash_ttl: float = 120.0
    min_swipe_dist_sq: float = 36.0
    max_dt: float = 0.034
    start_lives: int = 3
    start_delay: float = 300.0
    spawn_margin: float = 8.0
    spawn_depth: float = 10.0
    field_width: float = 960.0
    field_height: float = 540.0

    def __post_init__(self) -> None:
        if not 0.0 < self.drag <= 1.0:
            raise ValueError("drag must be in (0, 1]")
        if not 0.0 < self.particle_drag <= 1.0:
            raise ValueError("particle_drag must be in (0, 1]")
        if self.wall_restitution < 0.0:
            raise ValueError("wall_restitution must be non-negative")
        if self.slash_ttl <= 0:
            raise ValueError("slash_ttl must be positive")
        if self.max_dt <= 0:
            raise ValueError("max_dt must be positive")
        if self.start_lives <= 0:
            raise ValueError("start_lives must be positive")
        if self.start_delay < 0:
            raise ValueError("start_delay must be non-negative")
