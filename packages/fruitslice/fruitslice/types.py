"""Shared type aliases, frame context and errors for fruitslice."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int
Vec2 = tuple[float, float]


@dataclass(frozen=True)
class Field:
    """Play-field size in field-local pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"field size must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    now: float
    field: Field
    random: _random.Random


class InvalidTransitionError(Exception):
    """Raised when the game is asked to do something its phase does not allow."""

    def __init__(self, phase: str, command: str) -> None:
        self.phase = phase
        self.command = command
        super().__init__(f"Cannot apply {command!r} while {phase!r}")


if TYPE_CHECKING:
    from fruitslice.state import SimulationState

System = Callable[["SimulationState", FrameContext], None]
