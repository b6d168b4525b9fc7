"""fruitslice - A frame-driven fruit slicing simulation."""
from __future__ import annotations

from fruitslice.clock import FrameClock
from fruitslice.components import BOMB_KIND, FRUIT_PALETTE, Fruit, FruitKind, Particle, Slash
from fruitslice.config import SliceConfig
from fruitslice.driver import FrameDriver
from fruitslice.game import GameStatus
from fruitslice.render import RenderFrame, RenderSink, build_render_frame
from fruitslice.signals import SignalBus
from fruitslice.slicing import SliceResult, slice_segment
from fruitslice.state import SimulationState, SpawnState
from fruitslice.types import Field, FrameContext, InvalidTransitionError

__all__ = [
    "BOMB_KIND",
    "FRUIT_PALETTE",
    "Field",
    "FrameClock",
    "FrameContext",
    "FrameDriver",
    "Fruit",
    "FruitKind",
    "GameStatus",
    "InvalidTransitionError",
    "Particle",
    "RenderFrame",
    "RenderSink",
    "SignalBus",
    "SimulationState",
    "SliceConfig",
    "SliceResult",
    "Slash",
    "SpawnState",
    "build_render_frame",
    "slice_segment",
]
