"""Game phase machine: score, lives, running and game-over."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fruitslice.types import InvalidTransitionError

IDLE = "idle"
RUNNING = "running"
GAME_OVER = "game_over"

START = "start"
BOMB = "bomb"
OUT_OF_LIVES = "out_of_lives"

# phase -> command -> target phase
TRANSITIONS: dict[str, dict[str, str]] = {
    IDLE: {START: RUNNING},
    RUNNING: {START: RUNNING, BOMB: GAME_OVER, OUT_OF_LIVES: GAME_OVER},
    GAME_OVER: {START: RUNNING},
}


@dataclass
class GameStatus:
    """Score, lives and phase of one session.

    ``running`` and ``game_over`` are derived from a single ``phase`` so
    they can never both be true. Score and lives only move while running.
    """

    score: int = 0
    lives: int = 3
    phase: str = IDLE

    @property
    def running(self) -> bool:
        return self.phase == RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase == GAME_OVER

    def _apply(self, command: str) -> str:
        target = TRANSITIONS.get(self.phase, {}).get(command)
        if target is None:
            raise InvalidTransitionError(self.phase, command)
        old = self.phase
        self.phase = target
        return old

    def start(self, lives: int) -> None:
        """Begin a fresh game from any phase."""
        self._apply(START)
        self.score = 0
        self.lives = lives

    def end(self, reason: str) -> None:
        """Enter game-over. *reason* is ``"bomb"`` or ``"out_of_lives"``."""
        self._apply(reason)

    def add_point(self) -> bool:
        if not self.running:
            return False
        self.score += 1
        return True

    def lose_life(self) -> bool:
        """Take one life; returns True when this ends the game."""
        if not self.running:
            return False
        self.lives -= 1
        if self.lives <= 0:
            self.end(OUT_OF_LIVES)
            return True
        return False

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "lives": self.lives,
            "running": self.running,
            "game_over": self.game_over,
        }
