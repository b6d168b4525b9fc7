"""Sidebar HUD - score, lives, rules and game-over banner."""
from __future__ import annotations

from typing import Any

import pygame

from ui.constants import (
    COLOR_BORDER,
    COLOR_GAME_OVER_BG,
    COLOR_GAME_OVER_TEXT,
    COLOR_SIDEBAR_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    SIDEBAR_W,
)

RULES = (
    "Slice a fruit: +1",
    "Miss a fruit: -1 life",
    "Slice a bomb: game over",
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    big_font: pygame.font.Font,
    status: dict[str, Any],
    x0: int,
    height: int,
    fps: float,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x0, 0, SIDEBAR_W, height))
    pygame.draw.line(surface, COLOR_BORDER, (x0, 0), (x0, height), 1)

    x = x0 + 16
    y = 20
    surface.blit(font.render("Score", True, COLOR_TEXT_DIM), (x, y))
    surface.blit(big_font.render(str(status["score"]), True, COLOR_TEXT), (x, y + 18))
    y += 70
    surface.blit(font.render("Lives", True, COLOR_TEXT_DIM), (x, y))
    surface.blit(big_font.render(str(max(0, status["lives"])), True, COLOR_TEXT), (x, y + 18))
    y += 80

    surface.blit(font.render("How to play", True, COLOR_TEXT), (x, y))
    for line in RULES:
        y += 20
        surface.blit(font.render(f"- {line}", True, COLOR_TEXT_DIM), (x, y))
    y += 36

    action = "R=Restart" if status["running"] else "Space=Start"
    surface.blit(font.render(f"{action}  Esc=Quit", True, COLOR_TEXT_DIM), (x, y))
    y += 36

    if status["game_over"]:
        pygame.draw.rect(surface, COLOR_GAME_OVER_BG, (x - 6, y, SIDEBAR_W - 20, 52))
        surface.blit(font.render("Game Over", True, COLOR_GAME_OVER_TEXT), (x, y + 8))
        surface.blit(font.render("Space to play again", True, COLOR_GAME_OVER_TEXT), (x, y + 28))

    surface.blit(font.render(f"FPS: {fps:.0f}", True, COLOR_TEXT_DIM), (x, height - 24))
