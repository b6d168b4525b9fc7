"""Play-field render sink: background, fruits, particles, swipe trail."""
from __future__ import annotations

import pygame

from fruitslice.render import FruitSprite, RenderFrame
from ui.constants import (
    COLOR_BG_BOTTOM,
    COLOR_BG_TOP,
    COLOR_BOMB_FUSE,
    COLOR_BOMB_SPARK,
    COLOR_GRID,
    COLOR_SLASH,
    FRUIT_HIGHLIGHT_ALPHA,
    GRID_ALPHA,
    GRID_SPACING,
    SLASH_WIDTH,
)


def _lerp_color(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def _make_background(width: int, height: int) -> pygame.Surface:
    bg = pygame.Surface((width, height))
    for y in range(height):
        t = y / max(1, height - 1)
        pygame.draw.line(bg, _lerp_color(COLOR_BG_TOP, COLOR_BG_BOTTOM, t), (0, y), (width, y))

    grid = pygame.Surface((width, height), pygame.SRCALPHA)
    color = (*COLOR_GRID, GRID_ALPHA)
    for x in range(0, width + 1, GRID_SPACING):
        pygame.draw.line(grid, color, (x, 0), (x, height))
    for y in range(0, height + 1, GRID_SPACING):
        pygame.draw.line(grid, color, (0, y), (width, y))
    bg.blit(grid, (0, 0))
    return bg


class FieldRenderer:
    """Callable render sink drawing a RenderFrame onto *surface*."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._background: pygame.Surface | None = None
        self._overlay: pygame.Surface | None = None

    def retarget(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._background = None
        self._overlay = None

    def __call__(self, frame: RenderFrame) -> None:
        w, h = int(frame.field.width), int(frame.field.height)
        if self._background is None or self._background.get_size() != (w, h):
            self._background = _make_background(w, h)
            self._overlay = pygame.Surface((w, h), pygame.SRCALPHA)

        self.surface.blit(self._background, (0, 0))
        for fruit in frame.fruits:
            self._draw_fruit(fruit)

        overlay = self._overlay
        assert overlay is not None
        overlay.fill((0, 0, 0, 0))
        for p in frame.particles:
            pygame.draw.circle(
                overlay,
                (*p.color, int(255 * p.alpha)),
                (int(p.position[0]), int(p.position[1])),
                max(1, int(p.size)),
            )
        for s in frame.slashes:
            pygame.draw.line(
                overlay,
                (*COLOR_SLASH, int(255 * s.alpha)),
                (int(s.start[0]), int(s.start[1])),
                (int(s.end[0]), int(s.end[1])),
                SLASH_WIDTH,
            )
        self.surface.blit(overlay, (0, 0))

    def _draw_fruit(self, fruit: FruitSprite) -> None:
        x, y = fruit.position
        r = fruit.radius
        center = (int(x), int(y))
        pygame.draw.circle(self.surface, fruit.color, center, int(r))

        if fruit.is_bomb:
            pygame.draw.circle(
                self.surface, COLOR_BOMB_SPARK,
                (int(x + r * 0.45), int(y - r * 0.55)), 4,
            )
            pygame.draw.line(
                self.surface, COLOR_BOMB_FUSE,
                (int(x + r * 0.15), int(y - r * 0.85)),
                (int(x + r * 0.55), int(y - r * 1.2)),
                2,
            )
            return

        size = int(r * 2)
        shine = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(
            shine, (255, 255, 255, FRUIT_HIGHLIGHT_ALPHA),
            (int(r * 0.65), int(r * 0.65)), max(1, int(r * 0.42)),
        )
        self.surface.blit(shine, (int(x - r), int(y - r)))
