"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
SIDEBAR_W = 220
MIN_FIELD_W = 320
MIN_FIELD_H = 420
MAX_FIELD_H = 640
FIELD_H_SHARE = 0.62
DEFAULT_VIEWPORT = (1180, 860)
FPS = 60

# Background
COLOR_BG_TOP = (2, 6, 23)
COLOR_BG_BOTTOM = (11, 18, 32)
COLOR_GRID = (148, 163, 184)
GRID_ALPHA = 20
GRID_SPACING = 32

# Entities
COLOR_SLASH = (224, 231, 255)
SLASH_WIDTH = 3
COLOR_BOMB_SPARK = (239, 68, 68)
COLOR_BOMB_FUSE = (251, 191, 36)
FRUIT_HIGHLIGHT_ALPHA = 56

# Sidebar
COLOR_SIDEBAR_BG = (15, 23, 42)
COLOR_BORDER = (30, 41, 59)
COLOR_TEXT = (241, 245, 249)
COLOR_TEXT_DIM = (203, 213, 225)
COLOR_GAME_OVER_BG = (69, 26, 26)
COLOR_GAME_OVER_TEXT = (254, 202, 202)


def compute_layout(viewport_w: int, viewport_h: int) -> dict[str, int]:
    """Size the play field to the viewport, leaving room for the sidebar."""
    field_w = max(MIN_FIELD_W, viewport_w - SIDEBAR_W)
    field_h = max(MIN_FIELD_H, min(MAX_FIELD_H, int(viewport_h * FIELD_H_SHARE)))
    return {
        "field_w": field_w,
        "field_h": field_h,
        "screen_w": field_w + SIDEBAR_W,
        "screen_h": field_h,
    }
