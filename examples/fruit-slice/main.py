"""
Fruit Slice - fruitslice pygame demo

Hold the left mouse button and swipe across fruits to slice them. Slicing a
bomb ends the game; every fruit that falls off the bottom costs a life.

Controls:
  Space       Start / play again
  R           Restart
  Left-drag   Swipe
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from fruitslice import FrameDriver
from fruitslice.chronicle import ChronicleRecorder, print_events
from ui.constants import DEFAULT_VIEWPORT, FPS, compute_layout
from ui.field import FieldRenderer
from ui.hud import draw_sidebar

TITLE = "Fruit Slice"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fruit Slice - fruitslice visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--width", type=int, default=DEFAULT_VIEWPORT[0], help="Viewport width")
    p.add_argument("--height", type=int, default=DEFAULT_VIEWPORT[1], help="Viewport height")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("--verbose", action="store_true", help="Print game events to stderr")
    p.add_argument("--chronicle", type=str, default=None,
                   metavar="FILE", help="Save JSONL event log to FILE on quit")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    layout = compute_layout(args.width, args.height)

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    fps_clock = pygame.time.Clock()

    renderer = FieldRenderer(screen.subsurface((0, 0, layout["field_w"], layout["field_h"])))
    driver = FrameDriver(
        seed=args.seed,
        sink=renderer,
        now_fn=lambda: float(pygame.time.get_ticks()),
    )
    driver.resize(layout["field_w"], layout["field_h"])

    if args.verbose:
        print_events(driver.bus)
    chronicle = None
    if args.chronicle:
        chronicle = ChronicleRecorder(driver.bus, lambda: driver.state.now)

    def in_field(pos: tuple[int, int]) -> bool:
        return pos[0] < layout["field_w"] and pos[1] < layout["field_h"]

    def on_frame(d: FrameDriver) -> None:
        nonlocal screen, layout

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                d.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    d.stop()
                elif event.key == pygame.K_r or (
                    event.key in (pygame.K_SPACE, pygame.K_RETURN) and not d.state.status.running
                ):
                    d.start()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if in_field(event.pos):
                    d.pointer_down((float(event.pos[0]), float(event.pos[1])))
            elif event.type == pygame.MOUSEMOTION:
                if in_field(event.pos):
                    d.pointer_move((float(event.pos[0]), float(event.pos[1])))
                else:
                    d.pointer_up()
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                d.pointer_up()
            elif event.type == pygame.WINDOWLEAVE:
                d.pointer_up()
            elif event.type == pygame.VIDEORESIZE:
                layout = compute_layout(event.w, event.h)
                screen = pygame.display.set_mode(
                    (layout["screen_w"], layout["screen_h"]), pygame.RESIZABLE
                )
                renderer.retarget(
                    screen.subsurface((0, 0, layout["field_w"], layout["field_h"]))
                )
                d.resize(layout["field_w"], layout["field_h"])

        fps_clock.tick()
        draw_sidebar(
            screen, font, big_font, d.status(),
            layout["field_w"], layout["screen_h"], fps_clock.get_fps(),
        )
        pygame.display.flip()

    driver.on_frame(on_frame)
    driver.run_forever(fps=args.fps)

    if chronicle is not None:
        n = chronicle.write(args.chronicle)
        print(f"Chronicle: {n} events written to {args.chronicle}", file=sys.stderr)

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
