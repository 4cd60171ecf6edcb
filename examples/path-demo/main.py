"""Path Demo — two boxes racing the same route with different easings.

Exercises tick-path: both boxes share the route in game/route.py and the
same lap time; only their easing differs. Each box starts its lap over
as soon as it reaches the end.

Controls:
  R       Restart both laps
  Esc     Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from game.route import make_animator
from tick_path import EASINGS
from ui.constants import (
    BG_COLOR,
    DEFAULT_EASING_A,
    DEFAULT_EASING_B,
    DURATION,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    GREEN,
    MIN_FPS,
    RED,
    SCREEN_H,
    SCREEN_W,
)
from ui.hud import draw_box, draw_fps


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Path Demo — tick-path visual demo")
    p.add_argument("--duration", type=float, default=DURATION,
                   help=f"Seconds per lap (default: {DURATION})")
    p.add_argument("--fps", type=int, default=FPS,
                   help=f"Frame-rate cap ({MIN_FPS}-{FPS}, default: {FPS})")
    p.add_argument("--easing-a", choices=sorted(EASINGS), default=DEFAULT_EASING_A,
                   help=f"Easing for the red box (default: {DEFAULT_EASING_A})")
    p.add_argument("--easing-b", choices=sorted(EASINGS), default=DEFAULT_EASING_B,
                   help=f"Easing for the green box (default: {DEFAULT_EASING_B})")
    args = p.parse_args()
    if args.duration <= 0:
        p.error("--duration must be positive")
    args.fps = max(MIN_FPS, min(FPS, args.fps))
    return args


def main() -> None:
    args = parse_args()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Path Demo — tick-path")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

    boxes = [
        (make_animator(args.duration, args.easing_a), RED),
        (make_animator(args.duration, args.easing_b), GREEN),
    ]

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    for animator, _ in boxes:
                        animator.restart()

        # --- Tick ---
        for animator, _ in boxes:
            animator.advance(dt)

        # --- Render ---
        screen.fill(BG_COLOR)
        for animator, color in boxes:
            draw_box(screen, animator.current_position(), color)
        draw_fps(screen, font, clock.get_fps())

        pygame.display.flip()

        for animator, _ in boxes:
            if animator.is_finished():
                animator.restart()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
