"""Box and FPS readout renderers."""
from __future__ import annotations

import pygame

from ui.constants import BOX_SIZE, TEXT_COLOR, TEXT_POS


def draw_box(
    surface: pygame.Surface,
    position: tuple[float, float],
    color: tuple[int, int, int],
) -> None:
    """Draw a filled square with its top-left corner at ``position``."""
    x, y = position
    pygame.draw.rect(surface, color, (round(x), round(y), BOX_SIZE, BOX_SIZE))


def draw_fps(surface: pygame.Surface, font: pygame.font.Font, fps: float) -> None:
    label = font.render(f"FPS: {fps:.0f}", True, TEXT_COLOR)
    surface.blit(label, TEXT_POS)
