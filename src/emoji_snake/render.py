# src/emoji_snake/render.py
from __future__ import annotations
from typing import Optional, Tuple
import logging

import pygame  # type: ignore

from .config import (
    BG, GREEN, LIME, RED, GOLD, PURPLE, TEXT,
    HEAD_GLYPH, BODY_GLYPH, FRUIT_GLYPHS, STAR_GLYPH, POISON_GLYPH,
)
from .grid import Cell, Grid
from .state import Snapshot

logger = logging.getLogger(__name__)

EMOJI_FONTS = "notocoloremoji,segoeuiemoji,applecoloremoji,symbola"


class PygameRenderer:
    """Draws a Snapshot as colored cells with an emoji glyph on top."""

    def __init__(self, screen: pygame.Surface, grid: Grid, cell_size: int):
        self.screen = screen
        self.grid = grid
        self.cell_size = cell_size
        self.glyph_font = pygame.font.SysFont(EMOJI_FONTS, cell_size - 2)
        self.font = pygame.font.SysFont(None, 22)
        self.big_font = pygame.font.SysFont(None, 40)

    def draw_cell(self, cell: Cell, color: Tuple[int, int, int], glyph: Optional[str] = None) -> None:
        x, y = cell
        rect = pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, color, rect)
        if glyph:
            surf = self.glyph_font.render(glyph, True, TEXT)
            self.screen.blit(surf, surf.get_rect(center=rect.center))

    def draw(self, snap: Snapshot) -> None:
        self.screen.fill(BG)
        self.draw_cell(snap.food, RED, FRUIT_GLYPHS[snap.fruit_index])
        self.draw_cell(snap.power_up, GOLD, STAR_GLYPH)
        self.draw_cell(snap.poison, PURPLE, POISON_GLYPH)
        for segment in snap.body:
            self.draw_cell(segment, GREEN, BODY_GLYPH)
        # Head glows while a power-up is running
        self.draw_cell(snap.head, LIME if snap.power_up_active else GREEN, HEAD_GLYPH)

        txt = self.font.render(f"Score: {snap.score}", True, TEXT)
        self.screen.blit(txt, (10, self.screen.get_height() - 20))
        pygame.display.flip()

    def draw_game_over(self, score: int) -> None:
        w, h = self.screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))
        title = self.big_font.render("GAME OVER", True, TEXT)
        sub = self.font.render(f"Score: {score}  -  press any key", True, TEXT)
        self.screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 16)))
        self.screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 20)))
        pygame.display.flip()


class TextRenderer:
    """Headless renderer: logs each frame as a text board."""

    def __init__(self, grid: Grid, level: int = logging.INFO):
        self.grid = grid
        self.level = level

    def draw(self, snap: Snapshot) -> None:
        logger.log(self.level, "\n%s", snap.print_board(self.grid.width, self.grid.height))
