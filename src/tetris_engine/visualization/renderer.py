from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_engine.game import Snapshot
from .palette import color_for_value


class Renderer:
    """Draws session snapshots: board, falling piece, next piece and score panel."""

    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 200) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return (
            width * self.cell_size + self.margin * 3 + self.panel_width,
            height * self.cell_size + self.margin * 2,
        )

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            self._font = pygame.font.SysFont(None, 28)
            self._big_font = pygame.font.SysFont(None, 44)
        return self._font, self._big_font

    def _cells_surface(self, cells: np.ndarray) -> pygame.Surface:
        h, w = cells.shape
        surf = pygame.Surface((max(1, w * self.cell_size), max(1, h * self.cell_size)))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(cells[y, x])), rect)
        return surf

    def _draw_panel(self, screen: pygame.Surface, snap: Snapshot, x0: int) -> None:
        font, _ = self._fonts()
        y = self.margin
        screen.blit(font.render("Next:", True, (255, 255, 255)), (x0, y))
        y += 30
        screen.blit(self._cells_surface(snap.next_shape), (x0 + self.cell_size, y))
        y += 3 * self.cell_size
        for line in (f"Score: {snap.score}", f"Level: {snap.level}", f"Lines: {snap.lines}"):
            screen.blit(font.render(line, True, (255, 255, 255)), (x0, y))
            y += 30

    def _draw_game_over(self, screen: pygame.Surface, board_w: int, board_h: int) -> None:
        font, big_font = self._fonts()
        cx = self.margin + board_w // 2
        cy = self.margin + board_h // 2
        title = big_font.render("Game Over", True, (240, 0, 0))
        hint = font.render("Press ENTER to restart", True, (240, 0, 0))
        screen.blit(title, title.get_rect(center=(cx, cy)))
        screen.blit(hint, hint.get_rect(center=(cx, cy + 36)))

    def draw(self, screen: pygame.Surface, snap: Snapshot) -> None:
        grid_surf = self._cells_surface(snap.overlay())
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        self._draw_panel(screen, snap, self.margin * 2 + grid_surf.get_width())
        if snap.game_over:
            self._draw_game_over(screen, grid_surf.get_width(), grid_surf.get_height())
        pygame.display.flip()

