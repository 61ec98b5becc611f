from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_engine.game import Game, Piece, PieceKind


PALETTE = {
    PieceKind.O: (203, 222, 16),
    PieceKind.I: (35, 242, 232),
    PieceKind.J: (23, 12, 244),
    PieceKind.L: (254, 165, 10),
    PieceKind.S: (2, 245, 11),
    PieceKind.Z: (250, 10, 8),
    PieceKind.T: (132, 10, 145),
}
EMPTY_COLOR = (20, 20, 26)


def _color_for_value(v: int) -> Tuple[int, int, int]:
    # Falling piece cells arrive negated from Game.get_state()
    if v == 0:
        return EMPTY_COLOR
    return PALETTE.get(PieceKind(abs(v)), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, preview_slots: int = 4) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.preview_slots = preview_slots
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, game: Game) -> Tuple[int, int]:
        panel_w = 5 * self.cell_size
        width = self.margin * 4 + panel_w * 2 + game.field.width * self.cell_size
        height = self.margin * 2 + game.field.height * self.cell_size
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: Piece, x0: int, y0: int) -> None:
        size = self.cell_size // 2
        color = PALETTE[piece.kind]
        shape = piece.shape()
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    rect = pygame.Rect(x0 + px * size, y0 + py * size, size - 1, size - 1)
                    pygame.draw.rect(screen, color, rect)

    def _label(self, screen: pygame.Surface, text: str, center: Tuple[int, int]) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 32)
        surf = self._font.render(text, True, (255, 255, 255))
        screen.blit(surf, surf.get_rect(center=center))

    def draw(self, screen: pygame.Surface, game: Game) -> None:
        panel_w = 5 * self.cell_size
        board_x = self.margin * 2 + panel_w
        screen.fill((10, 10, 14))

        if game.hold_piece is not None:
            self._draw_preview(screen, game.hold_piece, self.margin, self.margin)

        screen.blit(self._grid_surface(game.get_state()), (board_x, self.margin))

        queue_x = board_x + game.field.width * self.cell_size + self.margin
        for idx, piece in enumerate(game.next_pieces[: self.preview_slots]):
            self._draw_preview(screen, piece, queue_x, self.margin + idx * self.cell_size * 3)

        center = (screen.get_width() // 2, screen.get_height() // 2)
        if game.is_over:
            self._label(screen, "Game Over - Space to restart", center)
        elif game.paused:
            self._label(screen, "Paused", center)
        pygame.display.flip()
