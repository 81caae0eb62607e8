from __future__ import annotations

from typing import Optional, Tuple

import pygame

from retro_tetris.game import GameSnapshot
from .hud import format_hud, overlay_message


Color = Tuple[int, int, int]

# Game Boy palette, darkest to lightest
DARKEST: Color = (15, 56, 15)
DARK: Color = (48, 98, 48)
LIGHT: Color = (139, 172, 15)
LIGHTEST: Color = (155, 188, 15)


class Renderer:
    def __init__(self, cell_size: int = 24, margin: int = 20, preview_cell: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.preview_cell = preview_cell

    def window_size(self, board_width: int, board_height: int) -> Tuple[int, int]:
        panel = 6 * self.preview_cell
        width = self.margin * 3 + board_width * self.cell_size + panel
        height = self.margin * 2 + board_height * self.cell_size
        return width, height

    def _cell(self, surf: pygame.Surface, left: int, top: int, size: int, color: Color) -> None:
        rect = pygame.Rect(left, top, size, size)
        pygame.draw.rect(surf, color, rect)
        pygame.draw.rect(surf, DARKEST, rect, 1)

    def _board(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        h, w = snapshot.board.shape
        frame = pygame.Rect(self.margin, self.margin, w * self.cell_size, h * self.cell_size)
        pygame.draw.rect(screen, DARKEST, frame)
        for y in range(h):
            for x in range(w):
                if snapshot.board[y, x]:
                    self._cell(screen, self.margin + x * self.cell_size,
                               self.margin + y * self.cell_size, self.cell_size, LIGHTEST)
        color = snapshot.current_color or LIGHTEST
        for x, y in snapshot.current_cells:
            # parts of the piece above the board are not drawn
            if y >= 0:
                self._cell(screen, self.margin + x * self.cell_size,
                           self.margin + y * self.cell_size, self.cell_size, color)
        pygame.draw.rect(screen, LIGHT, frame, 2)

    def _preview(self, screen: pygame.Surface, snapshot: GameSnapshot, left: int, top: int) -> None:
        box = pygame.Rect(left, top, 5 * self.preview_cell, 4 * self.preview_cell)
        pygame.draw.rect(screen, DARKEST, box)
        pygame.draw.rect(screen, LIGHT, box, 2)
        shape = snapshot.next_shape
        if shape is None:
            return
        rows, cols = shape.shape
        off_x = box.x + (box.width - cols * self.preview_cell) // 2
        off_y = box.y + (box.height - rows * self.preview_cell) // 2
        for r in range(rows):
            for c in range(cols):
                if shape[r, c]:
                    self._cell(screen, off_x + c * self.preview_cell,
                               off_y + r * self.preview_cell, self.preview_cell, LIGHTEST)

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot,
             font: Optional[pygame.font.Font] = None) -> None:
        screen.fill(DARK)
        self._board(screen, snapshot)
        _, w = snapshot.board.shape
        panel_x = self.margin * 2 + w * self.cell_size
        self._preview(screen, snapshot, panel_x, self.margin)
        if font is None:
            return

        hud = format_hud(snapshot)
        y_text = self.margin + 5 * self.preview_cell
        for label, key in (("SCORE", "score"), ("LEVEL", "level"),
                           ("LINES", "lines"), ("HI", "high_score")):
            img = font.render(f"{label} {hud[key]}", True, LIGHTEST)
            screen.blit(img, (panel_x, y_text))
            y_text += font.get_linesize() + 4

        message = overlay_message(snapshot.state)
        if message:
            h, _ = snapshot.board.shape
            center_x = self.margin + w * self.cell_size // 2
            center_y = self.margin + h * self.cell_size // 2
            lines = message.split("\n")
            line_h = font.get_linesize()
            top = center_y - line_h * len(lines) // 2
            for i, line in enumerate(lines):
                img = font.render(line, True, LIGHTEST, DARKEST)
                rect = img.get_rect(center=(center_x, top + i * line_h + line_h // 2))
                screen.blit(img, rect)
