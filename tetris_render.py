
"""
Rendering helpers for the Tetris project.

- The Renderer is the game's render sink: draw(board, piece) repaints the
  board area from fill-codes, one filled square per cell.
- set_score() is the score sink; the text surface is re-rendered only when
  the value changes.
- Palette index 0 is the board background and follows the light/dark theme.
"""
from __future__ import annotations
import pygame
from typing import List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, FallingPiece
from tetris_board import cell_at

Color = Tuple[int, int, int]

def hex_color(s: str) -> Color:
    s = s.lstrip("#")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))

# Fill-code -> color; index 0 is replaced per theme
PALETTE: List[Color] = [hex_color(h) for h in (
    "#1a1a1a", "#9b5fe0", "#16a4d8", "#60dbe8",
    "#8bd346", "#efdf48", "#f9a52c", "#d64e12",
)]

BACKGROUND = {"dark": hex_color("#1a1a1a"), "light": hex_color("#ffffff")}
WINDOW_BG = {"dark": (10, 13, 34), "light": (225, 228, 240)}
TEXT = {"dark": (200, 210, 240), "light": (40, 45, 70)}
DIM_TEXT = {"dark": (165, 175, 215), "light": (90, 95, 125)}

def palette_for(theme: str) -> List[Color]:
    pal = list(PALETTE)
    pal[0] = BACKGROUND[theme]
    return pal

CONTROLS = (
    "Controls:",
    "←/→ Move",
    "↓ Soft drop",
    "↑ Rotate",
    "Swipe / tap on touch",
    "R Restart",
    "T Theme",
)

class Renderer:
    def __init__(self, screen: pygame.Surface, dims: Dims, font: pygame.font.Font, theme: str = "dark"):
        self.screen = screen
        self.dims = dims
        self.font = font
        self._score = -1
        self._score_s: Optional[pygame.Surface] = None
        self.set_theme(theme)

    def set_theme(self, theme: str):
        self.theme = theme
        self.palette = palette_for(theme)
        self._controls = [self.font.render(t, True, TEXT[theme] if i == 0 else DIM_TEXT[theme])
                          for i, t in enumerate(CONTROLS)]
        self._title = self.font.render("Tetris", True, TEXT[theme])
        self._score = -1

    # ---------- Render sink ----------
    def draw(self, board: List[List[int]], piece: Optional[FallingPiece]):
        for y in range(ROWS):
            for x in range(COLS):
                pygame.draw.rect(self.screen, self.palette[cell_at(board, piece, x, y)],
                                 self.dims.cell_rect(x, y))

    # ---------- Score sink ----------
    def set_score(self, score: int):
        if score != self._score:
            self._score = score
            self._score_s = self.font.render(f"Score: {score}", True, TEXT[self.theme])

    # ---------- Frame ----------
    def draw_frame(self, board: List[List[int]], piece: Optional[FallingPiece]):
        d = self.dims
        self.screen.fill(WINDOW_BG[self.theme])
        self.draw(board, piece)
        px, py, pw, ph = d.panel_rect
        self.screen.blit(self._title, (px + 12, py + 12))
        if self._score_s: self.screen.blit(self._score_s, (px + 12, py + 44))
        y = py + 96
        for surf in self._controls:
            self.screen.blit(surf, (px + 12, y)); y += 20
