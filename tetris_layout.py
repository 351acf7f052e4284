# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

Rect = Tuple[int, int, int, int]

@dataclass(frozen=True)
class Dims:
    cell: int
    margin: int = 16
    panel_w: int = 200

    @property
    def board_w(self) -> int: return COLS * self.cell
    @property
    def board_h(self) -> int: return ROWS * self.cell
    @property
    def total_w(self) -> int: return self.margin * 3 + self.board_w + self.panel_w
    @property
    def total_h(self) -> int: return self.margin * 2 + self.board_h

    @property
    def board_rect(self) -> Rect:
        return (self.margin, self.margin, self.board_w, self.board_h)

    @property
    def panel_rect(self) -> Rect:
        return (self.margin * 2 + self.board_w, self.margin, self.panel_w, self.board_h)

    def cell_rect(self, col: int, row: int) -> Rect:
        """Pixel square of one board cell (unit square scaled by cell)."""
        return (self.margin + col * self.cell, self.margin + row * self.cell, self.cell, self.cell)

def compute_dims() -> Dims:
    return Dims(cell=int(CONFIG["CELL_SIZE"]))
