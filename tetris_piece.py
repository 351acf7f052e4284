
"""Piece model, shape templates, plain clockwise rotation"""
from dataclasses import dataclass
from typing import List

COLS, ROWS = 10, 20
SPAWN_X, SPAWN_Y = 4, 0

# I, J, L, Z, S, T, O; SHAPES[i] locks as fill-code i + 1
SHAPES = (
    ((0,1,0,0),
     (0,1,0,0),
     (0,1,0,0),
     (0,1,0,0)),
    ((0,1,0),
     (0,1,0),
     (1,1,0)),
    ((0,1,0),
     (0,1,0),
     (0,1,1)),
    ((1,1,0),
     (0,1,1),
     (0,0,0)),
    ((0,1,1),
     (1,1,0),
     (0,0,0)),
    ((1,1,1),
     (0,1,0),
     (0,0,0)),
    ((1,1),
     (1,1)),
)


def rotate_cw(mat: List[List[int]]) -> List[List[int]]:
    """Transpose, then reverse each row."""
    assert all(len(r) == len(mat) for r in mat), "rotation needs a square matrix"
    return [list(col)[::-1] for col in zip(*mat)]


@dataclass
class FallingPiece:
    shape: List[List[int]]
    code: int
    x: int
    y: int

    def cells(self):
        """Absolute (col, row) of every filled cell."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]


def spawn_piece(index: int) -> FallingPiece:
    if not 0 <= index < len(SHAPES):
        raise ValueError(f"shape index out of range: {index}")
    shape = [list(row) for row in SHAPES[index]]
    return FallingPiece(shape, index + 1, SPAWN_X, SPAWN_Y)
