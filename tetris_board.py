
"""Board helpers: collide, merge, line clear, scoring"""
from typing import List, Optional, Sequence
from tetris_piece import FallingPiece, COLS, ROWS

Board = List[List[int]]

# Points per pass, keyed by rows cleared; 4 or more pays the top entry
SCORE_TABLE = {0: 0, 1: 10, 2: 30, 3: 50, 4: 100}


def new_board() -> Board:
    return [[0] * COLS for _ in range(ROWS)]


def collide(board: Board, shape: Sequence[Sequence[int]], x: int, y: int) -> bool:
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v: continue
            bx, by = x + c, y + r
            if bx < 0 or bx >= COLS or by < 0 or by >= ROWS: return True
            if board[by][bx]: return True
    return False


def merge(board: Board, piece: FallingPiece):
    """Write the piece's fill-code into the board (no collision check)."""
    for bx, by in piece.cells():
        assert 0 <= bx < COLS and 0 <= by < ROWS, f"merge outside board at {(bx, by)}"
        board[by][bx] = piece.code


def is_row_complete(row: Sequence[int]) -> bool:
    return all(v != 0 for v in row)


def clear_completed_lines(board: Board) -> int:
    """Remove complete rows in one top-to-bottom pass.

    A removed row is deleted where it stands and an empty row is pushed in at
    the top; the scan then carries on at the next index of the shifted grid.
    """
    cleared = 0
    for i in range(len(board)):
        if is_row_complete(board[i]):
            cleared += 1
            del board[i]
            board.insert(0, [0] * COLS)
    return cleared


def score_for_lines(count: int) -> int:
    if count < 0:
        raise ValueError(f"negative line count: {count}")
    return SCORE_TABLE[min(count, 4)]


def cell_at(board: Board, piece: Optional[FallingPiece], x: int, y: int) -> int:
    """Fill-code visible at (x, y), the falling piece drawn over the board."""
    if piece is not None and (x, y) in piece.cells():
        return piece.code
    return board[y][x]
