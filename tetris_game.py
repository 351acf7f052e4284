
"""
Game-state engine: board, falling piece, score and the tick that drives them.

GameState never draws or reads input devices itself. The host injects:

  • render(board, piece)   called after every move, rotation and tick
  • score(total)           called whenever the score is refreshed
  • game_over(score)       called once, synchronously, when a piece locks
                           without ever having left the spawn row

and a TickScheduler which the host advances from its frame loop.
"""
from typing import Callable, Optional

from tetris_board import (Board, new_board, collide, merge,
                          clear_completed_lines, score_for_lines)
from tetris_config import CONFIG
from tetris_piece import FallingPiece, SPAWN_Y, rotate_cw, spawn_piece
from tetris_rng import PieceRandom
from tetris_scheduler import TickScheduler

RenderSink = Callable[[Board, Optional[FallingPiece]], None]
ScoreSink = Callable[[int], None]
GameOverSink = Callable[[int], None]

ACTIONS = ("left", "right", "down", "rotate")


def _ignore(*_args):
    pass


class GameState:
    def __init__(self, scheduler: TickScheduler,
                 render: Optional[RenderSink] = None,
                 score: Optional[ScoreSink] = None,
                 game_over: Optional[GameOverSink] = None,
                 rng: Optional[PieceRandom] = None,
                 tick_ms: Optional[int] = None):
        self.scheduler = scheduler
        self.render_sink = render or _ignore
        self.score_sink = score or _ignore
        self.game_over_sink = game_over or _ignore
        self.rng = rng or PieceRandom(CONFIG["SEED"])
        self.tick_ms = tick_ms or CONFIG["TICK_MS"]

        self.board: Board = new_board()
        self.piece: Optional[FallingPiece] = None
        self.score = 0
        self.running = False
        self._tick_handle: Optional[int] = None

    # ---------- Lifecycle ----------
    def start_game(self):
        if self.running:
            return
        self.running = True
        self._tick_handle = self.scheduler.set_interval(self.tick_ms, self.tick)

    def stop(self):
        self.scheduler.cancel(self._tick_handle)
        self._tick_handle = None
        self.running = False

    def restart_game(self):
        self.stop()
        self.board = new_board()
        self.piece = None
        self.score = 0
        self.score_sink(self.score)
        self.start_game()

    # ---------- Tick ----------
    def tick(self):
        cleared = clear_completed_lines(self.board)
        self.score += score_for_lines(cleared)
        self.score_sink(self.score)
        if self.piece is None:
            self.spawn_piece()
        self.step_down()

    def spawn_piece(self) -> FallingPiece:
        self.piece = spawn_piece(self.rng.next_index())
        return self.piece

    # ---------- Collision ----------
    def collision(self, x: int, y: int, shape=None) -> bool:
        """Would the active piece (or `shape`) be illegal at (x, y)?

        With neither an active piece nor a shape there is nothing to place.
        """
        if shape is None:
            if self.piece is None:
                return False
            shape = self.piece.shape
        return collide(self.board, shape, x, y)

    # ---------- Movement ----------
    def step_down(self):
        p = self.piece
        if p is None:
            return
        if not self.collision(p.x, p.y + 1):
            p.y += 1
        else:
            self.lock()
        self.render_sink(self.board, self.piece)

    def lock(self):
        p = self.piece
        merge(self.board, p)
        self.piece = None
        if p.y == SPAWN_Y:
            self.stop()
            self.game_over_sink(self.score)

    def _shift(self, dx: int):
        p = self.piece
        if p is not None and not self.collision(p.x + dx, p.y):
            p.x += dx
        self.render_sink(self.board, self.piece)

    def move_left(self):
        self._shift(-1)

    def move_right(self):
        self._shift(1)

    def rotate(self):
        p = self.piece
        if p is None:
            return
        turned = rotate_cw(p.shape)
        if not self.collision(p.x, p.y, turned):
            p.shape = turned
        self.render_sink(self.board, self.piece)

    # ---------- Input ----------
    def handle_input(self, action: str) -> bool:
        """Apply a player action; ignored (False) while the game is stopped."""
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}")
        if not self.running:
            return False
        if action == "left":
            self.move_left()
        elif action == "right":
            self.move_right()
        elif action == "down":
            self.step_down()
        else:
            self.rotate()
        return True
