from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

import numpy as np

from .grid import GameGrid
from .pieces import Piece
from .randomizer import Randomizer, UniformRandomizer
from .rules import PacingState, ScoringPolicy, make_scoring
from .shapes import PieceType, Shape, shape_for

logger = logging.getLogger(__name__)


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    RESTART = 4


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    initial_interval: Optional[int] = None  # ms; None uses the scoring policy's default
    scoring: str = "flat"
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board size must be positive, got {self.width}x{self.height}")
        if self.initial_interval is not None and self.initial_interval <= 0:
            raise ValueError(f"initial_interval must be positive, got {self.initial_interval}")


@dataclass(frozen=True)
class TickResult:
    locked: bool = False
    lines_cleared: int = 0
    score_delta: int = 0
    game_over: bool = False


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of a session, safe to hand to renderers and agents."""

    grid: np.ndarray
    piece: Piece
    next_kind: PieceType
    score: int
    level: int
    interval: int
    lines: int
    game_over: bool

    @property
    def state(self) -> GameState:
        return GameState.GAME_OVER if self.game_over else GameState.PLAYING

    @property
    def next_shape(self) -> Shape:
        return shape_for(self.next_kind)

    def overlay(self) -> np.ndarray:
        """Grid copy with the current piece painted in (cells off the board are skipped)."""
        state = self.grid.copy()
        h, w = state.shape
        for x, y in GameGrid.occupied_cells(self.piece.shape, self.piece.col, self.piece.row):
            if 0 <= y < h and 0 <= x < w:
                state[y, x] = int(self.piece.kind)
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return (
            np.array_equal(self.grid, other.grid)
            and self.piece == other.piece
            and (self.next_kind, self.score, self.level, self.interval, self.lines, self.game_over)
            == (other.next_kind, other.score, other.level, other.interval, other.lines, other.game_over)
        )


@dataclass
class _Counters:
    score: int = 0
    level: int = 1
    interval: int = 500
    lines: int = 0
    elapsed_ms: int = 0  # virtual time the current piece has been falling


class GameSession:
    """Falling-block game state machine.

    Driven from outside: a tick source calls `tick()` every `interval`
    milliseconds (see `snapshot().interval`), an input adapter calls
    `command()`. Both are synchronous and must not overlap.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scoring: Optional[Union[str, ScoringPolicy]] = None,
        randomizer: Optional[Randomizer] = None,
        board: Optional[GameGrid] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.scoring = make_scoring(scoring or self.config.scoring, self.config.initial_interval)
        self.randomizer = randomizer or UniformRandomizer(self.config.random_seed)
        if board is not None:
            if (board.width, board.height) != (self.config.width, self.config.height):
                raise ValueError(
                    f"board is {board.width}x{board.height}, config expects {self.config.width}x{self.config.height}"
                )
            self.grid = board.copy()
        else:
            self.grid = GameGrid(self.config.width, self.config.height)
        self.state = GameState.PLAYING
        self.counters = _Counters()
        self.current: Piece
        self.next_kind: PieceType
        self._start(clear_board=board is None)

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def _start(self, clear_board: bool = True) -> None:
        if clear_board:
            self.grid.reset()
        self.state = GameState.PLAYING
        self.counters = _Counters(interval=self.scoring.initial_interval)
        first = self.randomizer.next()
        self.next_kind = PieceType(self.randomizer.next())
        self._spawn(first)

    def _spawn(self, kind: int) -> None:
        self.current = Piece.spawn(kind, self.grid.width)
        self.counters.elapsed_ms = 0
        logger.debug("spawned %s at col=%d", self.current.kind.name, self.current.col)
        if not self.grid.can_place(self.current.shape, self.current.col, self.current.row):
            self.state = GameState.GAME_OVER
            logger.info("game over: score=%d lines=%d level=%d",
                        self.counters.score, self.counters.lines, self.counters.level)

    def _try_move(self, dcol: int, drow: int) -> bool:
        moved = self.current.moved(dcol, drow)
        if self.grid.can_place(moved.shape, moved.col, moved.row):
            self.current = moved
            return True
        return False

    def _rotate(self) -> bool:
        rotated = self.current.rotated()
        if self.grid.can_place(rotated, self.current.col, self.current.row):
            self.current = self.current.with_shape(rotated)
            return True
        return False

    def _lock_piece(self, elapsed_ms: int) -> TickResult:
        piece = self.current
        # Draw first so a failing randomizer leaves the session untouched.
        upcoming = PieceType(self.randomizer.next())
        self.grid.lock(piece.shape, piece.col, piece.row, int(piece.kind))
        lines = self.grid.clear_full_rows()
        c = self.counters
        outcome = self.scoring.on_lock(lines, PacingState(c.level, c.interval, c.lines), elapsed_ms)
        logger.debug("locked %s at col=%d row=%d, cleared %d", piece.kind.name, piece.col, piece.row, lines)
        if outcome.level > c.level:
            logger.info("level %d, tick interval %d ms", outcome.level, outcome.interval)
        c.score += outcome.score_delta
        c.level = outcome.level
        c.interval = outcome.interval
        c.lines = outcome.lines_total

        kind = self.next_kind
        self.next_kind = upcoming
        self._spawn(kind)
        return TickResult(locked=True, lines_cleared=lines, score_delta=outcome.score_delta,
                          game_over=self.game_over)

    def tick(self) -> TickResult:
        """Advance one step of gravity, locking the piece when it cannot fall."""
        if self.game_over:
            return TickResult(game_over=True)
        elapsed_ms = self.counters.elapsed_ms + self.counters.interval
        if self._try_move(0, 1):
            self.counters.elapsed_ms = elapsed_ms
            return TickResult()
        return self._lock_piece(elapsed_ms)

    def command(self, command: Union[Command, int]) -> bool:
        """Apply a player command. Returns True if the state changed."""
        cmd = Command(command)
        if cmd == Command.RESTART:
            if not self.game_over:
                return False
            logger.info("restarting")
            self._start()
            return True
        if self.game_over:
            return False

        if cmd == Command.MOVE_LEFT:
            return self._try_move(-1, 0)
        elif cmd == Command.MOVE_RIGHT:
            return self._try_move(1, 0)
        elif cmd == Command.SOFT_DROP:
            # A blocked soft drop never locks; only tick() does.
            return self._try_move(0, 1)
        elif cmd == Command.ROTATE:
            return self._rotate()
        return False

    def snapshot(self) -> Snapshot:
        grid = self.grid.clone_state()
        grid.setflags(write=False)
        c = self.counters
        return Snapshot(
            grid=grid,
            piece=self.current,
            next_kind=self.next_kind,
            score=c.score,
            level=c.level,
            interval=c.interval,
            lines=c.lines,
            game_over=self.game_over,
        )
