"""Game module for the falling-block engine.

Exports the core game engine and supporting classes:
- GameGrid: Board grid, collision testing, locking and line clearing
- Piece: Falling piece value with clockwise rotation
- PieceType / shape_for: Catalog of the seven tetromino shapes
- UniformRandomizer / SequenceRandomizer: Injectable piece sources
- FlatScoring / WeightedScoring: Scoring and pacing policies
- GameSession: State machine driven by tick() and command()
"""

from .grid import GameGrid, IllegalPlacementError, count_holes, max_height
from .pieces import Piece
from .shapes import PIECE_TYPES, PieceType, rotate_cw, shape_for
from .randomizer import Randomizer, SequenceRandomizer, UniformRandomizer
from .rules import FlatScoring, LockOutcome, PacingState, WeightedScoring, make_scoring
from .core import Command, GameConfig, GameSession, GameState, Snapshot, TickResult

__all__ = [
    "GameGrid",
    "IllegalPlacementError",
    "count_holes",
    "max_height",
    "Piece",
    "PIECE_TYPES",
    "PieceType",
    "rotate_cw",
    "shape_for",
    "Randomizer",
    "SequenceRandomizer",
    "UniformRandomizer",
    "FlatScoring",
    "LockOutcome",
    "PacingState",
    "WeightedScoring",
    "make_scoring",
    "Command",
    "GameConfig",
    "GameSession",
    "GameState",
    "Snapshot",
    "TickResult",
]
