from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from .shapes import PieceType, Shape, rotate_cw, shape_for


@dataclass(frozen=True, eq=False)
class Piece:
    """A falling piece: type id, current shape and origin on the board.

    Pieces are values. Moving or rotating returns a new Piece; legality is
    decided by the board, never here.
    """

    kind: PieceType
    shape: Shape
    col: int = 0
    row: int = 0

    @classmethod
    def spawn(cls, kind: int, board_width: int) -> "Piece":
        piece = cls(PieceType(kind), shape_for(kind))
        return replace(piece, col=(board_width - piece.width) // 2)

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def rotated(self) -> Shape:
        return rotate_cw(self.shape)

    def moved(self, dcol: int, drow: int) -> "Piece":
        return replace(self, col=self.col + dcol, row=self.row + drow)

    def with_shape(self, shape: Shape) -> "Piece":
        return replace(self, shape=shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.col == other.col
            and self.row == other.row
            and np.array_equal(self.shape, other.shape)
        )
