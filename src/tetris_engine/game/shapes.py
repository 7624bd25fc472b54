from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class PieceType(IntEnum):
    EMPTY = 0
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows) -> Shape:
    arr = np.array(rows, dtype=np.int8) if rows else np.zeros((0, 0), dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Row 0 is the top of the bounding box; filled cells carry the type id.
CATALOG: Dict[PieceType, Shape] = {
    PieceType.EMPTY: _frozen([]),
    PieceType.I: _frozen([[1, 1, 1, 1]]),
    PieceType.J: _frozen([[2, 0, 0], [2, 2, 2]]),
    PieceType.L: _frozen([[0, 0, 3], [3, 3, 3]]),
    PieceType.O: _frozen([[4, 4], [4, 4]]),
    PieceType.S: _frozen([[0, 5, 5], [5, 5, 0]]),
    PieceType.T: _frozen([[0, 6, 0], [6, 6, 6]]),
    PieceType.Z: _frozen([[7, 7, 0], [0, 7, 7]]),
}

PIECE_TYPES: Tuple[PieceType, ...] = tuple(t for t in PieceType if t != PieceType.EMPTY)


def shape_for(kind: int) -> Shape:
    """Return the catalog shape for a piece type id (read-only)."""
    try:
        return CATALOG[PieceType(kind)]
    except ValueError:
        raise ValueError(f"unknown piece type: {kind!r}") from None


def rotate_cw(shape: Shape) -> Shape:
    """Rotate a shape 90 degrees clockwise: out[c][R-1-r] = in[r][c]."""
    rotated = np.ascontiguousarray(np.rot90(shape, 1, axes=(1, 0)))
    rotated.setflags(write=False)
    return rotated
