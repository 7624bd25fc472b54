from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

from .shapes import Shape


Coordinate = Tuple[int, int]


class IllegalPlacementError(ValueError):
    """Raised when locking a shape that does not fit at the requested position."""


class GameGrid:
    """Fixed-size 2D board of settled cells.

    The grid uses 0 for empty cells and piece type ids (1..7) for filled cells,
    so the stored value doubles as a color index. Row 0 is the top.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    @staticmethod
    def occupied_cells(shape: Shape, col: int, row: int) -> List[Coordinate]:
        """Board (col, row) coordinates covered by the filled cells of `shape`."""
        rows, cols = np.nonzero(shape)
        return [(col + int(c), row + int(r)) for r, c in zip(rows, cols)]

    def can_place(self, shape: Shape, col: int, row: int) -> bool:
        for x, y in self.occupied_cells(shape, col, row):
            if not self.is_inside(x, y):
                return False
            if self.grid[y, x] != 0:
                return False
        return True

    def lock(self, shape: Shape, col: int, row: int, value: int) -> None:
        """Write `value` into every cell covered by `shape`.

        The placement must already have passed `can_place`.
        """
        if not self.can_place(shape, col, row):
            raise IllegalPlacementError(f"shape does not fit at col={col} row={row}")
        for x, y in self.occupied_cells(shape, col, row):
            self.grid[y, x] = value

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != 0, axis=1))[0]

    def clear_full_rows(self) -> int:
        """Remove every full row at once and return how many were removed.

        Surviving rows keep their order and settle to the bottom; the same
        number of empty rows is inserted at the top.
        """
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        remaining = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=self.grid.dtype)
        self.grid = np.vstack((new_rows, remaining))
        return num

    def fill_rows(self, rows: Iterable[int], value: int = 1, gap: int | None = None) -> None:
        """Fill whole rows with `value`, optionally leaving column `gap` empty.

        Used to build pre-filled boards for `GameSession(board=...)`.
        """
        for y in rows:
            self.grid[y, :] = value
            if gap is not None:
                self.grid[y, gap] = 0

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.grid = self.grid.copy()
        return new_grid


def max_height(cells: np.ndarray) -> int:
    """Height of the tallest column; row 0 is the top."""
    non_empty_rows = np.where(np.any(cells != 0, axis=1))[0]
    if non_empty_rows.size == 0:
        return 0
    return int(cells.shape[0]) - int(non_empty_rows[0])


def count_holes(cells: np.ndarray) -> int:
    """Empty cells that have a filled cell somewhere above them in the same column."""
    holes = 0
    for x in range(cells.shape[1]):
        seen_block = False
        for cell in cells[:, x]:
            if cell != 0:
                seen_block = True
            elif seen_block:
                holes += 1
    return holes
