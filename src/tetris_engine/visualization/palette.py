from __future__ import annotations

from typing import Tuple

import numpy as np


PALETTE = {
    0: (20, 20, 26),
    1: (0, 240, 240),    # I
    2: (0, 0, 240),      # J
    3: (240, 160, 0),    # L
    4: (240, 240, 0),    # O
    5: (0, 240, 0),      # S
    6: (255, 175, 175),  # T
    7: (240, 0, 0),      # Z
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    return PALETTE.get(abs(v), (200, 200, 200))


def render_rgb(cells: np.ndarray, cell: int = 12) -> np.ndarray:
    """Rasterize a cell grid to an RGB array without a display."""
    h, w = cells.shape
    img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(cells[y, x]))
    return img
