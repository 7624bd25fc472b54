from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol, Sequence

from .shapes import PIECE_TYPES, PieceType


class Randomizer(Protocol):
    def next(self) -> int: ...


class UniformRandomizer:
    """Independent uniform draws over the seven piece types."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def next(self) -> int:
        return int(self.rng.choice(PIECE_TYPES))


class SequenceRandomizer:
    """Replays a fixed list of piece types, for tests and scripted demos."""

    def __init__(self, types: Iterable[int], cycle: bool = True) -> None:
        self.types: Sequence[PieceType] = [PieceType(t) for t in types]
        if not self.types or PieceType.EMPTY in self.types:
            raise ValueError("sequence must contain at least one playable piece type")
        self.cycle = cycle
        self.index = 0

    def next(self) -> int:
        if self.index >= len(self.types):
            if not self.cycle:
                raise IndexError("piece sequence exhausted")
            self.index = 0
        kind = self.types[self.index]
        self.index += 1
        return int(kind)
