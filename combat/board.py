from typing import Iterable, Tuple

import numpy as np


class Board:
    """Static walkable-tile mask for one map. Never mutated after construction."""

    def __init__(self, walkable: np.ndarray):
        self._walkable = np.array(walkable, dtype=bool)
        self._walkable.setflags(write=False)

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tuple[int, int]], shape: Tuple[int, int]) -> "Board":
        mask = np.zeros(shape, dtype=bool)
        for row, col in tiles:
            mask[row, col] = True
        return cls(mask)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._walkable.shape

    def contains(self, pos: Tuple[int, int]) -> bool:
        row, col = pos
        rows, cols = self._walkable.shape
        if row < 0 or col < 0 or row >= rows or col >= cols:
            return False
        return bool(self._walkable[row, col])

    def __len__(self) -> int:
        return int(self._walkable.sum())

    def glyphs(self) -> np.ndarray:
        """Character grid of walls and floor, for rendering."""
        return np.where(self._walkable, ".", "#")
