from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class GameGrid:
    """Discrete 2D playfield.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values correspond to tetromino indices for optional coloring.
    Row 0 is the top of the visible board; pieces may hang above it (y < 0)
    while falling.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        return self.is_inside(x, y) and self.grid[y, x] != 0

    def is_valid_placement(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return False
            # Above the board only the columns are checked.
            if y >= 0 and self.grid[y, x] != 0:
                return False
        return True

    def lock(self, cells: Iterable[Coordinate], value: int = 1) -> None:
        """Write cells into the grid; cells outside the board are dropped."""
        for x, y in cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                self.grid[y, x] = value

    def clear_full_lines(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        remaining = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=self.grid.dtype)
        self.grid = np.vstack((new_rows, remaining))
        return num

    def column_heights(self) -> List[int]:
        heights: List[int] = []
        for x in range(self.width):
            filled = np.flatnonzero(self.grid[:, x])
            heights.append(0 if filled.size == 0 else self.height - int(filled[0]))
        return heights

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
