from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1  # noqa: E741
    O = 2  # noqa: E741
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray
Cell = Tuple[int, int]


BASE_SHAPES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}

# Game Boy green for every piece, as on the handheld.
PIECE_COLORS = {kind: (155, 188, 15) for kind in TetrominoType}


def rotate_cw(shape: Shape) -> Shape:
    """Rotate a matrix 90 degrees clockwise: new[i][j] = old[rows - 1 - j][i]."""
    return np.ascontiguousarray(shape[::-1].T)


@dataclass(eq=False)
class Piece:
    """A falling tetromino.

    `kind` never changes. Position and shape are mutated in place by the
    engine, which validates every change against the board first; the piece
    itself performs no bounds checking.
    """

    kind: TetrominoType
    x: int = 0
    y: int = 0
    rotation: int = 0  # 0..3
    shape: Shape = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.shape is None:
            self.shape = BASE_SHAPES[self.kind].copy()

    @classmethod
    def spawn(cls, kind: TetrominoType, x: int, y: int) -> "Piece":
        return cls(kind=TetrominoType(kind), x=x, y=y)

    @property
    def color(self) -> Tuple[int, int, int]:
        return PIECE_COLORS[self.kind]

    def rotated_shape(self) -> Shape:
        # Candidate only; the caller commits it with apply_rotation().
        return rotate_cw(self.shape)

    def apply_rotation(self, shape: Shape) -> None:
        self.shape = shape
        self.rotation = (self.rotation + 1) % 4

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def cells(self, dx: int = 0, dy: int = 0, shape: Optional[Shape] = None) -> List[Cell]:
        s = self.shape if shape is None else shape
        h, w = s.shape
        cells: List[Cell] = []
        for row in range(h):
            for col in range(w):
                if s[row, col]:
                    cells.append((self.x + dx + col, self.y + dy + row))
        return cells
