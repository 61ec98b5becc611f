from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple, Union

import numpy as np

from .actions import Direction, Rotation, parse_direction, parse_rotation
from .errors import InvalidArgument


class PieceKind(IntEnum):
    O = 1
    I = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


Shape = np.ndarray


BASE_SHAPES = {
    PieceKind.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    PieceKind.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    PieceKind.T: np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8),
    PieceKind.L: np.array([[1, 1, 1], [1, 0, 0]], dtype=np.int8),
    PieceKind.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    PieceKind.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    PieceKind.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
}


def _as_kind(kind) -> PieceKind:
    if isinstance(kind, str):
        try:
            return PieceKind[kind]
        except KeyError:
            raise InvalidArgument(f"unknown piece kind: {kind!r}") from None
    try:
        return PieceKind(kind)
    except ValueError:
        raise InvalidArgument(f"unknown piece kind: {kind!r}") from None


def _as_shape(cells) -> Shape:
    try:
        shape = np.array(cells, dtype=np.int8)
    except ValueError:
        # ragged nested lists
        raise InvalidArgument("piece cells must be rectangular") from None
    if shape.ndim != 2 or shape.size == 0:
        raise InvalidArgument("piece cells must be a non-empty 2D matrix")
    return (shape != 0).astype(np.int8)


def rotated_shape(shape: Shape, direction: Rotation) -> Shape:
    transposed = shape.T
    if direction is Rotation.RIGHT:
        # reverse each row of the transpose: clockwise
        return np.ascontiguousarray(transposed[:, ::-1])
    # reverse the row order of the transpose: counter-clockwise
    return np.ascontiguousarray(transposed[::-1, :])


@dataclass(eq=False)
class Piece:
    """A falling tetromino: a cell matrix plus the field position of its top-left corner.

    The piece never checks bounds; legality of a move or rotation is decided
    by :class:`~tetris_engine.game.grid.Field`.
    """

    kind: PieceKind
    cells: Shape
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        self.kind = _as_kind(self.kind)
        self.cells = _as_shape(self.cells)

    @classmethod
    def spawn(cls, kind: PieceKind) -> "Piece":
        kind = _as_kind(kind)
        return cls(kind, BASE_SHAPES[kind].copy())

    @property
    def origin(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def shape(self) -> Shape:
        """Read-only view of the cell matrix."""
        view = self.cells.view()
        view.flags.writeable = False
        return view

    def copy(self) -> "Piece":
        return Piece(self.kind, self.cells.copy(), self.x, self.y)

    def move(self, direction: Union[str, Direction]) -> None:
        dx, dy = parse_direction(direction).offset
        self.x += dx
        self.y += dy

    def rotate(self, direction: Union[str, Rotation] = Rotation.RIGHT) -> None:
        # Origin stays put, so the piece turns around its top-left corner and
        # its bounding box may change shape. There is no wall kick.
        self.cells = rotated_shape(self.cells, parse_rotation(direction))

    def cells_at(self, origin_x: Optional[int] = None, origin_y: Optional[int] = None) -> List[Tuple[int, int]]:
        if origin_x is None:
            origin_x = self.x
        if origin_y is None:
            origin_y = self.y
        cells: List[Tuple[int, int]] = []
        for dy, dx in zip(*np.nonzero(self.cells)):
            cells.append((origin_x + int(dx), origin_y + int(dy)))
        return cells

    def __repr__(self) -> str:
        rows = ["".join("#" if v else "." for v in row) for row in self.cells]
        return f"Piece({self.kind.name}, x={self.x}, y={self.y}, cells={'/'.join(rows)})"
