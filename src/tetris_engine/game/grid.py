from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np

from .actions import Action, parse_action
from .errors import InvalidArgument
from .pieces import Piece, PieceKind

logger = logging.getLogger(__name__)


EMPTY = 0


@dataclass
class PlacementResult:
    lines_cleared: int
    cleared_rows: Tuple[int, ...] = field(default_factory=tuple)


class Field:
    """Fixed-size playfield holding the cells of settled pieces.

    The grid uses 0 for empty cells and the ``PieceKind`` value of the piece
    that filled it otherwise. Row 0 is the top. The falling piece is never
    part of the grid until it is placed.
    """

    def __init__(self, width: int, height: int) -> None:
        if not _is_positive_int(width) or not _is_positive_int(height):
            raise InvalidArgument(f"field size must be positive integers, got {width!r}x{height!r}")
        self.width = int(width)
        self.height = int(height)
        self._grid = np.zeros((self.height, self.width), dtype=np.int8)

    @property
    def grid(self) -> np.ndarray:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def cell(self, x: int, y: int) -> Optional[PieceKind]:
        if not self.is_inside(x, y):
            return None
        value = int(self._grid[y, x])
        return PieceKind(value) if value != EMPTY else None

    def rows(self) -> List[List[Optional[PieceKind]]]:
        return [[PieceKind(v) if v != EMPTY else None for v in row] for row in self._grid.tolist()]

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self._grid[y] != EMPTY))

    def is_row_empty(self, y: int) -> bool:
        return not bool(np.any(self._grid[y] != EMPTY))

    def reset(self) -> None:
        self._grid.fill(EMPTY)

    def check_collision(self, piece: Piece, action: Union[str, Action]) -> bool:
        """Return True if applying ``action`` to ``piece`` would leave the legal area.

        Rotations are tested as the rotated footprint at the current origin,
        movements as the current footprint shifted by one cell. Cells above
        the top row never collide. Neither the piece nor the field changes.
        """
        action = parse_action(action)
        dx, dy = 0, 0
        candidate = piece.copy()
        if action.rotation is not None:
            candidate.rotate(action.rotation)
        elif action.direction is not None:
            dx, dy = action.direction.offset
        else:
            raise InvalidArgument(f"{action.value!r} is not a movement or rotation")

        for x, y in candidate.cells_at(candidate.x + dx, candidate.y + dy):
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self._grid[y, x] != EMPTY:
                return True
        return False

    def place_piece(self, piece: Piece) -> PlacementResult:
        """Write ``piece`` into the grid and clear any row it completed.

        The caller is expected to have checked the placement with
        :meth:`check_collision`. Cells still above the top row are dropped.
        """
        value = int(piece.kind)
        touched = set()
        for x, y in piece.cells_at():
            if not self.is_inside(x, y):
                continue
            self._grid[y, x] = value
            touched.add(y)

        # Clearing top-down keeps the indices of the remaining lower rows valid.
        cleared = tuple(y for y in sorted(touched) if self.is_row_full(y))
        for y in cleared:
            self.clear_row(y)
        if cleared:
            logger.debug("cleared rows %s", cleared)
        return PlacementResult(lines_cleared=len(cleared), cleared_rows=cleared)

    def clear_row(self, index: int) -> None:
        if not 0 <= index < self.height:
            raise InvalidArgument(f"row index out of range: {index}")
        remaining = np.delete(self._grid, index, axis=0)
        empty_row = np.zeros((1, self.width), dtype=np.int8)
        self._grid = np.vstack((empty_row, remaining))

    def clone_state(self) -> np.ndarray:
        return self._grid.copy()

    def __repr__(self) -> str:
        return f"Field(width={self.width}, height={self.height})"


def _is_positive_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value > 0
